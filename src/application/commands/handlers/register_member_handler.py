"""RegisterMember command handler.

Email addresses are unique across members; the check uses the normalized
address so "Ada@Example.com" and "Ada@example.com" collide.
"""

from src.application.commands.handlers.input_parsing import parse_tier
from src.application.commands.member_commands import RegisterMember
from src.application.dtos import MemberResult
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Member
from src.domain.events import MemberRegistered
from src.domain.protocols import EventBusProtocol, MemberRepository
from src.domain.value_objects import is_valid_email


class RegisterMemberHandler:
    """Handler for RegisterMember command.

    Dependencies (injected via constructor):
        - MemberRepository: For uniqueness check and persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        member_repo: MemberRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._member_repo = member_repo
        self._event_bus = event_bus

    async def handle(self, cmd: RegisterMember) -> Result[MemberResult, DomainError]:
        """Handle RegisterMember command.

        Returns:
            Success(MemberResult): Member registered.
            Failure(ValidationError): Malformed name, email or tier.
            Failure(ConflictError): EMAIL_ALREADY_EXISTS.
        """
        tier_result = parse_tier(cmd.tier)
        if isinstance(tier_result, Failure):
            return tier_result

        if not is_valid_email(cmd.email):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message=f"Invalid email address: {cmd.email}",
                    field="email",
                )
            )

        try:
            member = Member.create(name=cmd.name, email=cmd.email, tier=tier_result.value)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=str(e),
                    field="name",
                )
            )

        if await self._member_repo.find_by_email(member.email) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=f"A member with email {member.email} already exists",
                    resource_type="Member",
                    conflicting_field="email",
                )
            )

        await self._member_repo.save(member)

        await self._event_bus.publish(
            MemberRegistered(
                member_id=member.id,
                email=member.email,
                tier=member.tier.value,
            )
        )

        return Success(value=MemberResult.from_entity(member))
