"""UpdateMemberTier command handler."""

from src.application.commands.handlers.input_parsing import parse_tier
from src.application.commands.handlers.lookup_errors import member_not_found
from src.application.commands.member_commands import UpdateMemberTier
from src.application.dtos import MemberResult
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.events import MemberTierChanged
from src.domain.protocols import EventBusProtocol, MemberRepository
from src.domain.value_objects import MemberId


class UpdateMemberTierHandler:
    """Handler for UpdateMemberTier command.

    Open rentals keep the terms they were created with; the new tier
    applies to later charges. Setting the current tier is a no-op.
    """

    def __init__(
        self,
        member_repo: MemberRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._member_repo = member_repo
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateMemberTier) -> Result[MemberResult, DomainError]:
        tier_result = parse_tier(cmd.tier)
        if isinstance(tier_result, Failure):
            return tier_result

        member = await self._member_repo.find_by_id(MemberId(cmd.member_id))
        if member is None:
            return Failure(error=member_not_found(cmd.member_id))

        previous_tier = member.tier
        if tier_result.value != previous_tier:
            member.upgrade_tier(tier_result.value)
            await self._member_repo.save(member)
            await self._event_bus.publish(
                MemberTierChanged(
                    member_id=member.id,
                    previous_tier=previous_tier.value,
                    new_tier=member.tier.value,
                )
            )

        return Success(value=MemberResult.from_entity(member))
