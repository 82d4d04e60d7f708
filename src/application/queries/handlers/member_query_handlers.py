"""Member query handlers.

GetMember and GetMemberRentals share the member lookup and live together.
"""

from datetime import UTC, datetime

from src.application.commands.handlers.lookup_errors import member_not_found
from src.application.dtos import MemberResult, RentalResult
from src.application.queries.member_queries import GetMember, GetMemberRentals
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import MemberRepository, RentalRepository
from src.domain.value_objects import MemberId


class GetMemberHandler:
    def __init__(self, member_repo: MemberRepository) -> None:
        self._member_repo = member_repo

    async def handle(self, query: GetMember) -> Result[MemberResult, DomainError]:
        member = await self._member_repo.find_by_id(MemberId(query.member_id))
        if member is None:
            return Failure(error=member_not_found(query.member_id))
        return Success(value=MemberResult.from_entity(member))


class GetMemberRentalsHandler:
    """Handler for GetMemberRentals query.

    Returns the member's rentals, newest first. Fails with NOT_FOUND for an
    unknown member rather than returning an empty list.
    """

    def __init__(
        self,
        member_repo: MemberRepository,
        rental_repo: RentalRepository,
    ) -> None:
        self._member_repo = member_repo
        self._rental_repo = rental_repo

    async def handle(self, query: GetMemberRentals) -> Result[list[RentalResult], DomainError]:
        member_id = MemberId(query.member_id)
        if not await self._member_repo.exists(member_id):
            return Failure(error=member_not_found(query.member_id))

        rentals = await self._rental_repo.find_by_member(
            member_id, active_only=query.active_only
        )
        now = datetime.now(UTC)
        return Success(value=[RentalResult.from_entity(rental, now) for rental in rentals])
