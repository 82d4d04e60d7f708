"""MemberRepository protocol for member persistence."""

from typing import Protocol

from src.domain.entities.member import Member
from src.domain.value_objects import MemberId


class MemberRepository(Protocol):
    """Member repository protocol (port).

    Methods:
        find_by_id: Retrieve member by ID
        find_by_email: Retrieve member by (normalized) email
        find_all: Retrieve all members
        save: Create or update member
        exists: Check member exists
    """

    async def find_by_id(self, member_id: MemberId) -> Member | None:
        ...

    async def find_by_email(self, email: str) -> Member | None:
        """Find member by email.

        Args:
            email: Email address, already normalized by the Email value object.

        Returns:
            Member if found, None otherwise.
        """
        ...

    async def find_all(self) -> list[Member]:
        ...

    async def save(self, member: Member) -> None:
        ...

    async def exists(self, member_id: MemberId) -> bool:
        ...
