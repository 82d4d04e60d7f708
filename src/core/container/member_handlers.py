"""Member handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.application.commands.handlers.register_member_handler import (
        RegisterMemberHandler,
    )
    from src.application.commands.handlers.update_member_tier_handler import (
        UpdateMemberTierHandler,
    )
    from src.application.queries.handlers.member_query_handlers import (
        GetMemberHandler,
        GetMemberRentalsHandler,
    )


async def get_register_member_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterMemberHandler":
    from src.application.commands.handlers.register_member_handler import (
        RegisterMemberHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    return RegisterMemberHandler(
        member_repo=MemberRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_update_member_tier_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateMemberTierHandler":
    from src.application.commands.handlers.update_member_tier_handler import (
        UpdateMemberTierHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    return UpdateMemberTierHandler(
        member_repo=MemberRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_get_member_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetMemberHandler":
    from src.application.queries.handlers.member_query_handlers import (
        GetMemberHandler,
    )
    from src.infrastructure.persistence.repositories import MemberRepository

    return GetMemberHandler(member_repo=MemberRepository(session=session))


async def get_member_rentals_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetMemberRentalsHandler":
    from src.application.queries.handlers.member_query_handlers import (
        GetMemberRentalsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        RentalRepository,
    )

    return GetMemberRentalsHandler(
        member_repo=MemberRepository(session=session),
        rental_repo=RentalRepository(session=session),
    )
