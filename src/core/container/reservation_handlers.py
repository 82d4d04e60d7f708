"""Reservation handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_db_session
from src.core.container.repositories import (
    build_availability_checker,
    build_member_eligibility,
    build_payment_collector,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.cancel_reservation_handler import (
        CancelReservationHandler,
    )
    from src.application.commands.handlers.confirm_reservation_handler import (
        ConfirmReservationHandler,
    )
    from src.application.commands.handlers.create_reservation_handler import (
        CreateReservationHandler,
    )
    from src.application.commands.handlers.fulfill_reservation_handler import (
        FulfillReservationHandler,
    )
    from src.application.commands.handlers.process_expired_reservations_handler import (
        ProcessExpiredReservationsHandler,
    )
    from src.application.queries.handlers.get_reservation_handler import (
        GetReservationHandler,
    )


async def get_create_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateReservationHandler":
    from src.application.commands.handlers.create_reservation_handler import (
        CreateReservationHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EquipmentRepository,
        MemberRepository,
        ReservationRepository,
    )

    return CreateReservationHandler(
        equipment_repo=EquipmentRepository(session=session),
        member_repo=MemberRepository(session=session),
        reservation_repo=ReservationRepository(session=session),
        availability=build_availability_checker(session),
        eligibility=build_member_eligibility(session),
        event_bus=get_event_bus(),
    )


async def get_confirm_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ConfirmReservationHandler":
    from src.application.commands.handlers.confirm_reservation_handler import (
        ConfirmReservationHandler,
    )
    from src.infrastructure.persistence.repositories import ReservationRepository

    return ConfirmReservationHandler(
        reservation_repo=ReservationRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_cancel_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CancelReservationHandler":
    from src.application.commands.handlers.cancel_reservation_handler import (
        CancelReservationHandler,
    )
    from src.infrastructure.persistence.repositories import ReservationRepository

    return CancelReservationHandler(
        reservation_repo=ReservationRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_fulfill_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "FulfillReservationHandler":
    from src.application.commands.handlers.fulfill_reservation_handler import (
        FulfillReservationHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EquipmentRepository,
        MemberRepository,
        RentalRepository,
        ReservationRepository,
    )

    return FulfillReservationHandler(
        reservation_repo=ReservationRepository(session=session),
        equipment_repo=EquipmentRepository(session=session),
        member_repo=MemberRepository(session=session),
        rental_repo=RentalRepository(session=session),
        availability=build_availability_checker(session),
        eligibility=build_member_eligibility(session),
        payments=build_payment_collector(),
        event_bus=get_event_bus(),
    )


async def get_process_expired_reservations_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ProcessExpiredReservationsHandler":
    from src.application.commands.handlers.process_expired_reservations_handler import (
        ProcessExpiredReservationsHandler,
    )
    from src.infrastructure.persistence.repositories import ReservationRepository

    return ProcessExpiredReservationsHandler(
        reservation_repo=ReservationRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_get_reservation_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetReservationHandler":
    from src.application.queries.handlers.get_reservation_handler import (
        GetReservationHandler,
    )
    from src.infrastructure.persistence.repositories import ReservationRepository

    return GetReservationHandler(reservation_repo=ReservationRepository(session=session))
