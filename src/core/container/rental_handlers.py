"""Rental handler dependency factories.

Request-scoped handler instances for the rental lifecycle:
- Commands: create, activate, extend, return, cancel, overdue processing
- Queries: get, overdue listing, damage assessment
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_db_session
from src.core.container.repositories import (
    build_availability_checker,
    build_member_eligibility,
    build_payment_collector,
)
from src.domain.value_objects import Money

if TYPE_CHECKING:
    from src.application.commands.handlers.activate_rental_handler import (
        ActivateRentalHandler,
    )
    from src.application.commands.handlers.cancel_rental_handler import (
        CancelRentalHandler,
    )
    from src.application.commands.handlers.create_rental_handler import (
        CreateRentalHandler,
    )
    from src.application.commands.handlers.extend_rental_handler import (
        ExtendRentalHandler,
    )
    from src.application.commands.handlers.process_overdue_rentals_handler import (
        ProcessOverdueRentalsHandler,
    )
    from src.application.commands.handlers.return_rental_handler import (
        ReturnRentalHandler,
    )
    from src.application.queries.handlers.get_damage_assessment_handler import (
        GetDamageAssessmentHandler,
    )
    from src.application.queries.handlers.get_overdue_rentals_handler import (
        GetOverdueRentalsHandler,
    )
    from src.application.queries.handlers.get_rental_handler import GetRentalHandler


def get_daily_late_fee() -> Money:
    """Configured late fee per overdue day."""
    return Money(settings.late_fee_per_day)


# ============================================================================
# Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_rental_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateRentalHandler":
    """Get CreateRental command handler (request-scoped).

    Creates handler with:
    - Equipment, member and rental repositories (request-scoped)
    - AvailabilityChecker and MemberEligibility (request-scoped)
    - PaymentCollector over the app-scoped payment gateway
    - EventBus (app-scoped)
    """
    from src.application.commands.handlers.create_rental_handler import (
        CreateRentalHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EquipmentRepository,
        MemberRepository,
        RentalRepository,
    )

    return CreateRentalHandler(
        equipment_repo=EquipmentRepository(session=session),
        member_repo=MemberRepository(session=session),
        rental_repo=RentalRepository(session=session),
        availability=build_availability_checker(session),
        eligibility=build_member_eligibility(session),
        payments=build_payment_collector(),
        event_bus=get_event_bus(),
    )


async def get_activate_rental_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ActivateRentalHandler":
    from src.application.commands.handlers.activate_rental_handler import (
        ActivateRentalHandler,
    )
    from src.infrastructure.persistence.repositories import RentalRepository

    return ActivateRentalHandler(
        rental_repo=RentalRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_extend_rental_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ExtendRentalHandler":
    from src.application.commands.handlers.extend_rental_handler import (
        ExtendRentalHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EquipmentRepository,
        MemberRepository,
        RentalRepository,
    )

    return ExtendRentalHandler(
        rental_repo=RentalRepository(session=session),
        equipment_repo=EquipmentRepository(session=session),
        member_repo=MemberRepository(session=session),
        availability=build_availability_checker(session),
        payments=build_payment_collector(),
        event_bus=get_event_bus(),
    )


async def get_return_rental_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ReturnRentalHandler":
    from src.application.commands.handlers.return_rental_handler import (
        ReturnRentalHandler,
    )
    from src.infrastructure.persistence.repositories import (
        DamageAssessmentRepository,
        EquipmentRepository,
        MemberRepository,
        RentalRepository,
    )

    return ReturnRentalHandler(
        rental_repo=RentalRepository(session=session),
        equipment_repo=EquipmentRepository(session=session),
        member_repo=MemberRepository(session=session),
        assessment_repo=DamageAssessmentRepository(session=session),
        payments=build_payment_collector(),
        event_bus=get_event_bus(),
        daily_late_fee=get_daily_late_fee(),
    )


async def get_cancel_rental_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CancelRentalHandler":
    from src.application.commands.handlers.cancel_rental_handler import (
        CancelRentalHandler,
    )
    from src.infrastructure.persistence.repositories import (
        EquipmentRepository,
        MemberRepository,
        RentalRepository,
    )

    return CancelRentalHandler(
        rental_repo=RentalRepository(session=session),
        equipment_repo=EquipmentRepository(session=session),
        member_repo=MemberRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_process_overdue_rentals_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ProcessOverdueRentalsHandler":
    from src.application.commands.handlers.process_overdue_rentals_handler import (
        ProcessOverdueRentalsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        RentalRepository,
    )

    return ProcessOverdueRentalsHandler(
        rental_repo=RentalRepository(session=session),
        member_repo=MemberRepository(session=session),
        event_bus=get_event_bus(),
        daily_late_fee=get_daily_late_fee(),
    )


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_get_rental_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetRentalHandler":
    from src.application.queries.handlers.get_rental_handler import GetRentalHandler
    from src.infrastructure.persistence.repositories import RentalRepository

    return GetRentalHandler(rental_repo=RentalRepository(session=session))


async def get_overdue_rentals_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetOverdueRentalsHandler":
    from src.application.queries.handlers.get_overdue_rentals_handler import (
        GetOverdueRentalsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        RentalRepository,
    )

    return GetOverdueRentalsHandler(
        rental_repo=RentalRepository(session=session),
        member_repo=MemberRepository(session=session),
        daily_late_fee=get_daily_late_fee(),
    )


async def get_damage_assessment_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetDamageAssessmentHandler":
    from src.application.queries.handlers.get_damage_assessment_handler import (
        GetDamageAssessmentHandler,
    )
    from src.infrastructure.persistence.repositories import (
        DamageAssessmentRepository,
        RentalRepository,
    )

    return GetDamageAssessmentHandler(
        rental_repo=RentalRepository(session=session),
        assessment_repo=DamageAssessmentRepository(session=session),
    )
