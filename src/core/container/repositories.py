"""Repository and application service factories.

Request-scoped: every request gets fresh repositories sharing one
session, so a command sees its own writes.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.application.services import (
        AvailabilityChecker,
        MemberEligibility,
        PaymentCollector,
    )
    from src.infrastructure.persistence.repositories import (
        DamageAssessmentRepository,
        EquipmentRepository,
        MemberRepository,
        RentalRepository,
        ReservationRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_equipment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "EquipmentRepository":
    from src.infrastructure.persistence.repositories import EquipmentRepository

    return EquipmentRepository(session=session)


async def get_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "MemberRepository":
    from src.infrastructure.persistence.repositories import MemberRepository

    return MemberRepository(session=session)


async def get_rental_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "RentalRepository":
    from src.infrastructure.persistence.repositories import RentalRepository

    return RentalRepository(session=session)


async def get_reservation_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ReservationRepository":
    from src.infrastructure.persistence.repositories import ReservationRepository

    return ReservationRepository(session=session)


async def get_damage_assessment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "DamageAssessmentRepository":
    from src.infrastructure.persistence.repositories import (
        DamageAssessmentRepository,
    )

    return DamageAssessmentRepository(session=session)


# ============================================================================
# Application Service Factories (Request-Scoped)
# ============================================================================


def build_availability_checker(session: AsyncSession) -> "AvailabilityChecker":
    """Availability checker over the rental and reservation tables."""
    from src.application.services import AvailabilityChecker
    from src.infrastructure.persistence.repositories import (
        RentalRepository,
        ReservationRepository,
    )

    return AvailabilityChecker(
        rental_repo=RentalRepository(session=session),
        reservation_repo=ReservationRepository(session=session),
    )


def build_member_eligibility(session: AsyncSession) -> "MemberEligibility":
    from src.application.services import MemberEligibility
    from src.infrastructure.persistence.repositories import RentalRepository

    return MemberEligibility(rental_repo=RentalRepository(session=session))


def build_payment_collector() -> "PaymentCollector":
    from src.application.services import PaymentCollector
    from src.core.container.events import get_event_bus
    from src.core.container.infrastructure import get_payment_service

    return PaymentCollector(
        payment_service=get_payment_service(),
        event_bus=get_event_bus(),
    )
