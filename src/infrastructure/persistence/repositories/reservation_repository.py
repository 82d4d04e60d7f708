"""ReservationRepository - SQLAlchemy implementation of ReservationRepository protocol."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.reservation import Reservation
from src.domain.enums import BLOCKING_RESERVATION_STATUSES, ReservationStatus
from src.domain.value_objects import (
    DateRange,
    EquipmentId,
    MemberId,
    RentalId,
    ReservationId,
    ensure_utc,
)
from src.infrastructure.persistence.models.reservation import (
    Reservation as ReservationModel,
)

_BLOCKING = [s.value for s in BLOCKING_RESERVATION_STATUSES]


class ReservationRepository:
    """SQLAlchemy implementation of ReservationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        stmt = select(ReservationModel).where(ReservationModel.id == reservation_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_member(self, member_id: MemberId) -> list[Reservation]:
        stmt = (
            select(ReservationModel)
            .where(ReservationModel.member_id == member_id)
            .order_by(ReservationModel.start_date)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_by_equipment(self, equipment_id: EquipmentId) -> list[Reservation]:
        stmt = (
            select(ReservationModel)
            .where(ReservationModel.equipment_id == equipment_id)
            .order_by(ReservationModel.start_date)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_conflicting(
        self,
        equipment_id: EquipmentId,
        period: DateRange,
        exclude_reservation_id: ReservationId | None = None,
    ) -> list[Reservation]:
        """Find pending or confirmed reservations overlapping period.

        Args:
            equipment_id: Equipment to check.
            period: Requested period (closed-interval overlap).
            exclude_reservation_id: Reservation to ignore (the one being
                fulfilled).

        Returns:
            Blocking reservations (empty when none).
        """
        stmt = select(ReservationModel).where(
            ReservationModel.equipment_id == equipment_id,
            ReservationModel.status.in_(_BLOCKING),
            ReservationModel.start_date <= period.end,
            ReservationModel.end_date >= period.start,
        )
        if exclude_reservation_id is not None:
            stmt = stmt.where(ReservationModel.id != exclude_reservation_id)
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_expirable(self, now: datetime) -> list[Reservation]:
        """Find blocking reservations whose period ended before now."""
        stmt = (
            select(ReservationModel)
            .where(
                ReservationModel.status.in_(_BLOCKING),
                ReservationModel.end_date < ensure_utc(now),
            )
            .order_by(ReservationModel.end_date)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def save(self, reservation: Reservation) -> None:
        stmt = select(ReservationModel).where(ReservationModel.id == reservation.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(reservation))
        else:
            self._update_model(existing, reservation)

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: ReservationModel) -> Reservation:
        def _utc(value: datetime | None) -> datetime | None:
            return ensure_utc(value) if value is not None else None

        return Reservation(
            id=ReservationId(model.id),
            equipment_id=EquipmentId(model.equipment_id),
            member_id=MemberId(model.member_id),
            period=DateRange(start=model.start_date, end=model.end_date),
            status=ReservationStatus(model.status),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            confirmed_at=_utc(model.confirmed_at),
            cancelled_at=_utc(model.cancelled_at),
            fulfilled_at=_utc(model.fulfilled_at),
            cancellation_reason=model.cancellation_reason,
            rental_id=RentalId(model.rental_id) if model.rental_id is not None else None,
        )

    def _to_model(self, entity: Reservation) -> ReservationModel:
        return ReservationModel(
            id=entity.id,
            equipment_id=entity.equipment_id,
            member_id=entity.member_id,
            start_date=entity.period.start,
            end_date=entity.period.end,
            status=entity.status.value,
            confirmed_at=entity.confirmed_at,
            cancelled_at=entity.cancelled_at,
            fulfilled_at=entity.fulfilled_at,
            cancellation_reason=entity.cancellation_reason,
            rental_id=entity.rental_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: ReservationModel, entity: Reservation) -> None:
        model.status = entity.status.value
        model.confirmed_at = entity.confirmed_at
        model.cancelled_at = entity.cancelled_at
        model.fulfilled_at = entity.fulfilled_at
        model.cancellation_reason = entity.cancellation_reason
        model.rental_id = entity.rental_id
        model.updated_at = entity.updated_at
