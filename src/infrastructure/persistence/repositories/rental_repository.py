"""RentalRepository - SQLAlchemy implementation of RentalRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Rental entities and database RentalModel. The rental
period is flattened into start_date/end_date columns and the cost
breakdown into Numeric columns sharing one currency.
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.rental import Rental
from src.domain.enums import OPEN_RENTAL_STATUSES, EquipmentCondition, RentalStatus
from src.domain.value_objects import (
    DateRange,
    EquipmentId,
    MemberId,
    Money,
    RentalId,
    ensure_utc,
)
from src.infrastructure.persistence.models.rental import Rental as RentalModel

_OVERDUE_CANDIDATES = (RentalStatus.ACTIVE.value, RentalStatus.OVERDUE.value)


class RentalRepository:
    """SQLAlchemy implementation of RentalRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, rental_id: RentalId) -> Rental | None:
        """Find rental by ID.

        Args:
            rental_id: Rental's unique identifier.

        Returns:
            Domain Rental entity if found, None otherwise.
        """
        stmt = select(RentalModel).where(RentalModel.id == rental_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_member(
        self, member_id: MemberId, active_only: bool = False
    ) -> list[Rental]:
        """Find a member's rentals, most recent first.

        Args:
            member_id: Member's unique identifier.
            active_only: If True, return only open (pending, active, overdue)
                rentals. Default False.

        Returns:
            List of rentals (empty if none found).
        """
        stmt = select(RentalModel).where(RentalModel.member_id == member_id)
        if active_only:
            stmt = stmt.where(
                RentalModel.status.in_([s.value for s in OPEN_RENTAL_STATUSES])
            )
        stmt = stmt.order_by(RentalModel.start_date.desc())
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_by_equipment(self, equipment_id: EquipmentId) -> list[Rental]:
        stmt = (
            select(RentalModel)
            .where(RentalModel.equipment_id == equipment_id)
            .order_by(RentalModel.start_date.desc())
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_by_status(self, status: RentalStatus) -> list[Rental]:
        stmt = (
            select(RentalModel)
            .where(RentalModel.status == status.value)
            .order_by(RentalModel.end_date)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_overdue(self, now: datetime) -> list[Rental]:
        """Find active or overdue rentals whose period ended before now.

        Args:
            now: Reference instant.

        Returns:
            Late rentals, longest overdue first.
        """
        stmt = (
            select(RentalModel)
            .where(
                RentalModel.status.in_(_OVERDUE_CANDIDATES),
                RentalModel.end_date < ensure_utc(now),
            )
            .order_by(RentalModel.end_date)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_conflicting(
        self,
        equipment_id: EquipmentId,
        period: DateRange,
        exclude_rental_id: RentalId | None = None,
    ) -> list[Rental]:
        """Find open rentals of the equipment overlapping period.

        Overlap is closed-interval, matching DateRange.overlaps.

        Args:
            equipment_id: Equipment to check.
            period: Requested period.
            exclude_rental_id: Rental to ignore (the one being extended).

        Returns:
            Conflicting rentals (empty when the equipment is free).
        """
        stmt = select(RentalModel).where(
            RentalModel.equipment_id == equipment_id,
            RentalModel.status.in_([s.value for s in OPEN_RENTAL_STATUSES]),
            RentalModel.start_date <= period.end,
            RentalModel.end_date >= period.start,
        )
        if exclude_rental_id is not None:
            stmt = stmt.where(RentalModel.id != exclude_rental_id)
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def save(self, rental: Rental) -> None:
        """Create or update rental in database.

        Args:
            rental: Rental entity to persist.
        """
        stmt = select(RentalModel).where(RentalModel.id == rental.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(rental))
        else:
            self._update_model(existing, rental)

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: RentalModel) -> Rental:
        """Convert database model to domain entity.

        Reconstructs DateRange from start/end columns and Money values from
        the amount columns plus the shared currency column.

        Args:
            model: SQLAlchemy RentalModel instance.

        Returns:
            Domain Rental entity.
        """
        currency = model.currency

        return Rental(
            id=RentalId(model.id),
            equipment_id=EquipmentId(model.equipment_id),
            member_id=MemberId(model.member_id),
            period=DateRange(start=model.start_date, end=model.end_date),
            status=RentalStatus(model.status),
            base_cost=Money(amount=model.base_cost, currency=currency),
            discount=Money(amount=model.discount, currency=currency),
            total_cost=Money(amount=model.total_cost, currency=currency),
            condition_at_start=EquipmentCondition(model.condition_at_start),
            late_fee=Money(amount=model.late_fee, currency=currency),
            damage_fee=Money(amount=model.damage_fee, currency=currency),
            condition_at_return=(
                EquipmentCondition(model.condition_at_return)
                if model.condition_at_return is not None
                else None
            ),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            returned_at=(
                ensure_utc(model.returned_at) if model.returned_at is not None else None
            ),
            cancelled_at=(
                ensure_utc(model.cancelled_at) if model.cancelled_at is not None else None
            ),
        )

    def _to_model(self, entity: Rental) -> RentalModel:
        """Convert domain entity to database model.

        Args:
            entity: Domain Rental entity.

        Returns:
            SQLAlchemy RentalModel instance.
        """
        return RentalModel(
            id=entity.id,
            equipment_id=entity.equipment_id,
            member_id=entity.member_id,
            start_date=entity.period.start,
            end_date=entity.period.end,
            status=entity.status.value,
            base_cost=entity.base_cost.amount,
            discount=entity.discount.amount,
            late_fee=entity.late_fee.amount,
            damage_fee=entity.damage_fee.amount,
            total_cost=entity.total_cost.amount,
            currency=entity.total_cost.currency,
            condition_at_start=entity.condition_at_start.value,
            condition_at_return=(
                entity.condition_at_return.value
                if entity.condition_at_return is not None
                else None
            ),
            returned_at=entity.returned_at,
            cancelled_at=entity.cancelled_at,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: RentalModel, entity: Rental) -> None:
        """Update existing model from entity.

        Does not update id, equipment_id, member_id, condition_at_start or
        created_at (fixed when the rental opens).

        Args:
            model: Existing SQLAlchemy model to update.
            entity: Domain entity with new values.
        """
        model.start_date = entity.period.start
        model.end_date = entity.period.end
        model.status = entity.status.value
        model.base_cost = entity.base_cost.amount
        model.discount = entity.discount.amount
        model.late_fee = entity.late_fee.amount
        model.damage_fee = entity.damage_fee.amount
        model.total_cost = entity.total_cost.amount
        model.currency = entity.total_cost.currency
        model.condition_at_return = (
            entity.condition_at_return.value
            if entity.condition_at_return is not None
            else None
        )
        model.returned_at = entity.returned_at
        model.cancelled_at = entity.cancelled_at
        model.updated_at = entity.updated_at
