"""EquipmentRepository - SQLAlchemy implementation of EquipmentRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Equipment entities and database EquipmentModel.
"""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.equipment import Equipment
from src.domain.enums import EquipmentCondition
from src.domain.value_objects import EquipmentId, Money, RentalId, ensure_utc
from src.infrastructure.persistence.models.equipment import (
    Equipment as EquipmentModel,
)


class EquipmentRepository:
    """SQLAlchemy implementation of EquipmentRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = EquipmentRepository(session)
        ...     drill = await repo.find_by_id(equipment_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, equipment_id: EquipmentId) -> Equipment | None:
        """Find equipment by ID.

        Args:
            equipment_id: Equipment's unique identifier.

        Returns:
            Domain Equipment entity if found, None otherwise.
        """
        stmt = select(EquipmentModel).where(EquipmentModel.id == equipment_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_all(self) -> list[Equipment]:
        """List the whole inventory ordered by name."""
        stmt = select(EquipmentModel).order_by(EquipmentModel.name)
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_by_category(self, category: str) -> list[Equipment]:
        stmt = (
            select(EquipmentModel)
            .where(EquipmentModel.category == category)
            .order_by(EquipmentModel.name)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_available(self, category: str | None = None) -> list[Equipment]:
        """Find equipment flagged available and in rentable condition.

        Args:
            category: Optional category filter.

        Returns:
            List of rentable equipment (empty if none found).
        """
        rentable = [c.value for c in EquipmentCondition if c.is_rentable()]
        stmt = select(EquipmentModel).where(
            EquipmentModel.is_available == True,  # noqa: E712
            EquipmentModel.condition.in_(rentable),
        )
        if category is not None:
            stmt = stmt.where(EquipmentModel.category == category)
        result = await self.session.execute(stmt.order_by(EquipmentModel.name))
        models = result.scalars().all()

        return [self._to_domain(model) for model in models]

    async def find_needing_maintenance(
        self, now: datetime, interval_days: int
    ) -> list[Equipment]:
        """Find equipment due for maintenance or repair.

        The schedule depends on two nullable dates, so the rule is evaluated
        on the domain entity rather than in SQL.

        Args:
            now: Reference instant.
            interval_days: Days between scheduled maintenance.

        Returns:
            Equipment needing maintenance, soonest due first.
        """
        equipment = await self.find_all()
        due = [e for e in equipment if e.needs_maintenance(now, interval_days)]
        return sorted(due, key=lambda e: e.next_maintenance_due(interval_days))

    async def save(self, equipment: Equipment) -> None:
        """Create or update equipment in database.

        Args:
            equipment: Equipment entity to persist.
        """
        stmt = select(EquipmentModel).where(EquipmentModel.id == equipment.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(equipment))
        else:
            self._update_model(existing, equipment)

        await self.session.commit()

    async def delete(self, equipment_id: EquipmentId) -> None:
        """Remove equipment from database.

        Raises:
            NoResultFound: If equipment doesn't exist.
        """
        stmt = select(EquipmentModel).where(EquipmentModel.id == equipment_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        await self.session.delete(model)
        await self.session.commit()

    async def exists(self, equipment_id: EquipmentId) -> bool:
        stmt = select(EquipmentModel.id).where(EquipmentModel.id == equipment_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(EquipmentModel.id)))
        return result.scalar_one()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: EquipmentModel) -> Equipment:
        """Convert database model to domain entity.

        Reconstructs Money from the daily_rate/currency columns and attaches
        UTC to timestamps read back without timezone information.
        """
        return Equipment(
            id=EquipmentId(model.id),
            name=model.name,
            description=model.description,
            category=model.category,
            daily_rate=Money(amount=model.daily_rate, currency=model.currency),
            condition=EquipmentCondition(model.condition),
            purchase_date=ensure_utc(model.purchase_date),
            is_available=model.is_available,
            current_rental_id=(
                RentalId(model.current_rental_id)
                if model.current_rental_id is not None
                else None
            ),
            last_maintenance_date=(
                ensure_utc(model.last_maintenance_date)
                if model.last_maintenance_date is not None
                else None
            ),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )

    def _to_model(self, entity: Equipment) -> EquipmentModel:
        return EquipmentModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            category=entity.category,
            daily_rate=entity.daily_rate.amount,
            currency=entity.daily_rate.currency,
            condition=entity.condition.value,
            is_available=entity.is_available,
            current_rental_id=entity.current_rental_id,
            purchase_date=entity.purchase_date,
            last_maintenance_date=entity.last_maintenance_date,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: EquipmentModel, entity: Equipment) -> None:
        """Update existing model from entity (id and created_at are immutable)."""
        model.name = entity.name
        model.description = entity.description
        model.category = entity.category
        model.daily_rate = entity.daily_rate.amount
        model.currency = entity.daily_rate.currency
        model.condition = entity.condition.value
        model.is_available = entity.is_available
        model.current_rental_id = entity.current_rental_id
        model.purchase_date = entity.purchase_date
        model.last_maintenance_date = entity.last_maintenance_date
        model.updated_at = entity.updated_at
