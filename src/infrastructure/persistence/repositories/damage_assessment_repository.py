"""DamageAssessmentRepository - SQLAlchemy implementation.

Assessments are write-once; save only inserts.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.damage_assessment import DamageAssessment
from src.domain.enums import EquipmentCondition
from src.domain.value_objects import (
    DamageAssessmentId,
    EquipmentId,
    Money,
    RentalId,
    ensure_utc,
)
from src.infrastructure.persistence.models.damage_assessment import (
    DamageAssessment as DamageAssessmentModel,
)


class DamageAssessmentRepository:
    """SQLAlchemy implementation of DamageAssessmentRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, assessment_id: DamageAssessmentId
    ) -> DamageAssessment | None:
        stmt = select(DamageAssessmentModel).where(
            DamageAssessmentModel.id == assessment_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_rental(self, rental_id: RentalId) -> DamageAssessment | None:
        stmt = select(DamageAssessmentModel).where(
            DamageAssessmentModel.rental_id == rental_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, assessment: DamageAssessment) -> None:
        """Insert assessment, or refresh its notes if it already exists."""
        stmt = select(DamageAssessmentModel).where(
            DamageAssessmentModel.id == assessment.id
        )
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self.session.add(self._to_model(assessment))
        else:
            existing.notes = assessment.notes

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: DamageAssessmentModel) -> DamageAssessment:
        return DamageAssessment(
            id=DamageAssessmentId(model.id),
            rental_id=RentalId(model.rental_id),
            equipment_id=EquipmentId(model.equipment_id),
            condition_before=EquipmentCondition(model.condition_before),
            condition_after=EquipmentCondition(model.condition_after),
            degradation_levels=model.degradation_levels,
            damage_fee=Money(amount=model.damage_fee, currency=model.currency),
            notes=model.notes,
            assessed_by=model.assessed_by,
            assessed_at=ensure_utc(model.assessed_at),
        )

    def _to_model(self, entity: DamageAssessment) -> DamageAssessmentModel:
        return DamageAssessmentModel(
            id=entity.id,
            rental_id=entity.rental_id,
            equipment_id=entity.equipment_id,
            condition_before=entity.condition_before.value,
            condition_after=entity.condition_after.value,
            degradation_levels=entity.degradation_levels,
            damage_fee=entity.damage_fee.amount,
            currency=entity.damage_fee.currency,
            notes=entity.notes,
            assessed_by=entity.assessed_by,
            assessed_at=entity.assessed_at,
        )
