"""DamageAssessmentRepository protocol."""

from typing import Protocol

from src.domain.entities.damage_assessment import DamageAssessment
from src.domain.value_objects import DamageAssessmentId, RentalId


class DamageAssessmentRepository(Protocol):
    """Damage assessment repository protocol (port)."""

    async def find_by_id(
        self, assessment_id: DamageAssessmentId
    ) -> DamageAssessment | None:
        ...

    async def find_by_rental(self, rental_id: RentalId) -> DamageAssessment | None:
        """Find the assessment recorded when the rental was returned."""
        ...

    async def save(self, assessment: DamageAssessment) -> None:
        ...
