"""GetDamageAssessment query handler.

Rentals returned without degradation have no assessment; those lookups
fail with NOT_FOUND for the assessment, after confirming the rental
exists.
"""

from src.application.commands.handlers.lookup_errors import (
    damage_assessment_not_found,
    rental_not_found,
)
from src.application.dtos import DamageAssessmentResult
from src.application.queries.rental_queries import GetDamageAssessment
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import DamageAssessmentRepository, RentalRepository
from src.domain.value_objects import RentalId


class GetDamageAssessmentHandler:
    def __init__(
        self,
        rental_repo: RentalRepository,
        assessment_repo: DamageAssessmentRepository,
    ) -> None:
        self._rental_repo = rental_repo
        self._assessment_repo = assessment_repo

    async def handle(
        self, query: GetDamageAssessment
    ) -> Result[DamageAssessmentResult, DomainError]:
        rental_id = RentalId(query.rental_id)
        if await self._rental_repo.find_by_id(rental_id) is None:
            return Failure(error=rental_not_found(query.rental_id))

        assessment = await self._assessment_repo.find_by_rental(rental_id)
        if assessment is None:
            return Failure(error=damage_assessment_not_found(query.rental_id))
        return Success(value=DamageAssessmentResult.from_entity(assessment))
