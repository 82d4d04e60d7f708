"""ReturnRental command handler.

Closes an ACTIVE or OVERDUE rental and settles its fees.

Fees:
    late fee   = days overdue (partial days round up) × daily late fee,
                 tier discount applied
    damage fee = band for the condition levels lost since the rental
                 started (0, 50, 150, 300, 500)

A DamageAssessment is recorded whenever the condition degraded. Late and
damage fees are charged together; a decline aborts the return.
"""

from datetime import UTC, datetime

from src.application.commands.handlers.input_parsing import parse_condition
from src.application.commands.handlers.lookup_errors import (
    equipment_not_found,
    member_not_found,
    rental_not_found,
)
from src.application.commands.rental_commands import ReturnRental
from src.application.dtos import ReturnRentalResult
from src.application.services import PaymentCollector
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities import DamageAssessment, calculate_damage_fee
from src.domain.events import DomainEvent, EquipmentDamaged, RentalReturned
from src.domain.protocols import (
    DamageAssessmentRepository,
    EquipmentRepository,
    EventBusProtocol,
    MemberRepository,
    RentalRepository,
)
from src.domain.value_objects import Money, RentalId


class ReturnRentalHandler:
    """Handler for ReturnRental command.

    Dependencies (injected via constructor):
        - RentalRepository, EquipmentRepository, MemberRepository,
          DamageAssessmentRepository: persistence
        - PaymentCollector: charges late and damage fees
        - EventBusProtocol: For domain events
        - daily_late_fee: Late fee per overdue day before discount
    """

    def __init__(
        self,
        rental_repo: RentalRepository,
        equipment_repo: EquipmentRepository,
        member_repo: MemberRepository,
        assessment_repo: DamageAssessmentRepository,
        payments: PaymentCollector,
        event_bus: EventBusProtocol,
        daily_late_fee: Money,
    ) -> None:
        self._rental_repo = rental_repo
        self._equipment_repo = equipment_repo
        self._member_repo = member_repo
        self._assessment_repo = assessment_repo
        self._payments = payments
        self._event_bus = event_bus
        self._daily_late_fee = daily_late_fee

    async def handle(self, cmd: ReturnRental) -> Result[ReturnRentalResult, DomainError]:
        """Handle ReturnRental command.

        Returns:
            Success(ReturnRentalResult): Rental returned and fees charged.
            Failure(RentalError): RENTAL_ALREADY_RETURNED on a second return,
                INVALID_STATE_TRANSITION for pending or cancelled rentals.
            Failure(PaymentError): Fee charge declined (nothing persisted).
        """
        now = datetime.now(UTC)

        condition_result = parse_condition(cmd.condition_at_return, "condition_at_return")
        if isinstance(condition_result, Failure):
            return condition_result
        condition = condition_result.value

        if not cmd.assessed_by or not cmd.assessed_by.strip():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="assessed_by must not be empty",
                    field="assessed_by",
                )
            )

        rental = await self._rental_repo.find_by_id(RentalId(cmd.rental_id))
        if rental is None:
            return Failure(error=rental_not_found(cmd.rental_id))
        equipment = await self._equipment_repo.find_by_id(rental.equipment_id)
        if equipment is None:
            return Failure(error=equipment_not_found(rental.equipment_id))
        member = await self._member_repo.find_by_id(rental.member_id)
        if member is None:
            return Failure(error=member_not_found(rental.member_id))

        was_late = rental.is_overdue(now)
        late_fee = rental.calculate_late_fee(
            now, self._daily_late_fee, member.discount_percentage()
        )
        damage_fee = calculate_damage_fee(
            rental.condition_at_start, condition, rental.total_cost.currency
        )

        returned = rental.return_rental(
            condition=condition,
            late_fee=late_fee,
            damage_fee=damage_fee,
            now=now,
        )
        if isinstance(returned, Failure):
            return returned

        equipment_back = equipment.mark_as_returned(condition)
        if isinstance(equipment_back, Failure):
            return equipment_back
        slot_freed = member.end_rental()
        if isinstance(slot_freed, Failure):
            return slot_freed

        assessment: DamageAssessment | None = None
        if damage_fee.is_positive():
            assessment = DamageAssessment.create(
                rental_id=rental.id,
                equipment_id=equipment.id,
                condition_before=rental.condition_at_start,
                condition_after=condition,
                notes=cmd.notes,
                assessed_by=cmd.assessed_by,
                assessed_at=now,
            )

        payment = await self._payments.charge(
            member.id,
            late_fee + damage_fee,
            f"Return fees for {equipment.name}",
            cmd.payment_method,
        )
        if isinstance(payment, Failure):
            return payment

        await self._rental_repo.save(rental)
        await self._equipment_repo.save(equipment)
        await self._member_repo.save(member)
        if assessment is not None:
            await self._assessment_repo.save(assessment)

        events: list[DomainEvent] = [
            RentalReturned(
                rental_id=rental.id,
                equipment_id=equipment.id,
                member_id=member.id,
                returned_at=now,
                late_fee=late_fee.amount,
                damage_fee=damage_fee.amount,
                total_cost=rental.total_cost.amount,
                was_late=was_late,
                currency=rental.total_cost.currency,
            )
        ]
        if assessment is not None:
            events.append(
                EquipmentDamaged(
                    equipment_id=equipment.id,
                    rental_id=rental.id,
                    member_id=member.id,
                    condition_before=assessment.condition_before.value,
                    condition_after=assessment.condition_after.value,
                    damage_fee=damage_fee.amount,
                    currency=damage_fee.currency,
                )
            )
        events.extend(PaymentCollector.received_events(payment.value))
        await self._event_bus.publish_many(events)

        return Success(
            value=ReturnRentalResult(
                rental_id=rental.id,
                returned_at=now,
                late_fee=late_fee.amount,
                damage_fee=damage_fee.amount,
                total_cost=rental.total_cost.amount,
                currency=rental.total_cost.currency,
                was_late=was_late,
                condition_changed=condition != rental.condition_at_start,
                damage_assessment_id=assessment.id if assessment else None,
                transaction_id=payment.value.transaction_id if payment.value else None,
            )
        )
