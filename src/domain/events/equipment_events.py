"""Equipment domain events."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class EquipmentCreated(DomainEvent):
    """Equipment added to the inventory."""

    equipment_id: UUID
    name: str
    category: str


@dataclass(frozen=True, kw_only=True)
class EquipmentUpdated(DomainEvent):
    """Equipment details, rate, condition or maintenance changed.

    Attributes:
        equipment_id: Updated equipment.
        changed_fields: Names of the fields that changed.
    """

    equipment_id: UUID
    changed_fields: tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class EquipmentDamaged(DomainEvent):
    """Equipment came back from a rental in worse condition.

    Attributes:
        equipment_id: Damaged equipment.
        rental_id: Rental during which the damage occurred.
        member_id: Renting member.
        condition_before: Condition value at rental start.
        condition_after: Condition value at return.
        damage_fee: Fee charged.
        currency: ISO 4217 code.
    """

    equipment_id: UUID
    rental_id: UUID
    member_id: UUID
    condition_before: str
    condition_after: str
    damage_fee: Decimal
    currency: str = "USD"
