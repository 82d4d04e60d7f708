"""Typed identifiers for domain aggregates.

Each aggregate has its own NewType over UUID so that a MemberId cannot be
passed where an EquipmentId is expected (checked by the type checker, free
at runtime). New identifiers are UUIDv7 (time-ordered), which keeps primary
key indexes compact.
"""

from typing import NewType
from uuid import UUID

from uuid_extensions import uuid7

EquipmentId = NewType("EquipmentId", UUID)
MemberId = NewType("MemberId", UUID)
RentalId = NewType("RentalId", UUID)
ReservationId = NewType("ReservationId", UUID)
DamageAssessmentId = NewType("DamageAssessmentId", UUID)


def new_equipment_id() -> EquipmentId:
    return EquipmentId(uuid7())


def new_member_id() -> MemberId:
    return MemberId(uuid7())


def new_rental_id() -> RentalId:
    return RentalId(uuid7())


def new_reservation_id() -> ReservationId:
    return ReservationId(uuid7())


def new_damage_assessment_id() -> DamageAssessmentId:
    return DamageAssessmentId(uuid7())
