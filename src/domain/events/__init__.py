"""Domain events module.

Usage:
    >>> from src.domain.events import RentalCreated
    >>> await event_bus.publish(RentalCreated(rental_id=..., ...))
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.equipment_events import (
    EquipmentCreated,
    EquipmentDamaged,
    EquipmentUpdated,
)
from src.domain.events.member_events import MemberRegistered, MemberTierChanged
from src.domain.events.payment_events import PaymentFailed, PaymentReceived
from src.domain.events.rental_events import (
    RentalActivated,
    RentalCancelled,
    RentalCreated,
    RentalExtended,
    RentalOverdue,
    RentalReturned,
)
from src.domain.events.reservation_events import (
    ReservationCancelled,
    ReservationConfirmed,
    ReservationCreated,
    ReservationExpired,
    ReservationFulfilled,
)

__all__ = [
    "DomainEvent",
    # Equipment
    "EquipmentCreated",
    "EquipmentDamaged",
    "EquipmentUpdated",
    # Member
    "MemberRegistered",
    "MemberTierChanged",
    # Payment
    "PaymentFailed",
    "PaymentReceived",
    # Rental
    "RentalActivated",
    "RentalCancelled",
    "RentalCreated",
    "RentalExtended",
    "RentalOverdue",
    "RentalReturned",
    # Reservation
    "ReservationCancelled",
    "ReservationConfirmed",
    "ReservationCreated",
    "ReservationExpired",
    "ReservationFulfilled",
]
