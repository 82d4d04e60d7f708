"""Domain enums for business logic.

Available Enums:
    - EquipmentCondition: ordered physical condition scale
    - MembershipTier: member classification with rental limits
    - RentalStatus: rental lifecycle
    - ReservationStatus: reservation lifecycle
    - NotificationChannel: member notification delivery channel
    - PaymentStatus: payment attempt outcome
"""

from src.domain.enums.equipment_condition import EquipmentCondition
from src.domain.enums.membership_tier import MembershipTier, TierBenefits
from src.domain.enums.notification_channel import NotificationChannel
from src.domain.enums.payment_status import PaymentStatus
from src.domain.enums.rental_status import OPEN_RENTAL_STATUSES, RentalStatus
from src.domain.enums.reservation_status import (
    BLOCKING_RESERVATION_STATUSES,
    ReservationStatus,
)

__all__ = [
    "BLOCKING_RESERVATION_STATUSES",
    "EquipmentCondition",
    "MembershipTier",
    "NotificationChannel",
    "OPEN_RENTAL_STATUSES",
    "PaymentStatus",
    "RentalStatus",
    "ReservationStatus",
    "TierBenefits",
]
