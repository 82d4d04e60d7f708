"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import RentalRepository, EventBusProtocol
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
    Unsubscribe,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_service_protocol import (
    NotificationServiceProtocol,
)
from src.domain.protocols.payment_service_protocol import (
    DEFAULT_PAYMENT_METHOD,
    PaymentReceipt,
    PaymentServiceProtocol,
)

# Repository protocols
from src.domain.protocols.damage_assessment_repository import (
    DamageAssessmentRepository,
)
from src.domain.protocols.equipment_repository import EquipmentRepository
from src.domain.protocols.member_repository import MemberRepository
from src.domain.protocols.rental_repository import RentalRepository
from src.domain.protocols.reservation_repository import ReservationRepository

__all__ = [
    # Services
    "DEFAULT_PAYMENT_METHOD",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "NotificationServiceProtocol",
    "PaymentReceipt",
    "PaymentServiceProtocol",
    "Unsubscribe",
    # Repositories
    "DamageAssessmentRepository",
    "EquipmentRepository",
    "MemberRepository",
    "RentalRepository",
    "ReservationRepository",
]
