"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_event_bus, get_create_rental_handler

The container is organized into modules by concern:
- infrastructure: Database, logging, payment and notification adapters
- events: Event bus and subscriptions
- repositories: Repository and application service factories
- equipment_handlers, member_handlers, rental_handlers,
  reservation_handlers: Handler factories per aggregate
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_notification_service,
    get_payment_service,
)

# Event bus
from src.core.container.events import get_event_bus

# Repositories
from src.core.container.repositories import (
    get_damage_assessment_repository,
    get_equipment_repository,
    get_member_repository,
    get_rental_repository,
    get_reservation_repository,
)

# Equipment handlers
from src.core.container.equipment_handlers import (
    get_available_equipment_handler,
    get_create_equipment_handler,
    get_get_equipment_handler,
    get_list_equipment_handler,
    get_maintenance_schedule_handler,
    get_update_equipment_handler,
)

# Member handlers
from src.core.container.member_handlers import (
    get_get_member_handler,
    get_member_rentals_handler,
    get_register_member_handler,
    get_update_member_tier_handler,
)

# Rental handlers
from src.core.container.rental_handlers import (
    get_activate_rental_handler,
    get_cancel_rental_handler,
    get_create_rental_handler,
    get_daily_late_fee,
    get_damage_assessment_handler,
    get_extend_rental_handler,
    get_get_rental_handler,
    get_overdue_rentals_handler,
    get_process_overdue_rentals_handler,
    get_return_rental_handler,
)

# Reservation handlers
from src.core.container.reservation_handlers import (
    get_cancel_reservation_handler,
    get_confirm_reservation_handler,
    get_create_reservation_handler,
    get_fulfill_reservation_handler,
    get_get_reservation_handler,
    get_process_expired_reservations_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_notification_service",
    "get_payment_service",
    # Events
    "get_event_bus",
    # Repositories
    "get_damage_assessment_repository",
    "get_equipment_repository",
    "get_member_repository",
    "get_rental_repository",
    "get_reservation_repository",
    # Equipment
    "get_available_equipment_handler",
    "get_create_equipment_handler",
    "get_get_equipment_handler",
    "get_list_equipment_handler",
    "get_maintenance_schedule_handler",
    "get_update_equipment_handler",
    # Members
    "get_get_member_handler",
    "get_member_rentals_handler",
    "get_register_member_handler",
    "get_update_member_tier_handler",
    # Rentals
    "get_activate_rental_handler",
    "get_cancel_rental_handler",
    "get_create_rental_handler",
    "get_daily_late_fee",
    "get_damage_assessment_handler",
    "get_extend_rental_handler",
    "get_get_rental_handler",
    "get_overdue_rentals_handler",
    "get_process_overdue_rentals_handler",
    "get_return_rental_handler",
    # Reservations
    "get_cancel_reservation_handler",
    "get_confirm_reservation_handler",
    "get_create_reservation_handler",
    "get_fulfill_reservation_handler",
    "get_get_reservation_handler",
    "get_process_expired_reservations_handler",
]
