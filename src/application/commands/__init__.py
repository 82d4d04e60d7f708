"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateRental, ReturnRental).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.equipment_commands import CreateEquipment, UpdateEquipment
from src.application.commands.member_commands import RegisterMember, UpdateMemberTier
from src.application.commands.rental_commands import (
    ActivateRental,
    CancelRental,
    CreateRental,
    ExtendRental,
    ProcessOverdueRentals,
    ReturnRental,
)
from src.application.commands.reservation_commands import (
    CancelReservation,
    ConfirmReservation,
    CreateReservation,
    FulfillReservation,
    ProcessExpiredReservations,
)

__all__ = [
    # Equipment
    "CreateEquipment",
    "UpdateEquipment",
    # Members
    "RegisterMember",
    "UpdateMemberTier",
    # Rentals
    "ActivateRental",
    "CancelRental",
    "CreateRental",
    "ExtendRental",
    "ProcessOverdueRentals",
    "ReturnRental",
    # Reservations
    "CancelReservation",
    "ConfirmReservation",
    "CreateReservation",
    "FulfillReservation",
    "ProcessExpiredReservations",
]
