"""Payment domain events.

Published by command handlers after a charge succeeds or is declined.
NotificationEventHandler turns them into member notifications.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class PaymentReceived(DomainEvent):
    """Charge captured.

    Attributes:
        member_id: Charged member.
        transaction_id: Gateway transaction id.
        amount: Amount charged.
        currency: ISO 4217 code.
        description: What the charge was for.
    """

    member_id: UUID
    transaction_id: str
    amount: Decimal
    currency: str
    description: str


@dataclass(frozen=True, kw_only=True)
class PaymentFailed(DomainEvent):
    """Charge declined; the originating command was aborted."""

    member_id: UUID
    amount: Decimal
    currency: str
    description: str
    reason: str
