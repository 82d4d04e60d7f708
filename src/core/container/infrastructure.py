"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Logging (structlog console adapter)
- Payments (mock gateway)
- Notifications (console)

Request-scoped:
- Database session (one per request, commit on success)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols import (
        LoggerProtocol,
        NotificationServiceProtocol,
        PaymentServiceProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
        pool_size=settings.db_pool_min,
        max_overflow=settings.db_pool_max - settings.db_pool_min,
        connect_timeout_s=settings.db_connection_timeout_ms / 1000,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    JSON output for testing/ci/production or LOG_FORMAT=json, human-readable
    console output otherwise.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_payment_service() -> "PaymentServiceProtocol":
    """Get payment gateway adapter singleton (app-scoped).

    Only the mock gateway is bundled; PAYMENT_FAIL_ALL=true makes it
    decline every charge.
    """
    from src.infrastructure.payments.mock_payment_service import MockPaymentService

    return MockPaymentService(logger=get_logger(), fail_all=settings.payment_fail_all)


@lru_cache()
def get_notification_service() -> "NotificationServiceProtocol":
    from src.infrastructure.notifications.console_notification_service import (
        ConsoleNotificationService,
    )

    return ConsoleNotificationService(logger=get_logger())


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits when the request finishes without error, rolls back otherwise.

    Usage:
        # Presentation Layer (FastAPI Depends)
        @router.post("/rentals")
        async def create_rental(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
