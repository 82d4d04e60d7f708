"""Notification adapters."""

from src.infrastructure.notifications.console_notification_service import (
    ConsoleNotificationService,
)

__all__ = ["ConsoleNotificationService"]
