"""Notification channel enumeration."""

from enum import Enum


class NotificationChannel(str, Enum):
    """Delivery channel for member notifications."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    IN_APP = "in_app"
