"""Application services shared by several handlers."""

from src.application.services.availability_checker import AvailabilityChecker
from src.application.services.member_eligibility import MemberEligibility
from src.application.services.payment_collector import PaymentCollector

__all__ = [
    "AvailabilityChecker",
    "MemberEligibility",
    "PaymentCollector",
]
