"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    to_application_error: Domain error → application error mapping
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from src.application.errors.error_mapping import (
    application_code_for,
    to_application_error,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "application_code_for",
    "to_application_error",
]
