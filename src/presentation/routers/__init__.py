"""HTTP routers.

- system_router: non-resource endpoints (root, health)
- api_router: resource endpoints under the configured API prefix
"""

from src.presentation.routers.api import api_router
from src.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
