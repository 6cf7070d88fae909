"""Application services (use cases)."""

from .lending_service import LendingService

__all__ = [
    "LendingService",
]
