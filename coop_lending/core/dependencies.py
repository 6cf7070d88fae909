"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from coop_lending.application.services import LendingService
from coop_lending.service.lending import (
    Clock,
    LendingSettings,
    get_lending_settings,
    system_clock,
)


def get_clock() -> Clock:
    """Get the clock used for date-dependent calculations."""
    return system_clock


def get_settings_for_lending() -> LendingSettings:
    """Get the lending policy settings."""
    return get_lending_settings()


def get_lending_service(
    clock: Annotated[Clock, Depends(get_clock)],
    settings: Annotated[LendingSettings, Depends(get_settings_for_lending)],
) -> LendingService:
    """Get a LendingService instance with its clock and settings."""
    return LendingService(clock=clock, settings=settings)
