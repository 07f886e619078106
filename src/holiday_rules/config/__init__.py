"""Configuration package."""

from holiday_rules.config.settings import (
    CalendarSettings,
    LocaleSettings,
    Settings,
    settings,
)

__all__ = [
    "CalendarSettings",
    "LocaleSettings",
    "Settings",
    "settings",
]
