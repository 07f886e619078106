"""
Application configuration.

Centralizes environment variables, constants, and settings
using dataclasses for type safety and immutability.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CalendarSettings:
    """Supported calendar range for holiday calculations."""

    min_year: int = field(
        default_factory=lambda: int(os.environ.get("HOLIDAY_MIN_YEAR", 1000))
    )
    max_year: int = field(
        default_factory=lambda: int(os.environ.get("HOLIDAY_MAX_YEAR", 9999))
    )

    def contains(self, year: int) -> bool:
        """Check if a year lies within the supported range."""
        return self.min_year <= year <= self.max_year


@dataclass(frozen=True)
class LocaleSettings:
    """Locale resolution settings."""

    # Names fall back to this locale when untranslated
    default_locale: str = field(
        default_factory=lambda: os.environ.get("HOLIDAY_DEFAULT_LOCALE", "en_US")
    )


@dataclass(frozen=True)
class Settings:
    """Main application settings."""

    calendar: CalendarSettings = field(default_factory=CalendarSettings)
    locale: LocaleSettings = field(default_factory=LocaleSettings)
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", 8080)))
    debug: bool = field(default_factory=lambda: os.environ.get("DEBUG", "false").lower() == "true")


# Singleton settings instance
settings = Settings()
