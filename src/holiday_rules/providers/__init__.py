"""
Holiday Providers.

Registry of jurisdiction definitions, looked up by ISO 3166 code or
by name (case-insensitive).
"""

from typing import Dict, List, Optional

from holiday_rules.core.exceptions import UnknownProviderError
from holiday_rules.core.holiday_set import HolidaySet
from holiday_rules.core.provider import ProviderDefinition, build_holiday_set
from holiday_rules.infrastructure.logging import get_logger, log_duration
from holiday_rules.providers.finland import FINLAND
from holiday_rules.providers.france import FRANCE
from holiday_rules.providers.netherlands import NETHERLANDS
from holiday_rules.providers.norway import NORWAY
from holiday_rules.providers.portugal import PORTUGAL
from holiday_rules.providers.sweden import SWEDEN
from holiday_rules.providers.usa import USA


logger = get_logger(__name__)


PROVIDERS: Dict[str, ProviderDefinition] = {
    definition.id: definition
    for definition in (FINLAND, FRANCE, NETHERLANDS, NORWAY, PORTUGAL, SWEDEN, USA)
}

_ALIASES: Dict[str, str] = {
    **{provider_id.lower(): provider_id for provider_id in PROVIDERS},
    **{definition.name.lower(): provider_id for provider_id, definition in PROVIDERS.items()},
}


def get_definition(provider_id: str) -> ProviderDefinition:
    """
    Resolve a provider definition.

    Raises:
        UnknownProviderError: If nothing is registered under that id or name.
    """
    resolved = _ALIASES.get(str(provider_id).strip().lower())
    if resolved is None:
        raise UnknownProviderError(provider_id)
    return PROVIDERS[resolved]


def available_providers() -> List[ProviderDefinition]:
    """Registered providers ordered by id."""
    return [PROVIDERS[provider_id] for provider_id in sorted(PROVIDERS)]


@log_duration("create_holiday_set")
def create(
    provider_id: str,
    year: int,
    locale: Optional[str] = None,
    timezone: Optional[str] = None,
) -> HolidaySet:
    """
    Compute the holidays of a provider for a year.

    Args:
        provider_id: ISO 3166 code or provider name (e.g. "SE", "Sweden").
        year: The calendar year.
        locale: Locale for names; provider default when omitted.
        timezone: IANA timezone override; provider default when omitted.

    Returns:
        The provider's holiday set for the year.

    Raises:
        UnknownProviderError: If the provider is not registered.
        InvalidArgumentError: If the year or timezone is invalid.
        UnknownLocaleError: If the locale is not supported.
    """
    definition = get_definition(provider_id)
    holiday_set = build_holiday_set(definition, year, locale, timezone)

    logger.for_holiday_set(holiday_set).with_fields(holiday_count=len(holiday_set)).debug(
        f"Computed {len(holiday_set)} holidays for {definition.id} {year}"
    )

    return holiday_set


__all__ = [
    "PROVIDERS",
    "available_providers",
    "create",
    "get_definition",
]
