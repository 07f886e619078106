"""
Services Layer.

Business logic orchestration:
- Provider listing
- Holiday set queries
- Date checks
"""

from holiday_rules.services.holidays import DateCheckResult, HolidayListing, HolidayService


__all__ = [
    "DateCheckResult",
    "HolidayListing",
    "HolidayService",
]
