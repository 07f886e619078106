"""
Flask API Routes.

Defines all HTTP endpoints for the holiday service.
"""

from typing import Any, Dict, Tuple

from flask import Blueprint, request
from pydantic import ValidationError as PydanticValidationError

from holiday_rules import __version__
from holiday_rules.api.validation import CheckDateQuery, HolidaysQuery, ProviderQuery
from holiday_rules.core.exceptions import (
    BusinessError,
    HolidayNotFoundError,
    InfrastructureError,
    UnknownProviderError,
)
from holiday_rules.infrastructure.logging import get_logger
from holiday_rules.services import HolidayService


logger = get_logger(__name__)


api_bp = Blueprint("api", __name__)


def _error_response(
    message: str,
    status_code: int,
    error_type: str = "error",
) -> Tuple[Dict[str, Any], int]:
    """Create standardized error response."""
    return {
        "success": False,
        "error": message,
        "error_type": error_type,
    }, status_code


def _success_response(
    data: Dict[str, Any],
    status_code: int = 200,
) -> Tuple[Dict[str, Any], int]:
    """Create standardized success response."""
    return {
        "success": True,
        **data,
    }, status_code


def _validation_error(e: PydanticValidationError) -> Tuple[Dict[str, Any], int]:
    error = e.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ()))
    message = f"{field}: {error['msg']}" if field else error["msg"]
    return _error_response(message, 400, "validation_error")


# ============================================================================
# Health Check
# ============================================================================

@api_bp.route("/health", methods=["GET"])
def health_check() -> Tuple[Dict[str, Any], int]:
    """
    Health check endpoint.

    Returns:
        Health status response.
    """
    return _success_response({
        "status": "healthy",
        "service": "holiday-rules",
        "version": __version__,
    })


@api_bp.route("/", methods=["GET"])
def root() -> Tuple[Dict[str, Any], int]:
    """
    Root endpoint - same payload as health.
    """
    return health_check()


# ============================================================================
# Provider Endpoints
# ============================================================================

@api_bp.route("/providers", methods=["GET"])
def list_providers() -> Tuple[Dict[str, Any], int]:
    """
    List registered holiday providers.

    Returns:
        Provider ids, names and defaults.
    """
    service = HolidayService()
    definitions = service.list_providers()

    return _success_response({
        "count": len(definitions),
        "providers": [
            {
                "id": d.id,
                "name": d.name,
                "timezone": d.timezone,
                "locale": d.locale,
            }
            for d in definitions
        ],
    })


@api_bp.route("/holidays/<provider_id>", methods=["GET"])
def list_holidays(provider_id: str) -> Tuple[Dict[str, Any], int]:
    """
    List the holidays of a provider for a year.

    Query Parameters:
        year (int): Calendar year, defaults to the current year.
        locale (str): Locale for holiday names.
        timezone (str): IANA timezone override.
        type (str): Only holidays of this type.

    Returns:
        Holidays ordered by date.
    """
    try:
        query = HolidaysQuery(**request.args.to_dict())
    except PydanticValidationError as e:
        return _validation_error(e)

    service = HolidayService()
    listing = service.list_holidays(
        provider_id,
        year=query.year,
        locale=query.locale,
        timezone=query.timezone,
        holiday_type=query.type,
    )

    return _success_response({
        "provider": listing.provider_id,
        "year": listing.year,
        "locale": listing.locale,
        "timezone": listing.timezone,
        "count": len(listing.holidays),
        "holidays": [h.to_dict() for h in listing.holidays],
    })


@api_bp.route("/holidays/<provider_id>/check", methods=["GET"])
def check_date(provider_id: str) -> Tuple[Dict[str, Any], int]:
    """
    Check whether a date is a holiday.

    Query Parameters:
        date (str): ISO date, required.
        locale (str): Locale for holiday names.
        timezone (str): IANA timezone override.

    Returns:
        is_holiday flag and the holidays on that date.
    """
    try:
        query = CheckDateQuery(**request.args.to_dict())
    except PydanticValidationError as e:
        return _validation_error(e)

    service = HolidayService()
    result = service.check_date(
        provider_id,
        query.day,
        locale=query.locale,
        timezone=query.timezone,
    )

    return _success_response({
        "provider": result.provider_id,
        "date": result.date.isoformat(),
        "is_holiday": result.is_holiday,
        "holidays": [h.to_dict() for h in result.holidays],
    })


@api_bp.route("/holidays/<provider_id>/<key>", methods=["GET"])
def get_holiday(provider_id: str, key: str) -> Tuple[Dict[str, Any], int]:
    """
    Look up one holiday by key.

    Query Parameters:
        year (int): Calendar year, defaults to the current year.
        locale (str): Locale for the holiday name.
        timezone (str): IANA timezone override.

    Returns:
        The holiday, or 404 when the provider has no such holiday that year.
    """
    try:
        query = ProviderQuery(**request.args.to_dict())
    except PydanticValidationError as e:
        return _validation_error(e)

    service = HolidayService()
    definition = service.provider(provider_id)
    holiday = service.get_holiday(
        definition.id,
        key,
        year=query.year,
        locale=query.locale,
        timezone=query.timezone,
    )

    return _success_response({
        "provider": definition.id,
        "holiday": holiday.to_dict(),
    })


# ============================================================================
# Error Handlers
# ============================================================================

@api_bp.errorhandler(UnknownProviderError)
@api_bp.errorhandler(HolidayNotFoundError)
def handle_not_found(error: BusinessError) -> Tuple[Dict[str, Any], int]:
    """Handle unknown providers and holidays (404)."""
    logger.with_fields(error_type=type(error).__name__, **error.details).info(f"Not found: {error}")
    return _error_response(str(error), 404, type(error).__name__)


@api_bp.errorhandler(BusinessError)
def handle_business_error(error: BusinessError) -> Tuple[Dict[str, Any], int]:
    """Handle invalid input errors (4xx)."""
    logger.with_fields(error_type=type(error).__name__).warning(f"Business error: {error}")
    return _error_response(str(error), 400, type(error).__name__)


@api_bp.errorhandler(InfrastructureError)
def handle_infrastructure_error(
    error: InfrastructureError,
) -> Tuple[Dict[str, Any], int]:
    """Handle configuration errors (5xx)."""
    logger.with_fields(error_type=type(error).__name__).error(f"Infrastructure error: {error}")
    return _error_response(str(error), 500, type(error).__name__)


@api_bp.errorhandler(Exception)
def handle_unexpected_error(error: Exception) -> Tuple[Dict[str, Any], int]:
    """Handle unexpected errors (500)."""
    logger.with_fields(error_type=type(error).__name__).exception(f"Unexpected error: {error}")
    return _error_response(
        "An unexpected error occurred",
        500,
        "internal_error",
    )
