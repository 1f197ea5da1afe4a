"""Timestamp handling for values coming off the wire."""

from datetime import UTC, datetime
from typing import Annotated

from dateutil.parser import isoparse
from pydantic import BeforeValidator


def parse_timestamp(value: object) -> datetime | None:
    """
    Decode an API timestamp into a timezone-aware datetime.

    The API sends ISO 8601 strings ("2024-01-15T10:30:00Z"). Naive values are
    assumed to be UTC. Anything that cannot be parsed decodes to None so a
    single malformed field never fails the whole resource.

    Args:
        value: An ISO 8601 string, a datetime, or None.

    Returns:
        A timezone-aware datetime, or None.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)

    if not isinstance(value, str):
        return None

    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError):
        return None
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


Timestamp = Annotated[datetime | None, BeforeValidator(parse_timestamp)]


def require_timestamp(value: object) -> datetime | None:
    """
    Validate a caller-supplied timestamp for a request body.

    Accepts a datetime or an ISO 8601 string. Naive values are assumed to be
    UTC. Anything else raises ValueError, which pydantic reports as a
    ValidationError.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)

    if not isinstance(value, str):
        raise ValueError(f"Expected a datetime or an ISO 8601 string, got {type(value).__name__}")

    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid ISO 8601 timestamp: '{value}'") from e
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


RequestTimestamp = Annotated[datetime | None, BeforeValidator(require_timestamp)]
