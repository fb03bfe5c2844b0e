"""Pre-flight checks applied to every rate query before it reaches the network."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone

from currapi.currencies import is_supported_currency
from currapi.errors import (
    FutureDateError,
    InvalidCurrencyError,
    InvalidDateError,
    MalformedDateError,
    MissingCredentialError,
    MissingDateError,
)
from currapi.models import RateQuery

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def utc_now() -> datetime:
    """Default clock used by :class:`currapi.config.ClientConfig`."""

    return datetime.now(timezone.utc)


def _as_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def today_iso(now: datetime) -> str:
    """Return the UTC calendar day of ``now`` as ``YYYY-MM-DD``."""

    return _as_aware(now).astimezone(timezone.utc).date().isoformat()


def parse_rate_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, distinguishing bad shape from bad calendar day."""

    if not value:
        raise MissingDateError()
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise MalformedDateError(str(value))
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(value) from exc


def validate_rate_query(query: RateQuery, *, api_key: str | None, now: datetime) -> None:
    """Raise the first failing check for ``query``; return ``None`` when it is usable.

    Checks run in a fixed order: credential, base currency, target currency,
    date presence, date shape, calendar validity and finally that the day's
    midnight (UTC) is not strictly after ``now``.
    """

    if not api_key:
        raise MissingCredentialError()
    if not is_supported_currency(query.base):
        raise InvalidCurrencyError(query.base, "base")
    if not is_supported_currency(query.target):
        raise InvalidCurrencyError(query.target, "target")

    rate_day = parse_rate_date(query.date)
    starts_at = datetime.combine(rate_day, time.min, tzinfo=timezone.utc)
    if starts_at > _as_aware(now):
        raise FutureDateError(query.date)


__all__ = ["DATE_FORMAT", "parse_rate_date", "today_iso", "utc_now", "validate_rate_query"]
