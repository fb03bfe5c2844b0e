"""Data models exchanged with the currapi.com API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from currapi.errors import UpstreamLogicalError


@dataclass(frozen=True, slots=True)
class RateQuery:
    """A single ``base``/``target`` lookup for an ISO ``YYYY-MM-DD`` date."""

    base: str
    target: str
    date: str

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "RateQuery":
        """Build a query from a ``{"date", "base", "target"}`` mapping."""

        return cls(
            base=params.get("base", ""),
            target=params.get("target", ""),
            date=params.get("date", ""),
        )


@dataclass(slots=True)
class ExchangeRateData:
    """The ``data`` block of a successful rates response."""

    rate: float
    base: str
    target: str
    date: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ExchangeRateData":
        try:
            rate = float(payload["rate"])
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamLogicalError("Missing or non-numeric rate in response") from exc
        return cls(
            rate=rate,
            base=str(payload.get("base", "")),
            target=str(payload.get("target", "")),
            date=str(payload.get("date", "")),
        )


@dataclass(slots=True)
class RateLimitInfo:
    """Advisory quota metadata; only ever logged."""

    limit: int | None
    remaining: int | None
    reset: str | None

    @classmethod
    def from_payload(cls, payload: Any) -> "RateLimitInfo | None":
        """Lenient parser: unknown shapes yield ``None`` rather than raising."""

        if not isinstance(payload, Mapping):
            return None
        return cls(
            limit=payload.get("rateLimit"),
            remaining=payload.get("remaining"),
            reset=payload.get("reset"),
        )


@dataclass(slots=True)
class ExchangeRateResponse:
    """Parsed body of ``GET /{date}/{base}/{target}/rates.json``."""

    success: bool
    data: ExchangeRateData | None = None
    rate_limit: RateLimitInfo | None = None
    error: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ExchangeRateResponse":
        if not isinstance(payload, Mapping):
            raise UpstreamLogicalError("Unexpected response body")
        success = bool(payload.get("success"))
        data = payload.get("data")
        error = payload.get("error")
        return cls(
            success=success,
            data=ExchangeRateData.from_payload(data) if success and data else None,
            rate_limit=RateLimitInfo.from_payload(payload.get("rateLimit")),
            error=str(error) if error else None,
        )

    def require_data(self) -> ExchangeRateData:
        """Return :attr:`data` or raise :class:`UpstreamLogicalError`."""

        if not self.success or self.data is None:
            raise UpstreamLogicalError(self.error)
        return self.data


__all__ = ["ExchangeRateData", "ExchangeRateResponse", "RateLimitInfo", "RateQuery"]
