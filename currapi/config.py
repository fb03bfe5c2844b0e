"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Final, Mapping

from currapi.validation import utc_now

BASE_URL: Final[str] = "https://currapi.com/v1"
DEFAULT_TIMEOUT: Final[float] = 10.0

API_KEY_ENV: Final[str] = "CURRAPI_API_KEY"
VERBOSE_ENV: Final[str] = "CURRAPI_VERBOSE_MODE"


@dataclass(slots=True)
class ClientConfig:
    """Everything a :class:`~currapi.client.CurrAPIClient` needs besides its cache.

    ``clock`` supplies "now" for the future-date check so callers (and tests)
    can pin it.
    """

    api_key: str
    verbose_mode: bool = False
    clock: Callable[[], datetime] = field(default=utc_now, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        masked = "***" if self.api_key else "''"
        return (
            f"ClientConfig(api_key={masked}, verbose_mode={self.verbose_mode}, "
            f"timeout={self.timeout})"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Read ``CURRAPI_API_KEY`` and ``CURRAPI_VERBOSE_MODE``.

        A missing key is not an error here; it is reported as
        :class:`~currapi.errors.MissingCredentialError` when a rate is requested.
        """

        env = os.environ if environ is None else environ
        return cls(
            api_key=env.get(API_KEY_ENV, ""),
            verbose_mode=bool(env.get(VERBOSE_ENV)),
        )


__all__ = ["API_KEY_ENV", "BASE_URL", "ClientConfig", "DEFAULT_TIMEOUT", "VERBOSE_ENV"]
