"""Widget configuration dataclass."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from drag_verify.types import OutcomeUrls

SUCCESS_URL_ENV = "PUBLIC_SUCCESS_URL"
FAILURE_URL_ENV = "PUBLIC_FAIL_URL"
DEFAULT_URL = "/"


@dataclass(frozen=True)
class VerifyConfig:
    """Immutable configuration for one verification widget.

    Attributes:
        success_url: Destination after a verified gesture.
        failure_url: Destination after a failed gesture.
        success_threshold: Progress that must be strictly exceeded to verify.
        success_delay_ms: Pause between verification and redirect.
        failure_reset_delay_ms: How long the failure indicator stays visible.
        failure_redirect_delay_ms: Pause between the reset and the redirect.
        requery_geometry: Re-read the track geometry on every move.
    """

    success_url: str = DEFAULT_URL
    failure_url: str = DEFAULT_URL
    success_threshold: float = 85.0
    success_delay_ms: float = 800
    failure_reset_delay_ms: float = 1500
    failure_redirect_delay_ms: float = 1000
    requery_geometry: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.success_threshold <= 100:
            raise ValueError(
                f"success_threshold must be within [0, 100], got {self.success_threshold}"
            )
        for name in ("success_delay_ms", "failure_reset_delay_ms", "failure_redirect_delay_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @property
    def outcome_urls(self) -> OutcomeUrls:
        return OutcomeUrls(success=self.success_url, failure=self.failure_url)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> VerifyConfig:
        """Build a config with redirect targets taken from the environment.

        Unset or empty variables fall back to ``"/"``.
        """
        env = os.environ if environ is None else environ
        values = {
            "success_url": env.get(SUCCESS_URL_ENV) or DEFAULT_URL,
            "failure_url": env.get(FAILURE_URL_ENV) or DEFAULT_URL,
        }
        values.update(overrides)
        return cls(**values)
