"""
Runtime settings, read from environment variables.

Entry points load a ``.env`` file first (when python-dotenv is installed),
so the same variables can live there during development:

    CURRENCY_SPEAKER_DEBOUNCE_MS=500
    CURRENCY_SPEAKER_VOICE="Google UK English Female"
    CURRENCY_SPEAKER_SLOW=false
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

_PREFIX = "CURRENCY_SPEAKER_"

DEFAULT_VOICE = "Google UK English Female"


class Settings(BaseModel):
    """Debounce and speech settings shared by the pipeline and the API."""

    debounce_ms: int = Field(default=500, ge=0)
    voice: str = DEFAULT_VOICE
    slow: bool = False

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``CURRENCY_SPEAKER_*`` variables.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    values = {
        field: env[_PREFIX + field.upper()]
        for field in Settings.model_fields
        if _PREFIX + field.upper() in env
    }
    return Settings.model_validate(values)
