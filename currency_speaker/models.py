"""
Pydantic models for amounts, transcriptions and voices.

Models are frozen: a transcription is a record of one conversion and is
never edited after the converter hands it out.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ─── Converter Models ───────────────────────────────────────────────


class SanitizedAmount(BaseModel):
    """Raw input after separators and the leading symbol are removed."""

    model_config = ConfigDict(frozen=True)

    raw: str
    symbol: str = ""  # e.g. "$", empty when the input starts with a digit
    digits: str


class Transcription(BaseModel):
    """The spoken form of one amount, with the steps that produced it."""

    model_config = ConfigDict(frozen=True)

    raw: str
    symbol: str = ""
    digits: str
    chunks: list[str] = Field(default_factory=list)  # Empty for zero
    scale_words: list[str] = Field(default_factory=list)  # thousand, million, ...
    words: str


# ─── Speech Models ──────────────────────────────────────────────────


class Voice(BaseModel):
    """A gTTS accent, addressed by a human-readable name."""

    model_config = ConfigDict(frozen=True)

    name: str
    lang: str = "en"
    tld: str = "com"  # Google Translate host that selects the accent
