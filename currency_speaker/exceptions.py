"""
Custom exception hierarchy for currency readout.

Each exception type carries a machine-readable code so the API layer can
report failures without string matching on messages.
"""

from __future__ import annotations


class CurrencySpeakerError(Exception):
    """Base exception for all conversion and speech failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MalformedAmountError(CurrencySpeakerError):
    """Characters other than digits remain after the currency symbol."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MALFORMED_AMOUNT", message, details)


class UnsupportedMagnitudeError(CurrencySpeakerError):
    """The amount is larger than the biggest known scale word."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_MAGNITUDE", message, details)


class SpeechSynthesisError(CurrencySpeakerError):
    """Text-to-speech could not produce audio."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SPEECH_SYNTHESIS_FAILED", message, details)
