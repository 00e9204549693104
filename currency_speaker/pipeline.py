"""
Readout pipeline — from raw input to text and speech.

Flow:
  ┌───────────┐
  │ Raw input │   ← every keystroke
  └─────┬─────┘
  ┌─────▼─────┐
  │ Debounce  │   ← latest request wins
  └─────┬─────┘
  ┌─────▼─────┐
  │ Transcribe│   ← pure converter, no state
  └─────┬─────┘
        ├──────────────┐
  ┌─────▼─────┐  ┌─────▼─────┐
  │  Display  │  │  Speech   │   ← cancel in-flight, speak new
  └───────────┘  └───────────┘
"""

from __future__ import annotations

import logging

from .config import Settings
from .debounce import LatestRequestScheduler
from .exceptions import CurrencySpeakerError
from .models import Transcription
from .number_to_words import transcribe
from .speech import ConsoleDisplay, DisplaySink, NullSpeechSink, SpeechSink

logger = logging.getLogger(__name__)


class CurrencyReadoutPipeline:
    """Wire the converter to a display sink and a speech sink.

    Usage:
        pipeline = CurrencyReadoutPipeline(display, speech)
        pipeline.on_input("$1")
        pipeline.on_input("$1,234")   # only this one is read out
    """

    def __init__(
        self,
        display: DisplaySink | None = None,
        speech: SpeechSink | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self.display = display or ConsoleDisplay()
        self.speech = speech or NullSpeechSink()
        self.scheduler: LatestRequestScheduler[str] = LatestRequestScheduler(
            self.settings.debounce_seconds, self._handle
        )

    def on_input(self, raw: str) -> None:
        """Queue a readout; newer input before the delay replaces it."""
        self.scheduler.submit(raw)

    def convert(self, raw: str) -> Transcription | None:
        """Read ``raw`` out right away.

        Returns:
            The transcription, or None if the amount could not be converted.
        """
        try:
            result = transcribe(raw)
        except CurrencySpeakerError as e:
            logger.warning("Cannot read out %r: [%s] %s", raw, e.code, e)
            self.display.show(str(e))
            return None

        logger.info("Reading out %r as %r", raw, result.words)
        self.display.show(result.words)
        self.speech.speak(result.words)
        return result

    def close(self) -> None:
        self.scheduler.cancel()
        self.speech.cancel()

    def _handle(self, raw: str) -> None:
        self.convert(raw)
