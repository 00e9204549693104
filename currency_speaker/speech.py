"""
Speech output for transcribed amounts.

Audio comes from Google Translate's TTS endpoint through gTTS. A sink only
ever voices the latest phrase: a new ``speak()`` cancels whatever is still
waiting or being synthesized, and stale audio is discarded rather than
delivered.

Design:
  - One worker thread, so requests are synthesized in order
  - A generation counter marks which request is current
  - Failures are logged, never raised into the caller's thread
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from io import BytesIO
from typing import Protocol

from gtts import gTTS, gTTSError

from .config import DEFAULT_VOICE, Settings
from .exceptions import SpeechSynthesisError
from .models import Voice

logger = logging.getLogger(__name__)


# ─── Voices ──────────────────────────────────────────────────────────

VOICES: tuple[Voice, ...] = (
    Voice(name=DEFAULT_VOICE, lang="en", tld="co.uk"),
    Voice(name="Google US English", lang="en", tld="com"),
    Voice(name="Google Australian English", lang="en", tld="com.au"),
    Voice(name="Google Canadian English", lang="en", tld="ca"),
    Voice(name="Google Indian English", lang="en", tld="co.in"),
)


def select_voice(preferred: str | None, voices: Sequence[Voice] = VOICES) -> Voice:
    """Pick the voice named ``preferred``, else the first one available.

    Raises:
        SpeechSynthesisError: If no voices are available at all.
    """
    if not voices:
        raise SpeechSynthesisError("No voices available for speech output")
    for voice in voices:
        if voice.name == preferred:
            return voice
    logger.info("Voice %r not available, falling back to %r", preferred, voices[0].name)
    return voices[0]


# ─── Sink Protocols ──────────────────────────────────────────────────


class SpeechSink(Protocol):
    """Voices text; ``speak`` replaces whatever is still in flight."""

    def speak(self, text: str) -> object: ...

    def cancel(self) -> None: ...


class DisplaySink(Protocol):
    def show(self, text: str) -> None: ...


class ConsoleDisplay:
    """Print each phrase on its own line."""

    def show(self, text: str) -> None:
        print(text)


class NullSpeechSink:
    """Remember phrases instead of voicing them (audio disabled, tests)."""

    def __init__(self) -> None:
        self.spoken: list[str] = []

    def speak(self, text: str) -> None:
        self.spoken.append(text)

    def cancel(self) -> None:
        pass


# ─── gTTS Sink ───────────────────────────────────────────────────────


class GTTSSpeechSink:
    """Synthesize MP3 audio with gTTS, latest request wins.

    Args:
        settings: Voice preference and speaking rate.
        on_audio: Receives the MP3 bytes of each phrase that was not
            superseded before synthesis finished.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        on_audio: Callable[[bytes], None] | None = None,
        voices: Sequence[Voice] = VOICES,
    ):
        self.settings = settings or Settings()
        self.voice = select_voice(self.settings.voice, voices)
        self._on_audio = on_audio
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="gtts")
        self._lock = threading.Lock()
        self._generation = 0
        self._future: Future[bytes | None] | None = None

    def synthesize(self, text: str) -> bytes:
        """Return MP3 audio for ``text`` using the selected voice.

        Raises:
            SpeechSynthesisError: If the text is empty or gTTS fails.
        """
        if not text.strip():
            raise SpeechSynthesisError("Nothing to speak: text is empty")
        buffer = BytesIO()
        try:
            tts = gTTS(
                text=text,
                lang=self.voice.lang,
                tld=self.voice.tld,
                slow=self.settings.slow,
            )
            tts.write_to_fp(buffer)
        except (gTTSError, AssertionError, ValueError) as e:
            raise SpeechSynthesisError(
                f"Speech synthesis failed: {e}",
                details={"voice": self.voice.name},
            ) from e
        return buffer.getvalue()

    def speak(self, text: str) -> Future[bytes | None]:
        """Cancel anything in flight and voice ``text``.

        Returns:
            A future resolving to the audio, or None if the request was
            superseded or failed.
        """
        with self._lock:
            if self._future is not None:
                self._future.cancel()
            self._generation += 1
            generation = self._generation
            self._future = self._executor.submit(self._run, generation, text)
            return self._future

    def cancel(self) -> None:
        """Drop the pending or running request; its audio is never delivered."""
        with self._lock:
            if self._future is not None:
                self._future.cancel()
                self._future = None
            self._generation += 1

    def close(self) -> None:
        """Finish the current request and stop the worker."""
        self._executor.shutdown(wait=True)

    # ─── Internals ──────────────────────────────────────────────────

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _run(self, generation: int, text: str) -> bytes | None:
        if not self._is_current(generation):
            return None
        try:
            audio = self.synthesize(text)
        except SpeechSynthesisError as e:
            logger.error("Speech output failed: %s", e)
            return None

        if not self._is_current(generation):
            logger.debug("Discarding audio for superseded phrase %r", text)
            return None
        if self._on_audio is not None:
            try:
                self._on_audio(audio)
            except Exception:
                logger.exception("Audio delivery failed for %r", text)
        return audio
