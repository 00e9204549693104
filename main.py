#!/usr/bin/env python3
"""
Currency Speaker — Entry Point
===============================

Reads a handful of amounts (or the ones given on the command line) and
prints their spoken form.

Usage:
    python main.py                             # Sample amounts, no audio
    python main.py '$1,234' 42 1000000         # Your own amounts
    CURRENCY_SPEAKER_AUDIO_DIR=out python main.py   # Also save MP3s via gTTS
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from currency_speaker.config import load_settings
from currency_speaker.models import Transcription
from currency_speaker.pipeline import CurrencyReadoutPipeline
from currency_speaker.speech import GTTSSpeechSink, NullSpeechSink

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


SAMPLE_AMOUNTS = [
    "$0",
    "5",
    "42",
    "099",
    "$1,234",
    "1234567",
    "$ 1 000 000",
    "€99,000,000,000",
    "12.50",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


class _SilentDisplay:
    """Results are printed by the report below, not as they arrive."""

    def show(self, text: str) -> None:
        pass


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_readout(raw: str, result: Transcription | None) -> None:
    """Print one amount and its spoken form."""
    print(f"  {_BOLD}{raw!r}{_RESET}")
    if result is None:
        print(f"    {_RED}could not be read out{_RESET}\n")
        return
    if result.chunks:
        print(f"    {_DIM}chunks: {' | '.join(result.chunks)}{_RESET}")
    print(f"    {_GREEN}{result.words}{_RESET}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main() -> None:
    """Read out every amount and exit non-zero if any failed."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    amounts = sys.argv[1:] or SAMPLE_AMOUNTS
    settings = load_settings()

    audio_dir = os.environ.get("CURRENCY_SPEAKER_AUDIO_DIR")
    if audio_dir:
        out = Path(audio_dir)
        out.mkdir(parents=True, exist_ok=True)
        speech = GTTSSpeechSink(settings)
    else:
        speech = None

    pipeline = CurrencyReadoutPipeline(_SilentDisplay(), NullSpeechSink(), settings)

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  CURRENCY READOUT{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = 0
    for index, raw in enumerate(amounts):
        result = pipeline.convert(raw)
        print_readout(raw, result)
        if result is None:
            failures += 1
        elif speech is not None:
            (out / f"amount_{index:02d}.mp3").write_bytes(speech.synthesize(result.words))

    if speech is not None:
        speech.close()
    pipeline.close()

    print(f"{'=' * _WIDTH}\n")
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
