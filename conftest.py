"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

sys.path.insert(0, str(Path(__file__).parent))

FAKE_MP3 = b"ID3\x04\x00fake-mp3"


class FakeGTTS:
    """Stands in for gTTS: records the request and writes canned bytes."""

    calls: list[dict] = []

    def __init__(self, text, lang="en", tld="com", slow=False, **kwargs):
        self.text = text
        FakeGTTS.calls.append({"text": text, "lang": lang, "tld": tld, "slow": slow})

    def write_to_fp(self, fp):
        fp.write(FAKE_MP3)


@pytest.fixture(autouse=True)
def _no_tts_calls():
    """Prevent real Google TTS requests during tests — keeps the suite fast and offline."""
    FakeGTTS.calls = []
    with patch("currency_speaker.speech.gTTS", FakeGTTS):
        yield FakeGTTS
