"""
Currency Speaker — FastAPI Server
==================================

RESTful API for reading currency amounts as English words and speech.

Endpoints:
    POST /convert           Convert an amount to words
    POST /speak             Convert an amount and return MP3 speech
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, Field

from currency_speaker import __version__
from currency_speaker.config import load_settings
from currency_speaker.exceptions import CurrencySpeakerError, SpeechSynthesisError
from currency_speaker.models import Transcription
from currency_speaker.number_to_words import transcribe
from currency_speaker.speech import GTTSSpeechSink

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan (build the speech sink) ───────────────────

_speech: GTTSSpeechSink | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Select the voice once on startup."""
    global _speech  # noqa: PLW0603
    _speech = GTTSSpeechSink(load_settings())
    yield
    _speech.close()
    _speech = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Currency Speaker API",
    description=(
        "Reads currency amounts such as '$1,234,567' as English words, "
        "for any length up to centillions, and speaks them with gTTS."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class AmountRequest(BaseModel):
    """Request body for /convert and /speak."""

    amount: str = Field(
        ...,
        description="Amount as typed, optionally with a currency symbol and separators.",
        json_schema_extra={"example": "$1,234,567"},
    )


class ConvertResponse(Transcription):
    """API-facing transcription (inherits all fields from Transcription)."""

    scale_word_count: int

    model_config = {"json_schema_extra": {"example": {
        "raw": "$1,234,567",
        "symbol": "$",
        "digits": "1234567",
        "chunks": ["1", "234", "567"],
        "scale_words": ["million", "thousand"],
        "scale_word_count": 2,
        "words": "one million two hundred thirty four thousand five hundred sixty seven",
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    voice: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_speech() -> GTTSSpeechSink:
    if _speech is None:
        raise HTTPException(status_code=503, detail="Speech output not initialised")
    return _speech


def _error_detail(error: CurrencySpeakerError) -> dict:
    return {"code": error.code, "message": str(error), "details": error.details}


def _convert(amount: str) -> Transcription:
    try:
        return transcribe(amount)
    except CurrencySpeakerError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e)) from e


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert an amount to English words",
    tags=["Conversion"],
    responses={422: {"description": "Malformed amount or unsupported magnitude"}},
)
def convert_amount(request: AmountRequest) -> ConvertResponse:
    """Transcribe an amount.

    Returns the words along with the intermediate steps:
    - **symbol**: the stripped leading currency symbol, if any
    - **chunks**: three-digit groups, most significant first
    - **scale_words**: the scale words that were emitted
    """
    result = _convert(request.amount)
    return ConvertResponse(
        **result.model_dump(), scale_word_count=len(result.scale_words)
    )


@app.post(
    "/speak",
    summary="Speak an amount as MP3 audio",
    tags=["Speech"],
    response_class=Response,
    responses={
        200: {"content": {"audio/mpeg": {}}},
        422: {"description": "Malformed amount or unsupported magnitude"},
        502: {"description": "Speech synthesis failed upstream"},
        503: {"description": "Speech output not yet initialised"},
    },
)
async def speak_amount(request: AmountRequest) -> Response:
    """Synthesize the spoken form of an amount with the configured voice."""
    speech = _get_speech()
    result = _convert(request.amount)
    try:
        audio = await asyncio.to_thread(speech.synthesize, result.words)
    except SpeechSynthesisError as e:
        raise HTTPException(status_code=502, detail=_error_detail(e)) from e
    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"X-Words": result.words},
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Speech output not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and the selected voice."""
    speech = _get_speech()
    return HealthResponse(status="healthy", version=__version__, voice=speech.voice.name)
