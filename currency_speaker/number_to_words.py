"""
Convert a numeric currency string to its English spoken form.

The digit string can be arbitrarily long and is never parsed into a single
machine integer. Instead it is split into groups of three digits, each group
is transcribed on its own, and the groups are joined with scale words.

Supported patterns:
    "5"           → "five"
    "42"          → "forty two"
    "099"         → "ninety nine"
    "$1,234"      → "one thousand two hundred thirty four"
    "1234567"     → "one million two hundred thirty four thousand five hundred sixty seven"
    "1000000"     → "one million"
    "", "0", "$0" → "zero"
"""

from __future__ import annotations

import logging
import re

from .exceptions import MalformedAmountError, UnsupportedMagnitudeError
from .models import SanitizedAmount, Transcription

logger = logging.getLogger(__name__)

# ─── Word Lookup Tables ──────────────────────────────────────────────

_UNITS: dict[str, str] = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
    "10": "ten",
    "11": "eleven",
    "12": "twelve",
    "13": "thirteen",
    "14": "fourteen",
    "15": "fifteen",
    "16": "sixteen",
    "17": "seventeen",
    "18": "eighteen",
    "19": "nineteen",
}

_TENS: dict[str, str] = {
    "0": "",
    "1": "",
    "2": "twenty",
    "3": "thirty",
    "4": "forty",
    "5": "fifty",
    "6": "sixty",
    "7": "seventy",
    "8": "eighty",
    "9": "ninety",
}

# Index 0 applies inside a chunk; 1..22 apply between chunks.
SCALES: tuple[str, ...] = (
    "hundred",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
    "quindecillion",
    "sexdecillion",
    "septendecillion",
    "octodecillion",
    "novemdecillion",
    "vigintillion",
    "centillion",
)

MAX_CHUNKS = len(SCALES)
MAX_DIGITS = MAX_CHUNKS * 3

ZERO_WORD = _UNITS["0"]

_SEPARATORS = re.compile(r"[\s,]")
_ALL_DIGITS = re.compile(r"[0-9]+")


# ─── Input Sanitation ────────────────────────────────────────────────


def sanitize_amount(raw: str) -> SanitizedAmount:
    """Strip whitespace, commas and a single leading currency symbol.

    Only the first character is ever treated as a symbol. Whatever else is
    left is returned untouched; ``currency_to_word`` decides what to do
    with it.
    """
    cleaned = _SEPARATORS.sub("", raw)
    symbol = ""
    if cleaned and not _ALL_DIGITS.match(cleaned):
        symbol, cleaned = cleaned[0], cleaned[1:]
    return SanitizedAmount(raw=raw, symbol=symbol, digits=cleaned)


def _is_numeric(digits: str) -> bool:
    """True when the cleaned string starts with a digit."""
    return _ALL_DIGITS.match(digits) is not None


# ─── Chunking ────────────────────────────────────────────────────────


def break_to_chunks(digits: str) -> list[str]:
    """Split a digit string into groups of three, most significant first.

    The leading group holds the ``len % 3`` leftover digits and is dropped
    when there are none:

        "1234567" → ["1", "234", "567"]
        "123456"  → ["123", "456"]
    """
    if len(digits) <= 3:
        return [digits]

    start = len(digits) % 3
    head, tail = digits[:start], digits[start:]
    chunks = [tail[i : i + 3] for i in range(0, len(tail), 3)]
    if head:
        chunks.insert(0, head)
    return chunks


# ─── Chunk Transcription ─────────────────────────────────────────────


def to_dollar(digits: str) -> str | None:
    """Exact word for "0".."19", or None when the key is not in the table."""
    return _UNITS.get(digits)


def to_tens(digits: str) -> str:
    """Transcribe a one- or two-digit string."""
    unit = to_dollar(digits)
    if unit is not None:
        return unit

    ones = "" if digits[1] == "0" else _UNITS[digits[1]]
    return f"{_TENS[digits[0]]} {ones}"


def to_hundred(digits: str) -> str:
    """Transcribe a chunk of up to three digits.

    An all-zero chunk ("000", "00") returns an empty string so that it
    disappears from a larger phrase instead of reading as "zero".
    """
    value = int(digits)
    if value <= 0:
        return ""
    # Padded chunks such as "099" fall back to their canonical form
    if value <= 99:
        return to_tens(str(value))

    return f"{_UNITS[digits[0]]} {SCALES[0]} {to_tens(digits[1:])}"


def to_xlion(digits: str) -> tuple[str, list[str]]:
    """Transcribe four or more digits.

    Returns:
        (phrase, scale_words) where scale_words lists the between-chunk
        scale words in the order they were emitted.

    Raises:
        UnsupportedMagnitudeError: If a non-zero chunk sits beyond "centillion".
    """
    chunks = break_to_chunks(digits)
    total = len(chunks)
    logger.debug("Chunked %d digits into %d groups: %s", len(digits), total, chunks)

    parts: list[str] = []
    scale_words: list[str] = []
    for index, chunk in enumerate(chunks):
        phrase = to_hundred(chunk)
        if not phrase:
            continue

        position = total - 1 - index
        if position >= MAX_CHUNKS:
            significant = digits.lstrip("0")
            raise UnsupportedMagnitudeError(
                f"Amount has {len(significant)} significant digits; "
                f"the largest supported scale is '{SCALES[-1]}' "
                f"({MAX_DIGITS} digits).",
                details={"digits": len(significant), "max_digits": MAX_DIGITS},
            )

        parts.append(phrase)
        if position:
            parts.append(SCALES[position])
            scale_words.append(SCALES[position])

    return " ".join(parts), scale_words


# ─── Main Converter ─────────────────────────────────────────────────


def _normalize(text: str) -> str:
    """Trim, drop line breaks and collapse runs of spaces."""
    return " ".join(text.split())


def transcribe(raw: str) -> Transcription:
    """Convert a currency string and keep the intermediate steps.

    Args:
        raw: e.g. "$1,234,567"

    Returns:
        Transcription with the symbol, digits, chunks and final words.

    Raises:
        MalformedAmountError: If non-digit characters remain after the symbol.
        UnsupportedMagnitudeError: If the amount is larger than the scale table.
    """
    amount = sanitize_amount(raw)
    digits = amount.digits

    if _is_numeric(digits) and not _ALL_DIGITS.fullmatch(digits):
        raise MalformedAmountError(
            f"Amount {raw!r} contains characters other than digits: {digits!r}",
            details={"raw": raw, "digits": digits},
        )

    if not _is_numeric(digits) or not digits.strip("0"):
        return Transcription(
            raw=raw, symbol=amount.symbol, digits=digits, chunks=[], words=ZERO_WORD
        )

    scale_words: list[str] = []
    length = len(digits)
    if length == 1:
        words = to_dollar(digits) or ""
    elif length == 2:
        words = to_tens(digits)
    elif length == 3:
        words = to_hundred(digits)
    else:
        words, scale_words = to_xlion(digits)

    logger.debug("Transcribed %r (%d digits)", raw, length)
    return Transcription(
        raw=raw,
        symbol=amount.symbol,
        digits=digits,
        chunks=break_to_chunks(digits),
        scale_words=scale_words,
        words=_normalize(words),
    )


def currency_to_word(raw: str) -> str:
    """Convert a currency string such as "$1,234" to English words.

    Zero, empty and non-numeric input all read as "zero".
    """
    return transcribe(raw).words
