"""
Currency Speaker — read currency amounts aloud.

Architecture: Sanitize → Chunk → Transcribe → Display + Speech
Philosophy:  Digits stay strings. No amount is too long to chunk.
"""

from .number_to_words import currency_to_word, transcribe

__version__ = "1.0.0"

__all__ = ["currency_to_word", "transcribe", "__version__"]
