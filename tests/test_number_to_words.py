"""
Test suite for the number-to-words converter.

Tests the pure converter only: no speech, no threads, no network.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from currency_speaker.exceptions import MalformedAmountError, UnsupportedMagnitudeError
from currency_speaker.number_to_words import (
    MAX_DIGITS,
    SCALES,
    break_to_chunks,
    currency_to_word,
    sanitize_amount,
    to_dollar,
    to_hundred,
    to_tens,
    to_xlion,
    transcribe,
)


# ═══════════════════════════════════════════════════════════════════════
# INPUT SANITATION
# ═══════════════════════════════════════════════════════════════════════


class TestSanitizeAmount:
    def test_strips_symbol_and_commas(self):
        amount = sanitize_amount("$1,234")
        assert amount.symbol == "$"
        assert amount.digits == "1234"

    def test_strips_whitespace_everywhere(self):
        amount = sanitize_amount(" 1 234\t567\n")
        assert amount.symbol == ""
        assert amount.digits == "1234567"

    def test_only_first_character_is_a_symbol(self):
        assert sanitize_amount("$$5").digits == "$5"

    def test_symbol_after_separators(self):
        amount = sanitize_amount("  €12")
        assert amount.symbol == "€"
        assert amount.digits == "12"

    def test_empty_input(self):
        amount = sanitize_amount("")
        assert amount.symbol == ""
        assert amount.digits == ""


# ═══════════════════════════════════════════════════════════════════════
# ZERO HANDLING
# ═══════════════════════════════════════════════════════════════════════


class TestZero:
    @pytest.mark.parametrize("raw", ["0", "", "$0", "000", "$", "   ", "0,000", "abc"])
    def test_reads_as_zero(self, raw):
        assert currency_to_word(raw) == "zero"

    def test_zero_transcription_has_no_chunks(self):
        result = transcribe("$0")
        assert result.words == "zero"
        assert result.symbol == "$"
        assert result.chunks == []


# ═══════════════════════════════════════════════════════════════════════
# CHUNKER
# ═══════════════════════════════════════════════════════════════════════


class TestBreakToChunks:
    def test_million(self):
        assert break_to_chunks("1234567") == ["1", "234", "567"]

    def test_exact_multiple_of_three(self):
        assert break_to_chunks("123456") == ["123", "456"]

    def test_two_digit_head(self):
        assert break_to_chunks("12345") == ["12", "345"]

    def test_short_input_is_single_chunk(self):
        assert break_to_chunks("12") == ["12"]
        assert break_to_chunks("123") == ["123"]

    def test_chunk_lengths_add_up(self):
        for length in range(1, 80):
            digits = "7" * length
            chunks = break_to_chunks(digits)
            assert sum(len(c) for c in chunks) == length
            assert all(len(c) == 3 for c in chunks[1:])
            assert "".join(chunks) == digits


# ═══════════════════════════════════════════════════════════════════════
# LOW-ORDER TRANSCRIPTION
# ═══════════════════════════════════════════════════════════════════════


class TestDollarAndTens:
    def test_dollar_lookup(self):
        assert to_dollar("7") == "seven"
        assert to_dollar("19") == "nineteen"

    def test_dollar_missing_key_is_none(self):
        assert to_dollar("20") is None
        assert to_dollar("07") is None

    def test_teens_come_from_unit_table(self):
        assert to_tens("15") == "fifteen"

    def test_tens_with_ones(self):
        assert to_tens("42") == "forty two"

    def test_round_tens_drop_the_unit(self):
        assert to_tens("40").strip() == "forty"

    def test_padded_single_digit(self):
        assert to_tens("07").strip() == "seven"


# ═══════════════════════════════════════════════════════════════════════
# HUNDREDS
# ═══════════════════════════════════════════════════════════════════════


class TestToHundred:
    def test_all_zero_chunk_is_empty(self):
        assert to_hundred("000") == ""
        assert to_hundred("00") == ""

    def test_padded_chunk(self):
        assert to_hundred("099") == "ninety nine"
        assert to_hundred("005") == "five"

    def test_full_hundred(self):
        assert to_hundred("999") == "nine hundred ninety nine"

    def test_round_hundred(self):
        assert to_hundred("100").split() == ["one", "hundred"]

    def test_hundred_and_single_digit(self):
        assert to_hundred("105").split() == ["one", "hundred", "five"]

    def test_hundred_and_teen(self):
        assert to_hundred("110").split() == ["one", "hundred", "ten"]


# ═══════════════════════════════════════════════════════════════════════
# LARGE NUMBERS
# ═══════════════════════════════════════════════════════════════════════


class TestToXlion:
    def test_million(self):
        words, scale_words = to_xlion("1234567")
        assert words.split() == (
            "one million two hundred thirty four thousand five hundred sixty seven".split()
        )
        assert scale_words == ["million", "thousand"]

    def test_leading_chunk_above_nineteen(self):
        """A two-digit leading chunk must not be limited to the unit table."""
        assert currency_to_word("99000") == "ninety nine thousand"
        assert currency_to_word("20000") == "twenty thousand"

    def test_zero_chunks_vanish(self):
        assert currency_to_word("1000000") == "one million"
        assert currency_to_word("1000001") == "one million one"
        assert currency_to_word("1010") == "one thousand ten"

    def test_scale_word_count_without_zero_chunks(self):
        for digits in ["1234", "1001001", "123456789012", "9" * 30]:
            result = transcribe(digits)
            assert len(result.scale_words) == len(result.chunks) - 1

    def test_billions(self):
        assert currency_to_word("123456789012") == (
            "one hundred twenty three billion four hundred fifty six million "
            "seven hundred eighty nine thousand twelve"
        )

    def test_centillion_is_the_limit(self):
        digits = "1" + "0" * (MAX_DIGITS - 1)
        assert currency_to_word(digits) == f"one {SCALES[-1]}"

    def test_beyond_centillion_raises(self):
        digits = "1" + "0" * MAX_DIGITS
        with pytest.raises(UnsupportedMagnitudeError) as exc_info:
            currency_to_word(digits)
        assert exc_info.value.code == "UNSUPPORTED_MAGNITUDE"
        assert exc_info.value.details == {"digits": MAX_DIGITS + 1, "max_digits": MAX_DIGITS}

    def test_heavy_zero_padding_never_raises(self):
        assert currency_to_word("0" * 100 + "5") == "five"
        assert currency_to_word("0001234") == "one thousand two hundred thirty four"


# ═══════════════════════════════════════════════════════════════════════
# TOP-LEVEL CONVERSION
# ═══════════════════════════════════════════════════════════════════════


class TestCurrencyToWord:
    def test_single_digit(self):
        assert currency_to_word("5") == "five"

    def test_teen(self):
        assert currency_to_word("15") == "fifteen"

    def test_two_digits(self):
        assert currency_to_word("42") == "forty two"

    def test_round_tens_are_trimmed(self):
        assert currency_to_word("90") == "ninety"

    def test_one_hundred(self):
        assert currency_to_word("100") == "one hundred"

    def test_padded_hundreds(self):
        assert currency_to_word("099") == "ninety nine"

    def test_symbol_and_separators_are_ignored(self):
        assert currency_to_word("$1,234") == currency_to_word("1234")
        assert currency_to_word("$1,234") == "one thousand two hundred thirty four"

    def test_spaced_digits(self):
        assert currency_to_word("€ 12 345") == "twelve thousand three hundred forty five"

    def test_result_has_no_stray_whitespace(self):
        for raw in ["10", "100", "1000", "1020304050", "$ 7,000,000"]:
            words = currency_to_word(raw)
            assert words == words.strip()
            assert "  " not in words
            assert "\n" not in words

    @pytest.mark.parametrize("raw", ["12.50", "1.5", "0.5", "$0.99", "0.00"])
    def test_decimal_point_is_malformed(self, raw):
        """Fractions below one must not read as "zero"."""
        with pytest.raises(MalformedAmountError) as exc_info:
            currency_to_word(raw)
        assert exc_info.value.code == "MALFORMED_AMOUNT"

    def test_letter_inside_digits_is_malformed(self):
        with pytest.raises(MalformedAmountError):
            currency_to_word("$1,2a3")

    def test_transcription_record(self):
        result = transcribe("$1,234,567")
        assert result.symbol == "$"
        assert result.digits == "1234567"
        assert result.chunks == ["1", "234", "567"]
        assert result.words.startswith("one million")
