"""
Test Suite for the GMN Check Character Pair
===========================================

Covers:
- Reference vectors from the GS1 General Specifications
- Length boundaries for partial and complete GMNs
- Alphabet coverage (regression guard against table edits)
- Checksum extremes
- Mismatch versus format error outcome classes

Run with: pytest tests/test_checksum.py -v
"""

import random

import pytest

from gs1_gmn import (
    CSET32,
    CSET82,
    GMNFormatError,
    InvalidCharacterError,
    InvalidCheckCharacterError,
    InvalidPrefixError,
    TooLongError,
    TooShortError,
    add_check_characters,
    check_characters,
    verify_check_characters,
)
from gs1_gmn.core.checksum import compute_check_pair


GEN_SPECS_PARTIAL = "1987654Ad4X4bL5ttr2310c"
GEN_SPECS_GMN = "1987654Ad4X4bL5ttr2310c2K"


# =============================================================================
# REFERENCE VECTORS
# =============================================================================

class TestGenSpecsExample:
    """Worked example from the GS1 General Specifications."""

    def test_check_characters(self):
        assert check_characters(GEN_SPECS_PARTIAL) == "2K"

    def test_add_check_characters(self):
        assert add_check_characters(GEN_SPECS_PARTIAL) == GEN_SPECS_GMN

    def test_verify_check_characters(self):
        assert verify_check_characters(GEN_SPECS_GMN) is True

    def test_compute_check_pair_returns_tuple(self):
        assert compute_check_pair(GEN_SPECS_PARTIAL) == ("2", "K")

    @pytest.mark.parametrize("gmn", [
        "1987654Ad4X4bL5ttr2310cXK",
        "1987654Ad4X4bL5ttr2310c2X",
        "1987654Ad4X4bL5ttr2310cK2",
    ])
    def test_wrong_check_characters_are_not_valid(self, gmn):
        """A mismatch is a False result, not an error."""
        assert verify_check_characters(gmn) is False


# =============================================================================
# LENGTH BOUNDARIES
# =============================================================================

class TestLengthBoundaries:
    """Inclusive length bounds in both modes."""

    def test_shortest_partial(self):
        assert check_characters("12345A") == "NJ"

    def test_longest_partial(self):
        assert check_characters("12345678901234567890123") == "NT"

    def test_shortest_complete(self):
        assert verify_check_characters("12345ANJ") is True

    def test_longest_complete(self):
        assert verify_check_characters("12345678901234567890123NT") is True

    def test_partial_too_short(self):
        with pytest.raises(TooShortError) as exc_info:
            check_characters("12345")
        assert exc_info.value.min_length == 6

    def test_partial_too_long(self):
        with pytest.raises(TooLongError) as exc_info:
            check_characters("123456789012345678901234")
        assert exc_info.value.max_length == 23

    def test_complete_too_short(self):
        with pytest.raises(TooShortError) as exc_info:
            verify_check_characters("12345XX")
        assert exc_info.value.min_length == 8

    def test_complete_too_long(self):
        with pytest.raises(TooLongError) as exc_info:
            verify_check_characters("123456789012345678901234XX")
        assert exc_info.value.max_length == 25

    def test_empty_input(self):
        with pytest.raises(TooShortError):
            check_characters("")
        with pytest.raises(TooShortError):
            verify_check_characters("")


# =============================================================================
# FORMAT ERRORS
# =============================================================================

class TestFormatErrors:
    """Malformed inputs raise rather than returning False."""

    def test_non_numeric_at_start(self):
        with pytest.raises(InvalidPrefixError) as exc_info:
            verify_check_characters("X987654Ad4X4bL5ttr2310c2K")
        assert exc_info.value.position == 0

    def test_non_numeric_at_end_of_prefix(self):
        with pytest.raises(InvalidPrefixError) as exc_info:
            verify_check_characters("1987X54Ad4X4bL5ttr2310c2K")
        assert exc_info.value.position == 4

    def test_invalid_character_near_start(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            verify_check_characters("19876£4Ad4X4bL5ttr2310c2K")
        assert exc_info.value.position == 5
        assert exc_info.value.char == "£"
        assert "position 6: £" in str(exc_info.value)

    def test_invalid_check_character_at_end(self):
        with pytest.raises(InvalidCheckCharacterError) as exc_info:
            verify_check_characters("1987654Ad4X4bL5ttr2310c2£")
        assert exc_info.value.position == 24

    def test_cset82_character_in_check_pair_is_rejected(self):
        """'1' is encodable but never a check character."""
        with pytest.raises(InvalidCheckCharacterError):
            verify_check_characters("1987654Ad4X4bL5ttr2310c1K")

    def test_check_pair_is_case_sensitive(self):
        with pytest.raises(InvalidCheckCharacterError):
            verify_check_characters("1987654Ad4X4bL5ttr2310c2k")

    def test_whitespace_is_not_trimmed(self):
        with pytest.raises(InvalidCharacterError):
            check_characters("12345A ")
        with pytest.raises(InvalidPrefixError):
            check_characters(" 12345A")

    def test_non_ascii_digit_in_prefix(self):
        with pytest.raises(InvalidPrefixError):
            check_characters("1234²A")

    def test_add_check_characters_propagates_errors(self):
        with pytest.raises(GMNFormatError):
            add_check_characters("ABC7654Ad4X4bL5ttr2310c")

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            check_characters("12345£££d4X4bL5ttr2310c")


# =============================================================================
# ALPHABET COVERAGE
# =============================================================================

class TestAlphabetCoverage:
    """Every table character verifies when embedded in a valid GMN."""

    @pytest.mark.parametrize("gmn", [
        "12345_ABCDEFGHIJKLMCP",
        "12345_NOPQRSTUVWXYZDN",
        "12345_abcdefghijklmN3",
        "12345_nopqrstuvwxyzP2",
        "12345_!\"%&'()*+,-./LC",
        "12345_0123456789:;<=>?62",
    ])
    def test_all_cset82(self, gmn):
        assert verify_check_characters(gmn) is True

    @pytest.mark.parametrize("gmn", [
        "7907665Bm8v2AB",
        "97850l6KZm0yCD",
        "225803106GSpEF",
        "149512464PM+GH",
        "62577B8fRG7HJK",
        "515942070CYxLM",
        "390800494sP6NP",
        "386830132uO+QR",
        "53395376X1:nST",
        "957813138Sb6UV",
        "530790no0qOgWX",
        "62185314IvwmYZ",
        "23956qk1&dB!23",
        "794394895ic045",
        "57453Uq3qA<H67",
        "0881063PhHvY89",
    ])
    def test_all_cset32(self, gmn):
        assert verify_check_characters(gmn) is True

    def test_each_cset82_character_round_trips(self):
        for char in CSET82:
            part = "12345" + char
            assert verify_check_characters(add_check_characters(part)) is True

    def test_check_pair_drawn_from_cset32(self):
        for char in CSET82:
            high, low = compute_check_pair("00000" + char + "A")
            assert high in CSET32
            assert low in CSET32


# =============================================================================
# CHECKSUM EXTREMES & PROPERTIES
# =============================================================================

class TestChecksumProperties:
    """Extremes, determinism and round trip."""

    def test_minimum_intermediate_sum(self):
        assert verify_check_characters("00000!HV") is True

    def test_maximum_intermediate_sum(self):
        assert verify_check_characters("99999zzzzzzzzzzzzzzzzzzT2") is True

    def test_deterministic(self):
        results = {check_characters(GEN_SPECS_PARTIAL) for _ in range(10)}
        assert results == {"2K"}

    def test_round_trip_random_partials(self):
        rng = random.Random(8013)
        for _ in range(500):
            length = rng.randint(6, 23)
            prefix = ''.join(rng.choice("0123456789") for _ in range(5))
            body = ''.join(rng.choice(CSET82) for _ in range(length - 5))
            gmn = add_check_characters(prefix + body)
            assert len(gmn) == length + 2
            assert verify_check_characters(gmn) is True

    def test_single_character_change_detected(self):
        """Changing any data character changes the check pair."""
        for i in range(5, len(GEN_SPECS_PARTIAL)):
            original = GEN_SPECS_PARTIAL[i]
            replacement = "A" if original != "A" else "B"
            altered = GEN_SPECS_PARTIAL[:i] + replacement + GEN_SPECS_PARTIAL[i + 1:]
            assert verify_check_characters(altered + "2K") is False
