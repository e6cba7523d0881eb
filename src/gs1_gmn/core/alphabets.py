"""
GMN Alphabet Tables
===================

Fixed character sets and weights used by the healthcare GMN check character
pair algorithm (GS1 General Specifications, AI 8013).

All tables are built once at import time and are read-only afterwards.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional, Tuple


# =============================================================================
# GMN CONSTANTS
# =============================================================================

class GMNConstants:
    """Immutable healthcare GMN constants per the GS1 General Specifications."""

    # GS1 AI encodable character set 82. Index is the character value.
    CSET82: str = (
        "!\"%&'()*+,-./0123456789:;<=>?ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        "_abcdefghijklmnopqrstuvwxyz"
    )

    # Check character subset (no 0, 1, I, O)
    CSET32: str = "23456789ABCDEFGHJKLMNPQRSTUVWXYZ"

    DIGITS: FrozenSet[str] = frozenset("0123456789")

    # Descending primes, right-aligned against the data characters
    WEIGHTS: Tuple[int, ...] = (
        83, 79, 73, 71, 67, 61, 59, 53, 47, 43, 41, 37,
        31, 29, 23, 19, 17, 13, 11, 7, 5, 3, 2,
    )

    MODULUS: int = 1021

    PREFIX_LENGTH: int = 5
    CHECK_PAIR_LENGTH: int = 2

    PARTIAL_MIN_LENGTH: int = 6
    PARTIAL_MAX_LENGTH: int = 23
    COMPLETE_MIN_LENGTH: int = PARTIAL_MIN_LENGTH + CHECK_PAIR_LENGTH
    COMPLETE_MAX_LENGTH: int = PARTIAL_MAX_LENGTH + CHECK_PAIR_LENGTH


CSET82 = GMNConstants.CSET82
CSET32 = GMNConstants.CSET32
WEIGHTS = GMNConstants.WEIGHTS

_CSET82_VALUES: Mapping[str, int] = MappingProxyType(
    {char: value for value, char in enumerate(CSET82)}
)
_CSET32_VALUES: Mapping[str, int] = MappingProxyType(
    {char: value for value, char in enumerate(CSET32)}
)


# =============================================================================
# LOOKUPS
# =============================================================================

def value_in_cset82(char: str) -> Optional[int]:
    """Return the CSET 82 value (0-81) of a character, or None if not encodable."""
    return _CSET82_VALUES.get(char)


def value_in_cset32(char: str) -> Optional[int]:
    """Return the CSET 32 value (0-31) of a character, or None if not a check character."""
    return _CSET32_VALUES.get(char)


def char_at_cset82(value: int) -> str:
    return CSET82[value]


def char_at_cset32(value: int) -> str:
    return CSET32[value]


def weight(index: int) -> int:
    """Return the prime weight at table position 0-22."""
    return WEIGHTS[index]


def is_digit(char: str) -> bool:
    """ASCII decimal digit test (str.isdigit also accepts e.g. superscripts)."""
    return char in GMNConstants.DIGITS
