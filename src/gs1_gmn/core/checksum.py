"""
GMN Check Character Pair
========================

Calculation and verification of the two check characters that complete a
healthcare GMN (EU MDR 2017/745, EU IVDR 2017/746).

Algorithm:
    1. Right-align the data characters against the 23 prime weights
    2. Sum CSET 82 value * weight, modulo 1021
    3. Split the 10-bit result into two 5-bit CSET 32 characters

Example (GS1 General Specifications):
    >>> check_characters("1987654Ad4X4bL5ttr2310c")
    '2K'
    >>> verify_check_characters("1987654Ad4X4bL5ttr2310c2K")
    True
"""

import logging
from typing import Tuple

from .alphabets import GMNConstants, char_at_cset32, value_in_cset82, weight
from .validation import validate_format

logger = logging.getLogger(__name__)


def compute_check_pair(part: str) -> Tuple[str, str]:
    """
    Calculate the check character pair for an already validated partial GMN.

    Args:
        part: Partial GMN that passed validate_format(part, complete=False)

    Returns:
        (high, low) check characters from CSET 32
    """
    # Characters are compared with the rightmost weights
    offset = GMNConstants.PARTIAL_MAX_LENGTH - len(part)

    total = 0
    for i, char in enumerate(part):
        total += value_in_cset82(char) * weight(offset + i)

    checksum = total % GMNConstants.MODULUS
    high, low = divmod(checksum, len(GMNConstants.CSET32))

    logger.debug(f"'{part}': weighted sum={total}, checksum={checksum}")
    return char_at_cset32(high), char_at_cset32(low)


def check_characters(part: str) -> str:
    """
    Calculate the check character pair for a partial GMN.

    Args:
        part: Partial GMN (6-23 characters)

    Returns:
        Two check characters

    Raises:
        GMNFormatError: If the partial GMN is malformed
    """
    validate_format(part, complete=False)
    return ''.join(compute_check_pair(part))


def add_check_characters(part: str) -> str:
    """Complete a partial GMN by appending its check character pair."""
    return part + check_characters(part)


def verify_check_characters(gmn: str) -> bool:
    """
    Verify the check character pair of a complete GMN.

    A well formed GMN with the wrong check characters returns False; a
    malformed one raises.

    Args:
        gmn: Complete GMN (8-25 characters)

    Returns:
        True if the supplied check characters match the recalculated ones

    Raises:
        GMNFormatError: If the GMN is malformed
    """
    validate_format(gmn, complete=True)

    part = gmn[:-GMNConstants.CHECK_PAIR_LENGTH]
    supplied = gmn[-GMNConstants.CHECK_PAIR_LENGTH:]

    return check_characters(part) == supplied
