"""
GMN Core Module
===============

Alphabet tables, format validation and the check character pair algorithm.
"""

from .alphabets import (
    # Constants
    GMNConstants,
    CSET82,
    CSET32,
    WEIGHTS,
    # Lookups
    value_in_cset82,
    value_in_cset32,
    char_at_cset82,
    char_at_cset32,
    weight,
)
from .validation import (
    # Errors
    FormatErrorKind,
    GMNFormatError,
    TooShortError,
    TooLongError,
    InvalidPrefixError,
    InvalidCharacterError,
    InvalidCheckCharacterError,
    # Validation
    GMNValidationResult,
    good_character_positions,
    validate_format,
    validate_gmn,
)
from .checksum import (
    compute_check_pair,
    check_characters,
    add_check_characters,
    verify_check_characters,
)

__all__ = [
    # Constants
    "GMNConstants",
    "CSET82",
    "CSET32",
    "WEIGHTS",
    # Lookups
    "value_in_cset82",
    "value_in_cset32",
    "char_at_cset82",
    "char_at_cset32",
    "weight",
    # Errors
    "FormatErrorKind",
    "GMNFormatError",
    "TooShortError",
    "TooLongError",
    "InvalidPrefixError",
    "InvalidCharacterError",
    "InvalidCheckCharacterError",
    # Validation
    "GMNValidationResult",
    "good_character_positions",
    "validate_format",
    "validate_gmn",
    # Checksum
    "compute_check_pair",
    "check_characters",
    "add_check_characters",
    "verify_check_characters",
]
