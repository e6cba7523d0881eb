"""
GS1 Healthcare GMN
==================

Check character pair generator and verifier for GS1 Global Model Numbers
used on regulated healthcare devices (EU MDR 2017/745, EU IVDR 2017/746).

Package Structure:
    gs1_gmn/
    ├── core/       # Alphabets, format validation, checksum
    ├── batch.py    # Line-by-line file processing
    ├── config.py   # Settings and logging setup
    └── cli.py      # gmn-check command line tool

Quick Start:
    from gs1_gmn import add_check_characters, verify_check_characters

    gmn = add_check_characters("1987654Ad4X4bL5ttr2310c")   # '...2K'
    verify_check_characters(gmn)                             # True

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core import (
    GMNConstants,
    CSET82,
    CSET32,
    FormatErrorKind,
    GMNFormatError,
    TooShortError,
    TooLongError,
    InvalidPrefixError,
    InvalidCharacterError,
    InvalidCheckCharacterError,
    GMNValidationResult,
    good_character_positions,
    validate_format,
    validate_gmn,
    check_characters,
    add_check_characters,
    verify_check_characters,
)

__all__ = [
    "__version__",
    "GMNConstants",
    "CSET82",
    "CSET32",
    "FormatErrorKind",
    "GMNFormatError",
    "TooShortError",
    "TooLongError",
    "InvalidPrefixError",
    "InvalidCharacterError",
    "InvalidCheckCharacterError",
    "GMNValidationResult",
    "good_character_positions",
    "validate_format",
    "validate_gmn",
    "check_characters",
    "add_check_characters",
    "verify_check_characters",
]
