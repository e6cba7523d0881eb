"""
GMN Format Validation
=====================

Per-position character classification and length checks for partial and
complete healthcare GMNs.

Two entry points:
    - validate_format(): raises the first GMNFormatError found
    - validate_gmn(): never raises, returns a full diagnostic report
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .alphabets import GMNConstants, is_digit, value_in_cset32, value_in_cset82

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================

class FormatErrorKind(str, Enum):
    """Tag identifying which format rule an input broke."""
    TOO_SHORT = 'too_short'
    TOO_LONG = 'too_long'
    INVALID_PREFIX = 'invalid_prefix'
    INVALID_CHARACTER = 'invalid_character'
    INVALID_CHECK_CHARACTER = 'invalid_check_character'


class GMNFormatError(ValueError):
    """Base exception for malformed GMN input."""
    kind: FormatErrorKind


class TooShortError(GMNFormatError):
    """Raised when the input is below the minimum length."""
    kind = FormatErrorKind.TOO_SHORT

    def __init__(self, min_length: int):
        self.min_length = min_length
        super().__init__(
            f"The input is too short. It should be at least {min_length} characters long."
        )


class TooLongError(GMNFormatError):
    """Raised when the input exceeds the maximum length."""
    kind = FormatErrorKind.TOO_LONG

    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(
            f"The input is too long. It should be {max_length} characters maximum."
        )


class _PositionalError(GMNFormatError):
    """Error tied to a single character. Position is 0-based."""

    def __init__(self, position: int, char: str, message: str):
        self.position = position
        self.char = char
        super().__init__(message)


class InvalidPrefixError(_PositionalError):
    """Raised when one of the first five characters is not a digit."""
    kind = FormatErrorKind.INVALID_PREFIX

    def __init__(self, position: int, char: str):
        super().__init__(
            position, char,
            "GMN starts with the GS1 Company Prefix. "
            "At least the first five characters must be digits.",
        )


class InvalidCharacterError(_PositionalError):
    """Raised when a data character is outside CSET 82."""
    kind = FormatErrorKind.INVALID_CHARACTER

    def __init__(self, position: int, char: str):
        super().__init__(
            position, char, f"Invalid character at position {position + 1}: {char}"
        )


class InvalidCheckCharacterError(_PositionalError):
    """Raised when a check character of a complete GMN is outside CSET 32."""
    kind = FormatErrorKind.INVALID_CHECK_CHARACTER

    def __init__(self, position: int, char: str):
        super().__init__(
            position, char,
            f"Invalid check character at position {position + 1}: {char}",
        )


# =============================================================================
# CLASSIFICATION
# =============================================================================

def length_bounds(complete: bool) -> Tuple[int, int]:
    """Return (min, max) inclusive length for the given completeness mode."""
    if complete:
        return GMNConstants.COMPLETE_MIN_LENGTH, GMNConstants.COMPLETE_MAX_LENGTH
    return GMNConstants.PARTIAL_MIN_LENGTH, GMNConstants.PARTIAL_MAX_LENGTH


def _in_check_pair(position: int, length: int, complete: bool) -> bool:
    return complete and position >= length - GMNConstants.CHECK_PAIR_LENGTH


def good_character_positions(data: str, complete: bool) -> List[bool]:
    """
    Classify every character of the input for its position.

    Rules, in priority order:
        1. positions 0-4 (GS1 Company Prefix) must be digits
        2. the final two characters of a complete GMN must be in CSET 32
        3. everything else must be in CSET 82

    Never raises and does not check length, so callers can highlight every
    offending character instead of just the first one.

    Args:
        data: Partial or complete GMN
        complete: True if the input ends with a check character pair

    Returns:
        One boolean per input character, True where the character is valid
    """
    length = len(data)
    mask = []
    for i, char in enumerate(data):
        if i < GMNConstants.PREFIX_LENGTH:
            mask.append(is_digit(char))
        elif _in_check_pair(i, length, complete):
            mask.append(value_in_cset32(char) is not None)
        else:
            mask.append(value_in_cset82(char) is not None)
    return mask


def _error_for_position(data: str, position: int, complete: bool) -> GMNFormatError:
    char = data[position]
    if position < GMNConstants.PREFIX_LENGTH:
        return InvalidPrefixError(position, char)
    if _in_check_pair(position, len(data), complete):
        return InvalidCheckCharacterError(position, char)
    return InvalidCharacterError(position, char)


def validate_format(data: str, complete: bool) -> None:
    """
    Check length bounds and per-position character validity.

    Args:
        data: Partial or complete GMN
        complete: True if the input ends with a check character pair

    Raises:
        TooShortError, TooLongError: length outside the inclusive bounds
        InvalidPrefixError: non-digit in the first five characters
        InvalidCharacterError: data character outside CSET 82
        InvalidCheckCharacterError: check character outside CSET 32
    """
    min_length, max_length = length_bounds(complete)

    if len(data) < min_length:
        raise TooShortError(min_length)
    if len(data) > max_length:
        raise TooLongError(max_length)

    mask = good_character_positions(data, complete)
    for position, good in enumerate(mask):
        if not good:
            error = _error_for_position(data, position, complete)
            logger.debug(f"Rejected '{data}': {error.kind.value} at position {position + 1}")
            raise error


# =============================================================================
# DIAGNOSTIC REPORT
# =============================================================================

@dataclass
class GMNValidationResult:
    """Full diagnostic for a partial or complete GMN."""
    gmn: str
    complete: bool
    is_valid_length: bool
    good_positions: List[bool]
    bad_positions: List[int] = field(default_factory=list)
    error_kind: Optional[FormatErrorKind] = None
    error: Optional[str] = None
    expected_check_characters: Optional[str] = None
    checksum_valid: Optional[bool] = None

    @property
    def is_format_valid(self) -> bool:
        return self.error is None

    @property
    def is_fully_valid(self) -> bool:
        if not self.is_format_valid:
            return False
        # A partial GMN has no check pair to compare against
        return self.checksum_valid is not False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gmn': self.gmn,
            'complete': self.complete,
            'is_valid_length': self.is_valid_length,
            'good_positions': self.good_positions,
            'bad_positions': self.bad_positions,
            'error_kind': self.error_kind.value if self.error_kind else None,
            'error': self.error,
            'expected_check_characters': self.expected_check_characters,
            'checksum_valid': self.checksum_valid,
            'is_fully_valid': self.is_fully_valid,
        }


def validate_gmn(data: str, complete: bool = True) -> GMNValidationResult:
    """
    Comprehensive GMN validation.

    Checks:
    1. Length bounds for the completeness mode
    2. Character validity at every position
    3. Check character pair (complete GMNs that are well formed)

    Args:
        data: GMN string to validate
        complete: True if the input includes its check character pair

    Returns:
        GMNValidationResult with all validation details
    """
    from .checksum import compute_check_pair

    min_length, max_length = length_bounds(complete)
    mask = good_character_positions(data, complete)

    result = GMNValidationResult(
        gmn=data,
        complete=complete,
        is_valid_length=min_length <= len(data) <= max_length,
        good_positions=mask,
        bad_positions=[i for i, good in enumerate(mask) if not good],
    )

    try:
        validate_format(data, complete)
    except GMNFormatError as e:
        result.error_kind = e.kind
        result.error = str(e)
        return result

    part = data[:-GMNConstants.CHECK_PAIR_LENGTH] if complete else data
    expected = ''.join(compute_check_pair(part))
    result.expected_check_characters = expected
    if complete:
        result.checksum_valid = data[-GMNConstants.CHECK_PAIR_LENGTH:] == expected

    return result
