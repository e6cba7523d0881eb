"""
Batch GMN Processing
====================

Completes or verifies GMNs supplied one per line, as read from a file.
A malformed line is recorded with its error message and never stops the run.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .core import GMNFormatError, add_check_characters, verify_check_characters

logger = logging.getLogger(__name__)

VALID_OUTCOME = "*** Valid ***"
NOT_VALID_OUTCOME = "*** Not valid ***"


class BatchMode(str, Enum):
    """What to do with each input line."""
    COMPLETE = 'complete'
    VERIFY = 'verify'


@dataclass
class BatchRecord:
    """Outcome for a single input line."""
    line_number: int
    input: str
    output: str
    ok: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'line_number': self.line_number,
            'input': self.input,
            'output': self.output,
            'ok': self.ok,
            'error': self.error,
        }


@dataclass
class BatchSummary:
    """Totals over a batch run."""
    total: int = 0
    succeeded: int = 0
    failed_checks: int = 0
    format_errors: int = 0

    @property
    def all_ok(self) -> bool:
        return self.succeeded == self.total

    @classmethod
    def from_records(cls, records: List[BatchRecord]) -> 'BatchSummary':
        summary = cls(total=len(records))
        for record in records:
            if record.ok:
                summary.succeeded += 1
            elif record.error:
                summary.format_errors += 1
            else:
                summary.failed_checks += 1
        return summary

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total': self.total,
            'succeeded': self.succeeded,
            'failed_checks': self.failed_checks,
            'format_errors': self.format_errors,
        }


def process_line(line_number: int, data: str, mode: BatchMode) -> BatchRecord:
    """Complete or verify one GMN, capturing format errors in the record."""
    try:
        if mode == BatchMode.COMPLETE:
            return BatchRecord(line_number, data, add_check_characters(data), ok=True)
        valid = verify_check_characters(data)
        return BatchRecord(
            line_number, data, VALID_OUTCOME if valid else NOT_VALID_OUTCOME, ok=valid
        )
    except GMNFormatError as e:
        logger.warning(f"Line {line_number}: {e}")
        return BatchRecord(line_number, data, str(e), ok=False, error=e.kind.value)


def process_lines(
    lines: Iterable[str],
    mode: Union[str, BatchMode],
    skip_blank_lines: bool = True,
) -> List[BatchRecord]:
    """
    Process GMNs one per line.

    Only line terminators are stripped; any other whitespace is part of the
    input and will be reported as an invalid character.

    Args:
        lines: Input lines (with or without trailing newlines)
        mode: 'complete' or 'verify'
        skip_blank_lines: Ignore empty lines instead of reporting them

    Returns:
        One BatchRecord per processed line
    """
    mode = BatchMode(mode)
    records = []
    for line_number, line in enumerate(lines, start=1):
        data = line.rstrip('\r\n')
        if skip_blank_lines and not data:
            continue
        records.append(process_line(line_number, data, mode))

    summary = BatchSummary.from_records(records)
    logger.info(
        f"Processed {summary.total} lines ({mode.value}): "
        f"{summary.succeeded} ok, {summary.failed_checks} bad checks, "
        f"{summary.format_errors} format errors"
    )
    return records


def process_file(
    path: Union[str, Path],
    mode: Union[str, BatchMode],
    encoding: str = 'utf-8',
    skip_blank_lines: bool = True,
) -> List[BatchRecord]:
    """
    Process a file of GMNs, one per line.

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.debug(f"Reading {path} ({encoding})")
    with open(path, encoding=encoding, newline='') as f:
        return process_lines(f, mode, skip_blank_lines=skip_blank_lines)
