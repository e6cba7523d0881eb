#!/usr/bin/env python3
"""
GMN Check CLI - Command Line Interface
======================================

Main CLI entry point for healthcare GMN check character operations.

Usage:
    gmn-check verify <gmn>                      Verify the check character pair
    gmn-check complete <partial>                Append the check character pair
    gmn-check check <partial>                   Print only the check character pair
    gmn-check diagnose <gmn> [--partial]        Per-character format report
    gmn-check batch <file> --mode verify        Process a file, one GMN per line
    gmn-check interactive                       Menu driven session
    gmn-check demo                              Worked examples
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml

from . import __version__
from .batch import (
    BatchMode,
    BatchSummary,
    NOT_VALID_OUTCOME,
    VALID_OUTCOME,
    process_file,
)
from .config import get_config, reset_config, setup_logging
from .core import (
    GMNFormatError,
    add_check_characters,
    check_characters,
    validate_gmn,
    verify_check_characters,
)

logger = logging.getLogger(__name__)

# General Specifications example
EXAMPLE_PARTIAL = "1987654Ad4X4bL5ttr2310c"
EXAMPLE_GMN = "1987654Ad4X4bL5ttr2310c2K"


def cmd_verify(args):
    """Verify the check characters of a complete GMN."""
    try:
        valid = verify_check_characters(args.gmn)
    except GMNFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"The check characters are {'valid' if valid else 'NOT valid'}")
    return 0 if valid else 1


def cmd_complete(args):
    """Complete a partial GMN."""
    try:
        print(add_check_characters(args.part))
    except GMNFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_check(args):
    """Print the check character pair of a partial GMN."""
    try:
        print(check_characters(args.part))
    except GMNFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_diagnose(args):
    """Report every invalid character and the checksum outcome."""
    result = validate_gmn(args.gmn, complete=not args.partial)

    if args.json:
        print(json.dumps(result.to_dict(), indent=get_config().batch.json_indent))
        return 0 if result.is_fully_valid else 1

    status = "VALID" if result.is_fully_valid else "INVALID"
    print(f"GMN: {result.gmn} - {status}")
    print(f"  Length: {'OK' if result.is_valid_length else 'INVALID'}")
    if result.bad_positions:
        positions = ', '.join(str(p + 1) for p in result.bad_positions)
        print(f"  Characters: INVALID (positions {positions})")
        marker = ''.join(' ' if good else '^' for good in result.good_positions)
        print(f"       {result.gmn}")
        print(f"       {marker}")
    else:
        print("  Characters: OK")
    if result.error:
        print(f"  Error: {result.error}")
    if result.expected_check_characters:
        print(f"  Expected check characters: {result.expected_check_characters}")
    if result.checksum_valid is not None:
        print(f"  Checksum: {'OK' if result.checksum_valid else 'INVALID'}")

    return 0 if result.is_fully_valid else 1


def cmd_batch(args):
    """Complete or verify every line of a file."""
    config = get_config()
    encoding = args.encoding or config.batch.encoding

    try:
        records = process_file(
            args.file,
            args.mode,
            encoding=encoding,
            skip_blank_lines=config.batch.skip_blank_lines,
        )
    except (OSError, UnicodeDecodeError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for record in records:
        print(f"{record.input} : {record.output}")

    summary = BatchSummary.from_records(records)

    if args.output:
        try:
            with open(args.output, 'w') as f:
                json.dump(
                    {
                        'mode': args.mode,
                        'summary': summary.to_dict(),
                        'records': [r.to_dict() for r in records],
                    },
                    f,
                    indent=config.batch.json_indent,
                )
        except OSError as e:
            print(f"Error: could not write results: {e}", file=sys.stderr)
            return 2
        print(f"Results saved to: {args.output}")

    return 0 if summary.all_ok else 1


def _print_file_results(filename: str, mode: BatchMode):
    config = get_config()
    try:
        records = process_file(
            filename,
            mode,
            encoding=config.batch.encoding,
            skip_blank_lines=config.batch.skip_blank_lines,
        )
    except (OSError, UnicodeDecodeError, LookupError) as e:
        print(e)
        return
    for record in records:
        print(f"{record.input} : {record.output}")


def cmd_interactive(args):
    """Menu driven session. Ends on 'q' or end of input."""
    menu = (
        "\nPlease select an option:\n\n"
        "  c  - Complete a partial GMN by adding check characters\n"
        "  v  - Verify the check characters of a complete GMN\n"
        "  cf - Complete partial GMNs supplied on each line of a file\n"
        "  vf - Verify complete GMNs supplied on each line of a file\n"
        "  q  - Quit\n"
    )

    try:
        while True:
            print(menu)
            opt = input("Enter option (c/v/cf/vf/q)? ").strip()

            if opt == 'q':
                break

            if opt == 'v':
                gmn = input("\nPlease supply a GMN to verify: ")
                try:
                    valid = verify_check_characters(gmn)
                    print(f"Outcome: {VALID_OUTCOME if valid else NOT_VALID_OUTCOME}")
                except GMNFormatError as e:
                    print(f"Error with input: {e}")

            elif opt == 'c':
                part = input("\nPlease supply a partial GMN to complete: ")
                try:
                    print(f"Complete GMN: {add_check_characters(part)}")
                except GMNFormatError as e:
                    print(f"Error with input: {e}")

            elif opt in ('cf', 'vf'):
                filename = input("\nPlease supply a filename: ")
                mode = BatchMode.COMPLETE if opt == 'cf' else BatchMode.VERIFY
                _print_file_results(filename, mode)

            else:
                print(f"Unknown option: {opt}")
    except EOFError:
        print()

    return 0


def cmd_demo(args):
    """Non-interactive demonstration of the three operations."""
    print("\nOutput from non-interactive demonstration")
    print("*****************************************\n")

    valid = verify_check_characters(EXAMPLE_GMN)
    if valid:
        print(f"This healthcare GMN has correct check characters: {EXAMPLE_GMN}")
    else:
        print(f"This healthcare GMN has incorrect check characters: {EXAMPLE_GMN}")
    print()

    print(f"Partial:  {EXAMPLE_PARTIAL}")
    print(f"Full GMN: {add_check_characters(EXAMPLE_PARTIAL)}")
    print()

    checks = check_characters(EXAMPLE_PARTIAL)
    print(f"Partial:  {EXAMPLE_PARTIAL}")
    print(f"Checks:   {checks}")
    print(f"Full GMN: {EXAMPLE_PARTIAL + checks}")
    print()

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gmn-check',
        description='Check character pair generator and verifier for GS1 healthcare GMNs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gmn-check verify 1987654Ad4X4bL5ttr2310c2K
  gmn-check complete 1987654Ad4X4bL5ttr2310c
  gmn-check diagnose 19876£4Ad4X4bL5ttr2310c2K --json
  gmn-check batch gmns.txt --mode verify -o results.json
        """
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose (DEBUG) logging')
    parser.add_argument('--config', metavar='PATH', help='JSON or YAML configuration file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    verify_parser = subparsers.add_parser('verify', help='Verify the check characters of a GMN')
    verify_parser.add_argument('gmn', help='Complete GMN including check characters')

    complete_parser = subparsers.add_parser('complete', help='Append check characters')
    complete_parser.add_argument('part', help='Partial GMN without check characters')

    check_parser = subparsers.add_parser('check', help='Print only the check characters')
    check_parser.add_argument('part', help='Partial GMN without check characters')

    diagnose_parser = subparsers.add_parser('diagnose', help='Report every format problem')
    diagnose_parser.add_argument('gmn', help='GMN to inspect')
    diagnose_parser.add_argument('--partial', action='store_true',
                                 help='Input has no check characters')
    diagnose_parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    batch_parser = subparsers.add_parser('batch', help='Process a file, one GMN per line')
    batch_parser.add_argument('file', help='Input file')
    batch_parser.add_argument('--mode', '-m', required=True,
                              choices=[m.value for m in BatchMode],
                              help='Complete partial GMNs or verify complete ones')
    batch_parser.add_argument('--output', '-o', help='Output JSON file')
    batch_parser.add_argument('--encoding', help='Input file encoding')

    subparsers.add_parser('interactive', help='Menu driven session')
    subparsers.add_parser('demo', help='Non-interactive demonstration')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        reset_config()
    try:
        config = get_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    setup_logging(config.logging, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        'verify': cmd_verify,
        'complete': cmd_complete,
        'check': cmd_check,
        'diagnose': cmd_diagnose,
        'batch': cmd_batch,
        'interactive': cmd_interactive,
        'demo': cmd_demo,
    }

    logger.debug(f"Running command: {args.command}")
    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
