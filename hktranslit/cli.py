#!/usr/bin/env python3
"""
hktranslit CLI

Command-line interface for Harvard-Kyoto to Unicode conversion.

Usage:
    hktranslit <text> [options]
    hktranslit "agnimILe purohitaM"
    hktranslit -s "a/sti nRpo"                 # strict: any defect is an error
    hktranslit --scheme vedic "agni/H pU/rvebhirR/SibhirI/Dyo"
    hktranslit -f rigveda.txt -o rigveda.md    # read a file, write a file
    hktranslit -f https://example.org/rv01.txt

Options:
    -f, --file           Treat TEXT as a file path or URL
    -s, --strict         Reject misplaced diacritics instead of converting
    -o, --output FILE    Output file (default: stdout)
    --scheme NAME        Target convention: iast (default) or vedic
    --schemes            Show all available schemes
"""

import argparse
import sys

from hktranslit.core import Transliterator
from hktranslit.schemes import DEFAULT_SCHEME, SCHEMES
from hktranslit.validator import NotASCII, ValidationError


NOT_ASCII_MESSAGE = "Text passed is not in ASCII."
NON_STANDARD_MESSAGE = "Text passed violates ASCII Harvard-Kyoto standards as applied here."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hktranslit",
        description=(
            "Harvard-Kyoto to Unicode Transliterator\n\n"
            "Validates ASCII Harvard-Kyoto Sanskrit text and converts it to\n"
            "Unicode with composed diacritics."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  hktranslit \"agnimILe purohitaM\"\n"
            "  hktranslit -s \"a/sti nRpo\"\n"
            "  hktranslit --scheme vedic \"agni/H pU/rvebhirR/SibhirI/Dyo\"\n"
            "  hktranslit -f rigveda.txt -o rigveda.md\n"
        ),
    )

    parser.add_argument(
        "text",
        nargs="?",
        help="Text to convert (with -f, the file path or URL to read)",
    )
    parser.add_argument(
        "-f", "--file",
        action="store_true",
        help="Treat TEXT as a file path or URL",
    )
    parser.add_argument(
        "-s", "--strict",
        action="store_true",
        help="Apply strict validation: misplaced diacritics are errors",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file for the conversion (default: stdout)",
    )
    parser.add_argument(
        "--scheme",
        choices=sorted(SCHEMES),
        default=DEFAULT_SCHEME,
        help=f"Target diacritic convention (default: {DEFAULT_SCHEME})",
    )
    parser.add_argument(
        "--schemes",
        action="store_true",
        help="Show all available schemes and exit",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.schemes:
        _show_schemes()
        return 0

    if args.text is None:
        print("Empty string", file=sys.stderr)
        return 1

    engine = Transliterator(scheme=args.scheme, strict=args.strict, output_path=args.output)

    try:
        if args.file:
            result = engine.convert_source(args.text)
        else:
            result = engine.convert(args.text)
    except ValidationError as e:
        print(f"{_describe(e)}\n{e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError, RuntimeError) as e:
        print(f"[ERROR] {args.text}: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            engine.save(result)
        except OSError as e:
            print(f"[ERROR] {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        print(result)

    return 0


def _describe(error: ValidationError) -> str:
    if isinstance(error, NotASCII):
        return NOT_ASCII_MESSAGE
    return NON_STANDARD_MESSAGE


def _show_schemes():
    """Display all available schemes."""
    schemes = Transliterator.supported_schemes()
    print("\nAvailable Schemes:")
    print("-" * 40)
    for name, description in schemes.items():
        marker = " (default)" if name == DEFAULT_SCHEME else ""
        print(f"  {name}{marker}: {description}")
    print()


if __name__ == "__main__":
    sys.exit(main())
