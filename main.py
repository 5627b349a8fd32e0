#!/usr/bin/env python3
"""
Main entry point for the dollcode encoder
Encodes and decodes text from the command line, single strings or whole files
"""

import sys
import os
import json
import logging
import argparse
from pathlib import Path
from dotenv import load_dotenv

from dollcode import decode, encode, load_charset_from_env, validate_charset
from dollcode.constants import ENV_LOG_LEVEL
from data.text_loader import TextLoader, escape_surrogates
from orchestration import BatchPipeline

logger = logging.getLogger(__name__)


def read_input(value, input_path):
    """
    Pick the text to work on: positional value, then --input file, then stdin.

    Args:
        value: Positional argument or None
        input_path: Path given with --input or None

    Returns:
        str: Input text
    """
    if value is not None:
        return value
    if input_path is not None:
        path = Path(input_path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        return path.read_bytes().decode('utf-8')
    return sys.stdin.read()


def run_encode(args, charset) -> int:
    text = read_input(args.text, args.input)
    print(encode(text, charset))
    return 0


def strip_line_ending(dollcode, charset):
    """
    Drop trailing line endings picked up from files or stdin.

    Left untouched when any symbol contains \\r or \\n, since the ending may then
    be part of the last group.
    """
    if any('\r' in symbol or '\n' in symbol for symbol in charset):
        return dollcode
    return dollcode.rstrip('\r\n')


def run_decode(args, charset) -> int:
    dollcode = strip_line_ending(read_input(args.dollcode, args.input), charset)
    result = decode(dollcode, charset)

    if args.json:
        print(escape_surrogates(json.dumps(result.to_dict(), ensure_ascii=False)))
    else:
        print(escape_surrogates(result.text))

    if result.has_errors:
        print(f"WARNING: {result.error_count} group(s) could not be decoded", file=sys.stderr)
        if args.strict:
            return 2

    return 0


def run_batch(args, charset) -> int:
    """
    Run the batch pipeline over a file.

    Args:
        args: Parsed arguments (input, output, mode, column, output_column)
        charset: Character set to use

    Returns:
        int: Exit status
    """
    if args.mode == 'encode':
        column = args.column or 'text'
        output_column = args.output_column or 'dollcode'
    else:
        column = args.column or 'dollcode'
        output_column = args.output_column or 'text'

    loader = TextLoader()
    df = loader.load(args.input, column=column)

    pipeline = BatchPipeline(charset)
    if args.mode == 'encode':
        df_result = pipeline.encode_frame(df, column=column, output_column=output_column)
    else:
        df_result = pipeline.decode_frame(df, column=column, output_column=output_column)

    output_path = loader.save(df_result, args.output)

    print(f"\n{'='*60}")
    print(f"BATCH {args.mode.upper()}: {Path(args.input).name} -> {output_path.name}")
    print(f"{'='*60}")
    for key, value in pipeline.get_stats().items():
        print(f"{key:30s}: {value}")

    return 0


def run_validate(args, charset) -> int:
    is_valid = validate_charset(charset)
    status = "VALID" if is_valid else "INVALID"
    print(f"{status}: {json.dumps(charset.to_dict(), ensure_ascii=True)}")
    return 0 if is_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dollcode: base-3 text encoding with configurable glyphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a string with the default glyphs
  python3 main.py encode "Hello"

  # Encode with custom glyphs
  python3 main.py --char1 1 --char2 2 --char3 3 --separator "|" encode A

  # Decode and report errors as JSON
  python3 main.py --char1 1 --char2 2 --char3 3 --separator "|" decode "garbage|1332|" --json

  # Decode a file, failing if any group is invalid
  python3 main.py decode --input message.txt --strict

  # Encode every line of a text file into a CSV
  python3 main.py batch --mode encode --input lines.txt --output encoded.csv

Glyphs can also be set with DOLLCODE_CHAR1, DOLLCODE_CHAR2, DOLLCODE_CHAR3 and
DOLLCODE_SEPARATOR in the environment or a .env file (\\uXXXX escapes allowed).
        """
    )

    parser.add_argument('--char1', type=str, default=None, help='Glyph for digit 1 (default: U+2596)')
    parser.add_argument('--char2', type=str, default=None, help='Glyph for digit 2 (default: U+2598)')
    parser.add_argument('--char3', type=str, default=None, help='Glyph for digit 3 (default: U+258C)')
    parser.add_argument('--separator', type=str, default=None, help='Group separator (default: U+200D)')
    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help=f'Logging level (default: ${ENV_LOG_LEVEL} or WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode', help='Encode text')
    encode_parser.add_argument('text', nargs='?', default=None, help='Text to encode (default: stdin)')
    encode_parser.add_argument('--input', type=str, default=None, help='Read text from a file')
    encode_parser.set_defaults(handler=run_encode)

    decode_parser = subparsers.add_parser('decode', help='Decode dollcode')
    decode_parser.add_argument('dollcode', nargs='?', default=None, help='Dollcode to decode (default: stdin)')
    decode_parser.add_argument('--input', type=str, default=None, help='Read dollcode from a file')
    decode_parser.add_argument('--json', action='store_true', help='Print the full result as JSON')
    decode_parser.add_argument('--strict', action='store_true', help='Exit with status 2 if any group is invalid')
    decode_parser.set_defaults(handler=run_decode)

    validate_parser = subparsers.add_parser('validate', help='Check the configured character set')
    validate_parser.set_defaults(handler=run_validate)

    batch_parser = subparsers.add_parser('batch', help='Encode or decode a column of a .txt/.csv/.parquet file')
    batch_parser.add_argument('--input', type=str, required=True, help='Input file')
    batch_parser.add_argument('--output', type=str, required=True, help='Output file (.csv or .parquet)')
    batch_parser.add_argument('--mode', type=str, choices=['encode', 'decode'], default='encode', help='Direction (default: encode)')
    batch_parser.add_argument('--column', type=str, default=None, help='Input column (default: text / dollcode)')
    batch_parser.add_argument('--output-column', type=str, default=None, help='Output column (default: dollcode / text)')
    batch_parser.set_defaults(handler=run_batch)

    return parser


def main(argv=None) -> int:
    """Main entry point with CLI argument parsing"""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = args.log_level or os.getenv(ENV_LOG_LEVEL, 'WARNING')
    logging.basicConfig(
        level=log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    overrides = {
        'char1': args.char1,
        'char2': args.char2,
        'char3': args.char3,
        'separator': args.separator
    }

    try:
        # validate reports an invalid set itself instead of refusing it
        charset = load_charset_from_env(overrides=overrides, validate=args.command != 'validate')
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.debug(f"Using character set {charset.to_dict()}")

    try:
        return args.handler(args, charset)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
