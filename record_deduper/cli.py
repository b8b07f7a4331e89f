"""
Command line interface

USAGE:
  # Whole-line duplicates
  record-deduper names.txt

  # Pipe separated, key on fields 2 and 3, nick names folded together
  record-deduper names.txt --separator '|' \
      --key field=2,ignore-case,ignore-whitespace,alias=nick_names.yaml \
      --key field=3,ignore-case

  # Fixed width columns
  record-deduper names.dat --key start=3,length=6,ignore-case --key start=10,length=8

Writes names_uniqs.txt and names_dupes.txt beside the input.
"""
import argparse
import re
import sys
from typing import Any, Dict, List, Optional

import yaml

from record_deduper.common.config import init_config
from record_deduper.common.exceptions import ConfigurationError, ReadError, WriteError
from record_deduper.common.logging import setup_logging
from record_deduper.orchestration.deduper import Deduper


def load_alias_file(path: str) -> Dict[str, str]:
    """
    Load an alias mapping (raw value -> canonical value) from YAML

    Raises:
        ConfigurationError: If the file is missing or not a flat mapping
    """
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Could not read alias file {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing alias file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Alias file must contain a mapping: {path}")

    # YAML turns bare numbers/booleans into non-strings; compare as text
    return {str(raw): str(canonical) for raw, canonical in data.items()}


def parse_key_option(text: str) -> Dict[str, Any]:
    """
    Parse a --key value such as 'field=2,ignore-case,alias=names.yaml'

    Returns:
        Keyword arguments for Deduper.add_key
    """
    options: Dict[str, Any] = {}
    for item in text.split(','):
        item = item.strip()
        if not item:
            continue
        name, _, value = item.partition('=')
        name = name.strip().replace('_', '-')
        value = value.strip()

        try:
            if name in ('field', 'field-number'):
                options['field_number'] = int(value)
            elif name in ('start', 'start-pos'):
                options['start_pos'] = int(value)
            elif name in ('length', 'key-length'):
                options['key_length'] = int(value)
            elif name == 'ignore-case':
                options['ignore_case'] = True
            elif name == 'ignore-whitespace':
                options['ignore_whitespace'] = True
            elif name == 'alias':
                options['alias'] = load_alias_file(value)
            else:
                raise argparse.ArgumentTypeError(f"Unknown key option: {name}")
        except ValueError:
            raise argparse.ArgumentTypeError(f"{name} needs an integer, got {value!r}")
        except ConfigurationError as e:
            raise argparse.ArgumentTypeError(str(e))

    return options


def unescape_separator(token: str) -> str:
    r"""Turn escapes such as \t into the characters they stand for"""
    return token.encode('latin-1', 'backslashreplace').decode('unicode_escape')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="record-deduper",
        description="Split a text file into unique and duplicate records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Key options (comma separated, --key may be repeated; order matters):
  field=N             1-based field number (needs --separator)
  start=N,length=N    fixed width key window (no separator)
  length=N            with field=N: compare only the first N characters
  ignore-case         compare case-insensitively
  ignore-whitespace   ignore leading/trailing whitespace
  alias=FILE.yaml     YAML mapping of values to treat as equal, e.g. Bob: Robert
        """
    )

    parser.add_argument("input", help="Input text file")

    separator = parser.add_mutually_exclusive_group()
    separator.add_argument(
        "-s", "--separator",
        help=r"Field separator token, escapes like \t allowed"
    )
    separator.add_argument(
        "--separator-regex",
        help=r"Field separator regular expression, e.g. '\s+'"
    )

    parser.add_argument(
        "-k", "--key",
        dest="keys",
        action="append",
        default=[],
        type=parse_key_option,
        help="Key definition (see below)"
    )
    parser.add_argument("--unique-out", help="Unique records output path")
    parser.add_argument("--duplicate-out", help="Duplicate records output path")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--log-level", help="Log level (default from config: INFO)")
    parser.add_argument("--log-format", choices=["text", "json"], help="Log format")
    parser.add_argument("--log-file", help="Also write logs to this file")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the deduper from the command line"""
    args = parse_args(argv)

    try:
        config = init_config(args.config)
        setup_logging(
            level=args.log_level or config.get('logging.level', 'INFO'),
            log_file=args.log_file,
            format_type=args.log_format or config.get('logging.format', 'text')
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    deduper = Deduper(config)
    try:
        if args.separator is not None:
            deduper.set_field_separator(unescape_separator(args.separator))
        elif args.separator_regex is not None:
            try:
                pattern = re.compile(args.separator_regex)
            except re.error as e:
                raise ConfigurationError(f"Invalid separator regex: {e}")
            deduper.set_field_separator(pattern)

        for key_options in args.keys:
            deduper.add_key(**key_options)

        result = deduper.dedupe_file(args.input, args.unique_out, args.duplicate_out)

    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except (ReadError, WriteError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stats = result.stats
    print(
        f"{stats.records_processed} records: "
        f"{stats.unique_count} unique -> {result.unique_path}, "
        f"{stats.duplicate_count} duplicate -> {result.duplicate_path}"
    )
    if stats.shortage_count:
        print(f"{stats.shortage_count} records were too short for every key")
    return 0


if __name__ == "__main__":
    sys.exit(main())
