"""
Command-line script to validate, decode, format and generate MyKad numbers
"""

import os
import sys
import json
import random
import logging
import argparse
from datetime import date

from typing import List, TextIO

from mykad import VERSION
from mykad.api import is_valid, parse, format, unformat, generate_random
from mykad.mykadinfo import mykadinfo_asdict
from mykad.helper.exception import MyKadException, InvArgException
from mykad.helper.json import CustomJSONEncoder

logger = logging.getLogger(__name__)


def _date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date: {value}")


def cmd_validate(numbers: List[str], out: TextIO, today: date = None) -> int:
    errors = 0
    for number in numbers:
        ok = is_valid(number, today=today)
        errors += not ok
        print(f"{number}\t{'valid' if ok else 'invalid'}", file=out)
    return errors


def cmd_parse(numbers: List[str], out: TextIO, today: date = None) -> int:
    errors = 0
    for number in numbers:
        try:
            info = parse(number, today=today)
        except MyKadException as e:
            print(f"{number}: {e}", file=sys.stderr)
            errors += 1
            continue
        elem = mykadinfo_asdict(info, format(number))
        json.dump(elem, out, ensure_ascii=False, cls=CustomJSONEncoder)
        print(file=out)
    return errors


def cmd_convert(numbers: List[str], out: TextIO, formatted: bool = True) -> int:
    errors = 0
    convert = format if formatted else unformat
    for number in numbers:
        try:
            print(convert(number), file=out)
        except MyKadException as e:
            print(f"{number}: {e}", file=sys.stderr)
            errors += 1
    return errors


def cmd_generate(
    count: int,
    out: TextIO,
    seed: int = None,
    formatted: bool = False,
    today: date = None,
) -> int:
    if count < 0:
        raise InvArgException("invalid number count: {}", count)
    rng = random.Random(seed) if seed is not None else None
    for _ in range(count):
        number = generate_random(today=today, rng=rng)
        print(format(number) if formatted else number, file=out)
    return 0


def process(
    command: str,
    numbers: List[str] = None,
    count: int = 1,
    seed: int = None,
    formatted: bool = False,
    today: date = None,
    out: TextIO = None,
    **kwargs,
) -> int:
    """
    Run a command, and return the number of failed items
    """
    if out is None:
        out = sys.stdout
    logger.debug("command=%s numbers=%s today=%s", command, numbers, today)
    if command == "validate":
        return cmd_validate(numbers, out, today)
    elif command == "parse":
        return cmd_parse(numbers, out, today)
    elif command in ("format", "unformat"):
        return cmd_convert(numbers, out, command == "format")
    elif command == "generate":
        return cmd_generate(count, out, seed, formatted, today)
    raise InvArgException("unknown command: {}", command)


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Validate, decode, format and generate MyKad numbers (version {VERSION})"
    )
    parser.add_argument("--debug", action="store_true", help="debug mode")
    parser.add_argument(
        "--today",
        type=_date,
        help="reference date (YYYY-MM-DD) to resolve birth year centuries",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    for name, desc in (
        ("validate", "check MyKad numbers"),
        ("parse", "decode MyKad numbers as NDJSON"),
        ("format", "write MyKad numbers as YYMMDD-PP-SSSG"),
        ("unformat", "write MyKad numbers as 12 digits"),
    ):
        p = sub.add_parser(name, help=desc)
        p.add_argument("numbers", metavar="NUMBER", nargs="+", help="MyKad number")

    g = sub.add_parser("generate", help="generate random valid MyKad numbers")
    g.add_argument(
        "-n",
        "--count",
        type=int,
        default=1,
        help="how many numbers to generate (default: %(default)s)",
    )
    g.add_argument("--seed", type=int, help="seed for the random generator")
    g.add_argument(
        "--formatted", action="store_true", help="write numbers as YYMMDD-PP-SSSG"
    )

    return parser.parse_args(args)


def main(args: List[str] = None):
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)

    level = "DEBUG" if args.debug else os.environ.get("LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level.upper())

    args = vars(args)
    args.pop("debug")
    try:
        errors = process(args.pop("command"), **args)
    except InvArgException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    sys.exit(1 if errors else 0)


if __name__ == "__main__":
    main()
