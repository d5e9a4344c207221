#!/usr/bin/env python3
import sys
from typing import List, Optional, Tuple

from .config import get_testing_mode
from .errors import ParseError
from .logger import setup_logger
from .watch import MAX_FIELD_DIGITS, Duration, DurationString, Seconds, Watch

# Get logger
logger = setup_logger('movement.cli', testing=get_testing_mode())

USAGE = "usage: movement START [+DURATION | -DURATION ...] [--12h | --24h]"


def parse_operation(arg: str) -> Tuple[str, Duration]:
    """Split '+4343' or '-1:30' into a sign and a duration"""
    sign, value = arg[:1], arg[1:]
    if sign not in ('+', '-') or not value:
        raise ValueError(f"operation {arg!r} must start with + or -")
    # Longer digit runs go through the duration parser's range check
    if value.isascii() and value.isdigit() and len(value) <= MAX_FIELD_DIGITS:
        return sign, Seconds(int(value))
    return sign, DurationString(value)


def parse_args(argv: List[str]) -> Tuple[str, List[Tuple[str, Duration]], bool]:
    """Read the start time, operations and display mode from argv"""
    meridiem = False
    start_words = []
    operations = []
    for arg in argv:
        if arg == '--12h':
            meridiem = True
        elif arg == '--24h':
            meridiem = False
        elif not operations and (not arg or arg[0] not in '+-'):
            # Lets '2:15 PM' be passed unquoted
            start_words.append(arg)
        else:
            operations.append(parse_operation(arg))

    if not start_words:
        raise ValueError("no start time given")
    return ' '.join(start_words), operations, meridiem


def run(argv: List[str]) -> str:
    """Build a watch from argv, apply every operation and return the display string"""
    start, operations, meridiem = parse_args(argv)
    watch = Watch(start, meridiem)
    for sign, duration in operations:
        if sign == '+':
            watch.add(duration)
        else:
            watch.subtract(duration)
    logger.debug(f"Elapsed {watch.elapsed} from {start!r}")
    return watch.format()


def main(argv: Optional[List[str]] = None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        result = run(argv)
    except ParseError as e:
        logger.error(f"Invalid time: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    print(result)


if __name__ == '__main__':
    main()
