"""Time of day arithmetic with 12h/24h display and day rollover."""

from .errors import (
    MalformedInput,
    NonNumericComponent,
    OutOfRange,
    ParseError,
    SeparatorCountError,
    UnrecognizedMeridiem,
)
from .watch import (
    Duration,
    DurationString,
    Seconds,
    Watch,
    as_duration,
    parse_duration,
    parse_time,
)

__all__ = [
    'Duration',
    'DurationString',
    'MalformedInput',
    'NonNumericComponent',
    'OutOfRange',
    'ParseError',
    'Seconds',
    'SeparatorCountError',
    'UnrecognizedMeridiem',
    'Watch',
    'as_duration',
    'parse_duration',
    'parse_time',
]
