"""
Wall-clock arithmetic.

A Watch remembers the time of day it was started at and the net number of
seconds added to it since. Everything else (the displayed time, how many
midnights were crossed) is derived from ``start + offset`` with floor
division, so long chains of additions never drift.

    >>> watch = Watch("13:34", meridiem=True)
    >>> watch.add_seconds(4343).format()
    '02:46:23 PM'
    >>> watch -= 100000000
    >>> str(watch)
    '04:59:43 AM -1157 days'
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from .config import get_testing_mode
from .errors import (
    MalformedInput,
    NonNumericComponent,
    OutOfRange,
    SeparatorCountError,
    UnrecognizedMeridiem,
)
from .logger import setup_logger
from .patterns import MERIDIEM_RE, NUMBER_RE, SEPARATOR, TIME_RE, to_24_hour

logger = setup_logger('movement.watch', testing=get_testing_mode())

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

FIELD_NAMES = ('hour', 'minute', 'second')
# Leading zeros count towards the limit
MAX_FIELD_DIGITS = 18


def _split_fields(text: str, clock: str) -> List[int]:
    """Split HH[:MM[:SS]] into integers, padding missing fields with 0"""
    parts = clock.split(SEPARATOR)
    if len(parts) > 3:
        raise SeparatorCountError(text, len(parts))
    for field, part in zip(FIELD_NAMES, parts):
        if not NUMBER_RE.fullmatch(part):
            raise NonNumericComponent(text, part)
        if len(part) > MAX_FIELD_DIGITS:
            raise OutOfRange(text, field, part, 0, 10 ** MAX_FIELD_DIGITS - 1)
    fields = [int(part) for part in parts]
    return fields + [0] * (3 - len(fields))


def _check_range(text: str, field: str, value: int, low: int, high: Optional[int]):
    if value < low or (high is not None and value > high):
        raise OutOfRange(text, field, value, low, high)


def _parse_clock(text: str) -> Tuple[int, Optional[str]]:
    """Parse a clock reading into seconds of day and the a/p designator found"""
    stripped = text.strip()
    if not stripped:
        raise MalformedInput("empty time string", text)

    match = TIME_RE.fullmatch(stripped)
    if not match:
        raise MalformedInput(f"{text!r} is not a time of day", text)
    clock = match.group('clock')
    designator = match.group('designator')
    if not clock:
        raise MalformedInput(f"{text!r} has no hour", text)

    hours, minutes, seconds = _split_fields(text, clock)

    meridiem = None
    if designator:
        meridiem_match = MERIDIEM_RE.fullmatch(designator.strip())
        if not meridiem_match:
            raise UnrecognizedMeridiem(text, designator)
        meridiem = meridiem_match.group('letter').lower()
        # 0 is not on a 12 hour dial
        _check_range(text, 'hour', hours, 1, 12)
        hours = to_24_hour(hours, meridiem)
    else:
        _check_range(text, 'hour', hours, 0, 23)

    _check_range(text, 'minute', minutes, 0, 59)
    _check_range(text, 'second', seconds, 0, 59)
    return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds, meridiem


def parse_time(text: str) -> int:
    """Parse a clock reading such as '13:34' or '2:15:01 A.M' into seconds of day"""
    return _parse_clock(text)[0]


def parse_duration(text: str) -> int:
    """Parse a span such as '3:14' or '100' into seconds

    Durations carry no meridiem and the hour field is unbounded.
    """
    stripped = text.strip()
    if not stripped:
        raise MalformedInput("empty duration string", text)

    hours, minutes, seconds = _split_fields(text, stripped)
    _check_range(text, 'minute', minutes, 0, 59)
    _check_range(text, 'second', seconds, 0, 59)
    return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds


def format_days(days: int) -> str:
    """Render the day offset suffix, e.g. ' +1 days' or ' -12 days'"""
    if days > 0:
        return f" +{days} days"
    if days < 0:
        return f" -{abs(days)} days"
    return ""


@dataclass(frozen=True)
class Seconds:
    """A duration given as a signed number of seconds."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Seconds expects an int, got {type(self.value).__name__}")

    def to_seconds(self) -> int:
        return self.value


@dataclass(frozen=True)
class DurationString:
    """A duration given as 'HH:MM:SS', 'HH:MM' or 'HH'."""
    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"DurationString expects a str, got {type(self.text).__name__}")

    def to_seconds(self) -> int:
        return parse_duration(self.text)


Duration = Union[Seconds, DurationString]


def as_duration(value) -> Duration:
    """Coerce an int, str or existing duration into a Duration"""
    if isinstance(value, (Seconds, DurationString)):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a duration")
    if isinstance(value, int):
        return Seconds(value)
    if isinstance(value, str):
        return DurationString(value)
    raise TypeError(f"cannot use {type(value).__name__} as a duration")


class Watch:
    """A time of day plus a signed count of midnights crossed.

    ``meridiem`` only selects the display: True renders ``hh:MM:SS AM``,
    False renders ``HH:MM:SS``. Whether the input string is read as a 12 or
    24 hour reading depends on the string alone.
    """

    # Mutable, so not hashable
    __hash__ = None

    def __init__(self, time: str, meridiem: bool = False):
        start, designator = _parse_clock(time)
        if bool(designator) != bool(meridiem):
            logger.debug(f"Display mode {'12h' if meridiem else '24h'} differs from input {time!r}")
        self._start = start
        self._offset = 0
        self.meridiem = meridiem
        logger.debug(f"Started watch at {self._start}s from {time!r}")

    @classmethod
    def parse(cls, time: str, meridiem: bool = False) -> 'Watch':
        return cls(time, meridiem)

    # State

    @property
    def start(self) -> int:
        """Seconds of day the watch was started at"""
        return self._start

    @property
    def offset(self) -> int:
        """Net seconds added since the start"""
        return self._offset

    @property
    def _total(self) -> int:
        return self._start + self._offset

    @property
    def seconds_of_day(self) -> int:
        return self._total % SECONDS_PER_DAY

    @property
    def days(self) -> int:
        return self._total // SECONDS_PER_DAY

    @property
    def hours(self) -> int:
        return self.seconds_of_day // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        return self.seconds_of_day % SECONDS_PER_HOUR // SECONDS_PER_MINUTE

    @property
    def seconds(self) -> int:
        return self.seconds_of_day % SECONDS_PER_MINUTE

    @property
    def elapsed(self) -> relativedelta:
        """Net offset as days, hours, minutes and seconds"""
        return relativedelta(seconds=self._offset)

    # Arithmetic

    def add(self, duration) -> 'Watch':
        """Move the watch forward by an int, duration string or Duration"""
        delta = as_duration(duration).to_seconds()
        if delta:
            self._offset += delta
            logger.debug(f"Added {delta}s, now {self.format()}")
        return self

    def subtract(self, duration) -> 'Watch':
        """Move the watch back by an int, duration string or Duration"""
        delta = as_duration(duration).to_seconds()
        if delta:
            self._offset -= delta
            logger.debug(f"Subtracted {delta}s, now {self.format()}")
        return self

    def add_seconds(self, seconds: int) -> 'Watch':
        return self.add(Seconds(seconds))

    def subtract_seconds(self, seconds: int) -> 'Watch':
        return self.subtract(Seconds(seconds))

    def add_duration_string(self, duration: str) -> 'Watch':
        return self.add(DurationString(duration))

    def subtract_duration_string(self, duration: str) -> 'Watch':
        return self.subtract(DurationString(duration))

    def reset(self) -> 'Watch':
        """Go back to the start time and forget crossed midnights"""
        self._offset = 0
        return self

    def copy(self) -> 'Watch':
        clone = object.__new__(type(self))
        clone._start = self._start
        clone._offset = self._offset
        clone.meridiem = self.meridiem
        return clone

    # Meridiem

    def toggle_meridiem(self) -> 'Watch':
        self.meridiem = not self.meridiem
        return self

    def change_meridiem(self, meridiem: bool) -> 'Watch':
        self.meridiem = bool(meridiem)
        return self

    # Formatting

    def format(self) -> str:
        if self.meridiem:
            hour = self.hours % 12 or 12
            suffix = 'PM' if self.hours >= 12 else 'AM'
            clock = f"{hour:02}:{self.minutes:02}:{self.seconds:02} {suffix}"
        else:
            clock = f"{self.hours:02}:{self.minutes:02}:{self.seconds:02}"
        return clock + format_days(self.days)

    def __str__(self):
        return self.format()

    def __repr__(self):
        return (f"Watch(hours={self.hours}, minutes={self.minutes}, seconds={self.seconds}, "
                f"days={self.days}, meridiem={self.meridiem})")

    # Operators

    def __eq__(self, other):
        if not isinstance(other, Watch):
            return NotImplemented
        return (self._total, self.meridiem) == (other._total, other.meridiem)

    def __add__(self, other):
        try:
            duration = as_duration(other)
        except TypeError:
            return NotImplemented
        return self.copy().add(duration)

    def __sub__(self, other):
        try:
            duration = as_duration(other)
        except TypeError:
            return NotImplemented
        return self.copy().subtract(duration)

    def __iadd__(self, other):
        try:
            duration = as_duration(other)
        except TypeError:
            return NotImplemented
        return self.add(duration)

    def __isub__(self, other):
        try:
            duration = as_duration(other)
        except TypeError:
            return NotImplemented
        return self.subtract(duration)
