import re

# Clock string components
TIME_COMPONENTS = {
    'clock': r'(?P<clock>(?:(?![^\W\d_])\S)*)',                   # 13:34, 2:15:01
    'spaces': r'\s*',                                             # Optional spaces
    'designator': r'(?P<designator>[^\W\d_](?:[^\W\d_]|[.\s])*)?'  # AM, p.m, P M, any letters
}

# Meridiem designator components
MERIDIEM_COMPONENTS = {
    'letter': r'(?P<letter>[ap])',   # a/p
    'dot': r'\.?',                   # A.M
    'spaces': r'\s*',                # P M
    'm': r'(?:m\.?)?'                # am/pm/a.m.
}

# A single hour, minute or second field
NUMBER_PATTERN = r'[0-9]+'
SEPARATOR = ':'


def build_time_pattern():
    """Build clock pattern from components"""
    return (f"{TIME_COMPONENTS['clock']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['designator']}")


def build_meridiem_pattern():
    """Build meridiem designator pattern from components"""
    return (f"{MERIDIEM_COMPONENTS['letter']}"
            f"{MERIDIEM_COMPONENTS['dot']}"
            f"{MERIDIEM_COMPONENTS['spaces']}"
            f"{MERIDIEM_COMPONENTS['m']}")


TIME_RE = re.compile(build_time_pattern())
MERIDIEM_RE = re.compile(build_meridiem_pattern(), re.IGNORECASE)
NUMBER_RE = re.compile(NUMBER_PATTERN)


def to_24_hour(hour, meridiem):
    """Map a 1-12 clock hour and 'a'/'p' designator to 0-23"""
    meridiem = meridiem.lower()
    if meridiem == 'p' and hour != 12:
        hour += 12
    elif meridiem == 'a' and hour == 12:
        hour = 0
    return hour
