"""Time-of-day formats accepted in a record line.

Formats are data: an ordered list of named patterns, tried in sequence.
The first pattern that matches the token decides the result, so adding a
format means adding a ``TimePattern`` entry, nothing else.

Each pattern must capture exactly three groups: hour, minute, second.
"""

from __future__ import annotations
from dataclasses import dataclass
import re
from typing import Iterable, Sequence, Union

from .errors import ErrorKind

SHAPE_REASON = "time should look like 09:25:30 or 092530"
RANGE_REASON = "time out of range"


@dataclass(frozen=True)
class TimeOfDay:
    hour: int
    minute: int
    second: int

    @property
    def in_range(self) -> bool:
        return 0 <= self.hour <= 23 and 0 <= self.minute <= 59 and 0 <= self.second <= 59

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True)
class TimeFailure:
    reason: str
    kind: ErrorKind = ErrorKind.INVALID_TIME


TimeResult = Union[TimeOfDay, TimeFailure]


@dataclass(frozen=True)
class TimePattern:
    """A named time shape.

    `pattern` is matched against the whole token.
    """
    name: str
    pattern: str

    def compile(self) -> "re.Pattern[str]":
        return re.compile(self.pattern)


COLON = TimePattern(name="colon", pattern=r"([0-9]{2}):([0-9]{2}):([0-9]{2})")
COMPACT = TimePattern(name="compact", pattern=r"([0-9]{2})([0-9]{2})([0-9]{2})")

DEFAULT_PATTERNS: tuple[TimePattern, ...] = (COLON, COMPACT)


def compile_patterns(patterns: Iterable[TimePattern]) -> list[tuple[str, "re.Pattern[str]"]]:
    return [(p.name, p.compile()) for p in patterns]


_DEFAULT_COMPILED = compile_patterns(DEFAULT_PATTERNS)


def match_time(token: str, patterns: Sequence[TimePattern] | None = None) -> TimeOfDay | None:
    """Return the raw (unchecked) time for the first matching pattern, or None."""
    compiled = _DEFAULT_COMPILED if patterns is None else compile_patterns(patterns)
    for _name, rx in compiled:
        m = rx.fullmatch(token)
        if m is not None:
            hh, mm, ss = (int(g) for g in m.groups())
            return TimeOfDay(hh, mm, ss)
    return None


def parse_time(token: str, patterns: Sequence[TimePattern] | None = None) -> TimeResult:
    """Parse a time token into a range-checked TimeOfDay or a TimeFailure."""
    t = match_time(token, patterns)
    if t is None:
        return TimeFailure(SHAPE_REASON)
    if not t.in_range:
        return TimeFailure(RANGE_REASON)
    return t
