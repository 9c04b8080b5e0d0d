"""Line-oriented flight check records.

A record line has three pieces:
    <time> <flight> <computer>

Pieces may be separated by spaces or commas. Examples:
    09:25:30 ABC123 XYZ
    092530,ABC123,XY1

The time is stored as numbers and always rendered as HH:MM:SS, whichever
input shape was used. Flight and computer ids keep their original case.
"""

from __future__ import annotations
from dataclasses import dataclass
import re
from typing import Union

from .errors import ErrorKind, ParseError
from .timeformats import RANGE_REASON, TimeFailure, TimeOfDay, parse_time
from .validators import SEPARATORS, validate_computer_id, validate_flight_field, validate_flight_id

EMPTY_REASON = "empty line"
SHAPE_REASON = "expected 3 pieces: time flight computer"
EXTRA_REASON = "too many pieces: expected time flight computer"

_ASCII_SPACE = SEPARATORS.replace(",", "")
_SPLIT = re.compile("[" + re.escape(SEPARATORS) + "]+")


@dataclass(frozen=True)
class Record:
    hour: int
    minute: int
    second: int
    flight: str
    computer: str

    @property
    def time(self) -> TimeOfDay:
        return TimeOfDay(self.hour, self.minute, self.second)

    @property
    def time_text(self) -> str:
        """Canonical HH:MM:SS form."""
        return str(self.time)


@dataclass(frozen=True)
class Valid:
    record: Record
    ok = True

    def unwrap(self) -> Record:
        return self.record


@dataclass(frozen=True)
class Invalid:
    reason: str
    kind: ErrorKind
    ok = False

    def unwrap(self) -> Record:
        raise ParseError(self.reason, self.kind)


ValidationOutcome = Union[Valid, Invalid]


def _check_ids(flight: str, computer: str, check_flight=validate_flight_id) -> Invalid | None:
    # flight first; the first failure wins
    msg = check_flight(flight)
    if msg is not None:
        return Invalid(msg, ErrorKind.INVALID_FLIGHT_ID)
    msg = validate_computer_id(computer)
    if msg is not None:
        return Invalid(msg, ErrorKind.INVALID_COMPUTER_ID)
    return None


def split_pieces(line: str) -> list[str]:
    """Split on runs of ASCII whitespace and commas."""
    return [p for p in _SPLIT.split(line) if p]


def parse_line(line: str, *, strict: bool = False) -> ValidationOutcome:
    """Parse one input line into a Valid record or an Invalid reason.

    With `strict`, pieces beyond the third are rejected; otherwise they are
    ignored.
    """
    if not line.strip(_ASCII_SPACE):
        return Invalid(EMPTY_REASON, ErrorKind.EMPTY_INPUT)

    pieces = split_pieces(line)
    if len(pieces) < 3:
        return Invalid(SHAPE_REASON, ErrorKind.MALFORMED_SHAPE)
    if strict and len(pieces) > 3:
        return Invalid(EXTRA_REASON, ErrorKind.MALFORMED_SHAPE)

    time_token, flight, computer = pieces[:3]

    t = parse_time(time_token)
    if isinstance(t, TimeFailure):
        return Invalid(t.reason, t.kind)

    bad = _check_ids(flight, computer)
    if bad is not None:
        return bad

    return Valid(Record(t.hour, t.minute, t.second, flight, computer))


def build_record(hour: int, minute: int, second: int, flight: str, computer: str) -> ValidationOutcome:
    """Validate already separated fields, as the guided wizard collects them."""
    t = TimeOfDay(hour, minute, second)
    if not t.in_range:
        return Invalid(RANGE_REASON, ErrorKind.INVALID_TIME)
    # fields typed apart must still split back out of the rendered line
    bad = _check_ids(flight, computer, validate_flight_field)
    if bad is not None:
        return bad
    return Valid(Record(hour, minute, second, flight, computer))


def render_record(r: Record) -> str:
    """Render a Record back to its stored line form."""
    return f"{r.time_text} {r.flight} {r.computer}"
