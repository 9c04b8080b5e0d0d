"""Field rules for flight and computer identifiers.

Both validators return ``None`` when the value passes and a short,
human-readable reason otherwise. They never raise.
"""

from __future__ import annotations
from typing import Optional

FLIGHT_ID_MAX = 10
COMPUTER_ID_LEN = 3
# pieces of a record line are split on these; ASCII only
SEPARATORS = " \t\n\v\f\r,"
# checked case-insensitively in the last two positions of a computer id
AMBIGUOUS_LETTERS = frozenset("IO")


def validate_flight_id(s: str) -> Optional[str]:
    """Check a flight identifier: 1-10 characters, starting with a letter."""
    if not s:
        return "flight id missing"
    if not _is_ascii_letter(s[0]):
        return "flight id must start with a letter"
    if len(s) > FLIGHT_ID_MAX:
        return f"flight id too long (max {FLIGHT_ID_MAX})"
    return None


def validate_computer_id(s: str) -> Optional[str]:
    """Check a computer identifier: exactly 3 letters/digits, no I or O after the first."""
    if len(s) != COMPUTER_ID_LEN:
        return "computer id must be exactly 3 characters"
    if not all(ch.isascii() and ch.isalnum() for ch in s):
        return "computer id must be letters/numbers"
    if any(ch.upper() in AMBIGUOUS_LETTERS for ch in s[1:]):
        return "avoid letter I or O in last two spots"
    return None


def validate_flight_field(s: str) -> Optional[str]:
    """Flight id rules, plus: no separator characters.

    A flight id typed as a separate field must survive being written into a
    record line and split back out.
    """
    msg = validate_flight_id(s)
    if msg is not None:
        return msg
    if any(ch in SEPARATORS for ch in s):
        return "flight id cannot contain spaces or commas"
    return None


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()
