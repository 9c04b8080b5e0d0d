"""Errors and rejection kinds used by the flight check pipeline."""

from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    """Why a line or a file was rejected."""
    EMPTY_INPUT = "EmptyInput"
    MALFORMED_SHAPE = "MalformedShape"
    INVALID_TIME = "InvalidTime"
    INVALID_FLIGHT_ID = "InvalidFlightId"
    INVALID_COMPUTER_ID = "InvalidComputerId"
    FILE_ACCESS = "FileAccess"


class FlightCheckError(Exception):
    """Base error for this package."""


class ParseError(FlightCheckError):
    """Raised when a caller insists on a record from a rejected line."""

    def __init__(self, reason: str, kind: ErrorKind | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.kind = kind


class FileAccessError(FlightCheckError):
    """Raised when a store or input file cannot be opened."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason
