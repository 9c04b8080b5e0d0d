"""Validate flight check records: time, flight id, computer id."""

from .analyze import AnalysisReport, FileAccessFailure, analyze, analyze_file, export_csv
from .records import Invalid, Record, Valid, parse_line, render_record
from .validators import validate_computer_id, validate_flight_id

__version__ = "0.1.0"
