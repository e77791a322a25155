"""edgar-nc: typed parser for EDGAR `.nc` submission archives."""

from edgar_nc.parsing import (
    SubmissionParser,
    parse_submission,
    parse_submission_file,
    ParseError,
    Submission,
)

__version__ = "0.1.0"

__all__ = [
    "SubmissionParser",
    "parse_submission",
    "parse_submission_file",
    "ParseError",
    "Submission",
]
