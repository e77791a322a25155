"""Utility helpers shared by the command-line entry point."""

from .reporting import SubmissionFormatter

__all__ = ["SubmissionFormatter"]
