"""Adapters - I/O implementations of ports."""

from .linear_api import AuthenticationError, LinearAdapter, LinearAPIError
from .file_reports import FileReportStore

__all__ = [
    "LinearAdapter",
    "AuthenticationError",
    "LinearAPIError",
    "FileReportStore",
]
