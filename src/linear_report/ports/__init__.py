"""Ports - interfaces/protocols for external dependencies."""

from .issue_source import IssueSource
from .report_store import ReportStore

__all__ = [
    "IssueSource",
    "ReportStore",
]
