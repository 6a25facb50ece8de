"""Report storage interface."""

from pathlib import Path
from typing import Protocol


class ReportStore(Protocol):
    """Interface for persisting rendered reports."""

    def ensure_dir(self) -> None:
        """Prepare the destination, creating it if needed."""
        ...

    def save(self, name: str, content: str) -> Path:
        """Write a report and return where it was saved."""
        ...
