"""File-based report storage adapter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileReportStore:
    """
    File-based report storage.

    Implements ReportStore protocol. Each report is a file in one directory.
    """

    def __init__(self, reports_dir: Path | str):
        self.reports_dir = Path(reports_dir).expanduser()

    def ensure_dir(self) -> None:
        """Create the reports directory if it does not exist yet."""
        if not self.reports_dir.exists():
            logger.info(f"Reports directory does not exist, creating {self.reports_dir}")
        self.reports_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        return self.reports_dir / name

    def save(self, name: str, content: str) -> Path:
        """Write/overwrite a report file."""
        path = self.path_for(name)
        path.write_text(content, encoding="utf-8")
        return path
