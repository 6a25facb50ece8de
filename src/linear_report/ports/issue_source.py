"""Issue source interface."""

from datetime import datetime
from typing import Protocol

from linear_report.core.projects import Project
from linear_report.core.tasks import Task


class IssueSource(Protocol):
    """Interface for fetching the viewer's projects and issues from any tracker."""

    def fetch_active_projects(self) -> list[Project]:
        """Fetch projects in progress that the viewer has issues in."""
        ...

    def fetch_completed_tasks(self, since: datetime) -> list[Task]:
        """Fetch issues completed or in progress, updated since a point in time."""
        ...

    def fetch_upcoming_tasks(self) -> list[Task]:
        """Fetch high-priority issues not yet started."""
        ...
