"""Pure task grouping logic - no I/O dependencies."""

from dataclasses import dataclass
from typing import Iterable

NO_PROJECT = "no project"
COMPLETED = "completed"
UPCOMING = "upcoming"

ISSUE_URL_TEMPLATE = "https://linear.app/issue/{identifier}"


@dataclass(frozen=True)
class Task:
    """A Linear issue assigned to the viewer."""

    id: str
    title: str
    issue_url: str
    project_name: str | None = None

    @property
    def bucket_key(self) -> str:
        """Project name used for grouping, or the fallback key."""
        return self.project_name or NO_PROJECT

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from a Linear GraphQL issue node."""
        identifier = data["identifier"]
        project = data.get("project") or {}
        return cls(
            id=identifier,
            title=data.get("title", ""),
            issue_url=ISSUE_URL_TEMPLATE.format(identifier=identifier),
            project_name=project.get("name"),
        )


GroupedTasks = dict[str, dict[str, list[Task]]]


def sort_project_names(names: Iterable[str]) -> list[str]:
    """Alphabetical (case-sensitive) with the fallback key forced last."""
    return sorted(names, key=lambda name: (name == NO_PROJECT, name))


def group_tasks(completed: list[Task], upcoming: list[Task]) -> GroupedTasks:
    """
    Group tasks by project name, then by status.

    Buckets are created on first use and keep the input order. A status key
    is only present for a project when it has at least one task.
    Pure function - no I/O.
    """
    grouped: GroupedTasks = {}
    for status, tasks in ((COMPLETED, completed), (UPCOMING, upcoming)):
        for task in tasks:
            grouped.setdefault(task.bucket_key, {}).setdefault(status, []).append(task)

    return {name: grouped[name] for name in sort_project_names(grouped)}
