"""Pure project ranking logic - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date

from .workdays import work_days_remaining


@dataclass(frozen=True)
class Project:
    """An active project with an optional deadline."""

    id: str
    name: str
    url: str
    description: str = "no description"
    state: str = ""
    start_date: date | None = None
    target_date: date | None = None
    remaining_work_days: int | None = None

    @property
    def has_deadline(self) -> bool:
        return self.target_date is not None

    @classmethod
    def from_api(cls, data: dict) -> "Project":
        """Create Project from a Linear GraphQL project node."""
        return cls(
            id=data["id"],
            name=data["name"],
            url=data.get("url", ""),
            description=data.get("description") or "no description",
            state=data.get("state") or "",
            start_date=_parse_date(data.get("startedAt")),
            target_date=_parse_date(data.get("targetDate")),
        )


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    return date.fromisoformat(value.split("T")[0])


def with_remaining_work_days(project: Project, as_of: date) -> Project:
    """Return a copy of the project carrying its work days until the target date."""
    if project.target_date is None:
        return replace(project, remaining_work_days=None)
    return replace(
        project,
        remaining_work_days=work_days_remaining(as_of, project.target_date),
    )


def rank_projects(projects: list[Project], as_of: date | None = None) -> list[Project]:
    """
    Sort projects by work days remaining, soonest first.

    Projects without a target date go after every project that has one.
    Pure function - no I/O.
    """
    as_of = as_of or date.today()
    ranked = [with_remaining_work_days(p, as_of) for p in projects]

    def sort_key(p: Project) -> tuple[bool, int]:
        if p.remaining_work_days is None:
            return (True, 0)
        return (False, p.remaining_work_days)

    return sorted(ranked, key=sort_key)
