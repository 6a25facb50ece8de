"""Functional core - pure business logic with no I/O."""

from .workdays import count_weekend_days, work_days_remaining
from .projects import Project, rank_projects, with_remaining_work_days
from .tasks import COMPLETED, NO_PROJECT, UPCOMING, GroupedTasks, Task, group_tasks, sort_project_names
from .report import ReportData, format_target_date, render_html, render_markdown

__all__ = [
    # Work days
    "count_weekend_days",
    "work_days_remaining",
    # Projects
    "Project",
    "rank_projects",
    "with_remaining_work_days",
    # Tasks
    "Task",
    "GroupedTasks",
    "group_tasks",
    "sort_project_names",
    "NO_PROJECT",
    "COMPLETED",
    "UPCOMING",
    # Report
    "ReportData",
    "format_target_date",
    "render_markdown",
    "render_html",
]
