"""Pure report rendering - Markdown and HTML, no I/O."""

from dataclasses import dataclass, field
from datetime import date
from html import escape

from .projects import Project
from .tasks import COMPLETED, UPCOMING, GroupedTasks

HTML_STYLE = (
    "body {font-family: Arial, sans-serif;}"
    "h1 {font-size: 24px;margin-bottom: 12px;}"
    "h2 {font-size: 18px;margin-bottom: 8px;}"
    "h3 {font-size: 14px;margin-bottom: 6px;}"
    "p {margin: 4px 0;}"
)


@dataclass
class ReportData:
    """Ranked projects and grouped tasks, ready for rendering."""

    projects: list[Project] = field(default_factory=list)
    tasks: GroupedTasks = field(default_factory=dict)


def format_target_date(target: date) -> str:
    """Long form, e.g. 'Wednesday, January 15, 2025'."""
    return f"{target.strftime('%A, %B')} {target.day}, {target.year}"


def render_markdown(data: ReportData) -> str:
    """
    Render the report as Markdown.

    Pure function - no I/O.
    """
    lines = ["## My Active Projects", ""]
    for project in data.projects:
        lines += [f"### [{project.name}]({project.url})", ""]
        if project.target_date is not None:
            lines += [
                f"**Target date:** {format_target_date(project.target_date)}",
                "",
                f"**Work days remaining:** {project.remaining_work_days}",
                "",
            ]
        else:
            lines += ["_No target date_", ""]

    for status, heading in (
        (COMPLETED, "Completed this week (by project)"),
        (UPCOMING, "Upcoming next week (by project)"),
    ):
        lines += [f"## {heading}", ""]
        for project_name, buckets in data.tasks.items():
            if status not in buckets:
                continue
            lines += [f"### {project_name}", ""]
            for task in buckets[status]:
                lines.append(f"- [{task.id}]({task.issue_url}) {task.title}")
            lines.append("")

    return "\n".join(lines) + "\n"


def render_html(data: ReportData) -> str:
    """
    Render the report as a standalone HTML document.

    Pure function - no I/O. All text and attribute values are escaped.
    """
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        "<title>Linear Report</title>",
        f"<style>{HTML_STYLE}</style>",
        "</head>",
        "<body>",
        "<h1>My Active Projects</h1>",
    ]
    for project in data.projects:
        parts.append(
            f'<h3><a href="{escape(project.url)}">{escape(project.name)}</a></h3>'
        )
        if project.target_date is not None:
            parts.append(
                f"<p><strong>Target date:</strong> {format_target_date(project.target_date)}</p>"
            )
            parts.append(
                f"<p><strong>Work days remaining:</strong> {project.remaining_work_days}</p>"
            )
        else:
            parts.append("<p>No target date</p>")

    parts.append("<h1>Completed this week</h1>")
    for project_name, buckets in data.tasks.items():
        if COMPLETED in buckets:
            parts.append(f"<h3>{escape(project_name)}</h3>")
            for task in buckets[COMPLETED]:
                link = f'<a href="{escape(task.issue_url)}">{escape(task.id)}</a>'
                parts.append(f"<p>{link} {escape(task.title)}</p>")

    parts.append("<h1>Upcoming next week</h1>")
    for project_name, buckets in data.tasks.items():
        if UPCOMING in buckets:
            parts.append(f"<h3>{escape(project_name)}</h3>")
            for task in buckets[UPCOMING]:
                link = f'<a href="{escape(task.issue_url)}">{escape(task.id)}</a>'
                parts.append(f"<p>{link} {escape(task.title)}</p>")

    parts += ["</body>", "</html>"]
    return "\n".join(parts) + "\n"
