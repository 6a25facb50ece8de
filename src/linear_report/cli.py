"""linear-report CLI - weekly Linear project reports."""

import json
import logging
import sys
from datetime import datetime, timedelta, timezone

import click
import requests

from .adapters.file_reports import FileReportStore
from .adapters.linear_api import LinearAdapter, LinearAPIError
from .config import Config, load_config
from .core.projects import rank_projects
from .core.report import format_target_date
from .core.tasks import COMPLETED, UPCOMING, group_tasks
from .workflows import fetch_report_data, render_reports, write_reports

MISSING_KEY_MESSAGE = "Please set your LINEAR_API_KEY environment variable."


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.INFO,
    )


def _require_config() -> Config:
    """Load config, exiting before any I/O if the API key is missing."""
    config = load_config()
    if not config.linear_api_key:
        click.echo(f"Error: {MISSING_KEY_MESSAGE}", err=True)
        sys.exit(1)
    return config


@click.group()
@click.version_option(package_name="linear-report")
def main():
    """linear-report - Linear project and task reports."""
    pass


@main.command()
@click.option(
    "--desktop/--no-desktop",
    default=None,
    help="Save to ~/Desktop/reports instead of ./reports (overrides SAVE_TO_DESKTOP)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def generate(desktop: bool | None, debug: bool):
    """Generate report.md and report.html."""
    config = _require_config()
    _setup_logging(debug)

    if desktop is not None:
        config.save_to_desktop = desktop

    click.echo("Fetching data from Linear...")
    data = fetch_report_data(LinearAdapter(config), lookback_days=config.lookback_days)
    click.echo("Generating reports...")
    reports = render_reports(data)

    reports_dir = config.reports_dir()
    click.echo(f"Saving reports to: {reports_dir}")
    outcome = write_reports(FileReportStore(reports_dir), reports)

    for name, result in outcome.items():
        if isinstance(result, BaseException):
            click.echo(f"Error saving {name}: {result}", err=True)
        else:
            click.echo(f"Saved {name}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def projects(as_json: bool):
    """List active projects, soonest deadline first."""
    config = _require_config()
    try:
        ranked = rank_projects(LinearAdapter(config).fetch_active_projects())
    except (requests.RequestException, LinearAPIError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "name": p.name,
                        "url": p.url,
                        "target_date": p.target_date.isoformat() if p.target_date else None,
                        "remaining_work_days": p.remaining_work_days,
                    }
                    for p in ranked
                ],
                indent=2,
            )
        )
        return

    if not ranked:
        click.echo("No active projects.")
        return

    for project in ranked:
        if project.target_date:
            due = f"{format_target_date(project.target_date)} ({project.remaining_work_days} work days)"
        else:
            due = "no target date"
        click.echo(f"{project.name} - {due}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(as_json: bool):
    """List this week's completed and next week's upcoming tasks by project."""
    config = _require_config()
    adapter = LinearAdapter(config)
    try:
        since = datetime.now(timezone.utc) - timedelta(days=config.lookback_days)
        grouped = group_tasks(
            adapter.fetch_completed_tasks(since),
            adapter.fetch_upcoming_tasks(),
        )
    except (requests.RequestException, LinearAPIError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(
            json.dumps(
                {
                    project: {
                        status: [{"id": t.id, "title": t.title, "url": t.issue_url} for t in items]
                        for status, items in buckets.items()
                    }
                    for project, buckets in grouped.items()
                },
                indent=2,
            )
        )
        return

    if not grouped:
        click.echo("No tasks.")
        return

    for status, heading in ((COMPLETED, "Completed"), (UPCOMING, "Upcoming")):
        click.echo(f"{heading}:")
        for project, buckets in grouped.items():
            if status not in buckets:
                continue
            click.echo(f"  {project}")
            for task in buckets[status]:
                click.echo(f"    • {task.id} {task.title}")
