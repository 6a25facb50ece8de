"""Report workflow: fetch from Linear, structure, render, save.

Each step takes its collaborators as arguments so the CLI can wire real
adapters and tests can pass fakes.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

from .adapters.file_reports import FileReportStore
from .adapters.linear_api import LinearAdapter
from .config import Config
from .core.projects import rank_projects
from .core.report import ReportData, render_html, render_markdown
from .core.tasks import group_tasks
from .ports import IssueSource, ReportStore

logger = logging.getLogger(__name__)

MARKDOWN_REPORT = "report.md"
HTML_REPORT = "report.html"


def fetch_report_data(
    source: IssueSource,
    as_of: datetime | None = None,
    lookback_days: int = 7,
) -> ReportData:
    """
    Fetch projects and tasks, rank and group them.

    Any failure while fetching degrades to empty report data. The completed
    window is measured in UTC; ranking uses the local calendar date.
    """
    as_of = as_of or datetime.now(timezone.utc)
    try:
        projects = source.fetch_active_projects()
        completed = source.fetch_completed_tasks(as_of - timedelta(days=lookback_days))
        upcoming = source.fetch_upcoming_tasks()
    except Exception:
        logger.exception("Error fetching data from Linear API")
        return ReportData(projects=[], tasks={})

    return ReportData(
        projects=rank_projects(projects, as_of.astimezone().date()),
        tasks=group_tasks(completed, upcoming),
    )


def render_reports(data: ReportData) -> dict[str, str]:
    """Render both report formats, keyed by file name."""
    return {
        MARKDOWN_REPORT: render_markdown(data),
        HTML_REPORT: render_html(data),
    }


async def save_reports(
    store: ReportStore,
    reports: dict[str, str],
) -> dict[str, Path | BaseException]:
    """
    Write every report concurrently and wait for all of them.

    A failed write is logged and returned in place of its path; it does not
    stop the other writes.
    """
    names = list(reports)
    results = await asyncio.gather(
        *(asyncio.to_thread(store.save, name, reports[name]) for name in names),
        return_exceptions=True,
    )

    outcome: dict[str, Path | BaseException] = {}
    for name, result in zip(names, results):
        if isinstance(result, BaseException):
            logger.error(f"Error saving {name}: {result}")
        else:
            logger.info(f"Saved {name} to {result}")
        outcome[name] = result
    return outcome


def write_reports(store: ReportStore, reports: dict[str, str]) -> dict[str, Path | BaseException]:
    """Prepare the destination, then save every report and wait for all writes."""
    try:
        store.ensure_dir()
    except OSError as e:
        logger.error(f"Could not create reports directory: {e}")

    return asyncio.run(save_reports(store, reports))

def generate_report(
    config: Config,
    source: IssueSource | None = None,
    store: ReportStore | None = None,
    as_of: datetime | None = None,
) -> dict[str, Path | BaseException]:
    """Run the full pipeline and return the save outcome per report file."""
    source = source or LinearAdapter(config)
    store = store or FileReportStore(config.reports_dir())

    data = fetch_report_data(source, as_of=as_of, lookback_days=config.lookback_days)
    return write_reports(store, render_reports(data))
