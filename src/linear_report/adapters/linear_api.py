"""Linear API adapter - GraphQL client for project and issue fetching."""

import logging
from datetime import datetime, timezone
from typing import Iterator

import requests

from linear_report.config import Config
from linear_report.core.projects import Project
from linear_report.core.tasks import Task

logger = logging.getLogger(__name__)

API_URL = "https://api.linear.app/graphql"
PAGE_SIZE = 50
REQUEST_TIMEOUT = 30
ACTIVE_PROJECT_STATE = "started"

ASSIGNED_ISSUES_QUERY = """
query AssignedIssues(
  $first: Int!
  $after: String
  $filter: IssueFilter
  $orderBy: PaginationOrderBy
) {
  viewer {
    assignedIssues(first: $first, after: $after, filter: $filter, orderBy: $orderBy) {
      nodes {
        identifier
        title
        updatedAt
        project {
          id
          name
          state
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
    }
  }
}
"""

PROJECT_QUERY = """
query Project($id: String!) {
  project(id: $id) {
    id
    name
    description
    url
    state
    startedAt
    targetDate
  }
}
"""


class AuthenticationError(Exception):
    """Raised when no usable API key is configured."""

    pass


class LinearAPIError(Exception):
    """Raised when the GraphQL response carries errors."""

    pass


class LinearAdapter:
    """
    Linear API adapter.

    Implements IssueSource protocol. Handles authentication, pagination,
    and API calls. No business logic - just I/O.
    """

    def __init__(self, config: Config, session: requests.Session | None = None):
        self.config = config
        self._session = session or requests.Session()

    def _ensure_api_key(self) -> None:
        if not self.config.linear_api_key:
            raise AuthenticationError("No LINEAR_API_KEY configured.")

    def _graphql(self, query: str, variables: dict) -> dict:
        """Make authenticated GraphQL request and return its data payload."""
        self._ensure_api_key()
        resp = self._session.post(
            API_URL,
            json={"query": query, "variables": variables},
            headers={"Authorization": self.config.linear_api_key},
            timeout=REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        payload = resp.json()

        errors = payload.get("errors") or []
        if errors:
            raise LinearAPIError("; ".join(e.get("message", str(e)) for e in errors))
        return payload.get("data") or {}

    def _assigned_issues(
        self,
        issue_filter: dict | None = None,
        order_by: str | None = None,
    ) -> Iterator[dict]:
        """Yield the viewer's assigned issues, following pagination cursors."""
        after = None
        page = 0
        while True:
            variables = {"first": PAGE_SIZE, "after": after}
            if issue_filter is not None:
                variables["filter"] = issue_filter
            if order_by is not None:
                variables["orderBy"] = order_by

            data = self._graphql(ASSIGNED_ISSUES_QUERY, variables)
            connection = data["viewer"]["assignedIssues"]
            page += 1
            logger.debug(f"Fetched assigned issues page {page} ({len(connection['nodes'])} issues)")
            yield from connection["nodes"]

            page_info = connection.get("pageInfo") or {}
            if not page_info.get("hasNextPage"):
                return
            after = page_info.get("endCursor")

    def fetch_project(self, project_id: str) -> Project:
        """Fetch a single project by id."""
        data = self._graphql(PROJECT_QUERY, {"id": project_id})
        if not data.get("project"):
            raise LinearAPIError(f"Project {project_id} not found")
        return Project.from_api(data["project"])

    def fetch_active_projects(self) -> list[Project]:
        """Fetch started projects the viewer has assigned issues in."""
        project_ids: list[str] = []
        for issue in self._assigned_issues():
            project = issue.get("project")
            if not project or project.get("state") != ACTIVE_PROJECT_STATE:
                continue
            if project["id"] not in project_ids:
                project_ids.append(project["id"])

        logger.info(f"Found {len(project_ids)} active projects")
        return [self.fetch_project(project_id) for project_id in project_ids]

    def fetch_completed_tasks(self, since: datetime) -> list[Task]:
        """Fetch issues completed or in progress that were updated since a point in time."""
        issue_filter = {
            "updatedAt": {"gte": since.astimezone(timezone.utc).isoformat()},
            "state": {"type": {"in": ["completed", "started"]}},
        }
        return [
            Task.from_api(issue)
            for issue in self._assigned_issues(issue_filter, order_by="updatedAt")
        ]

    def fetch_upcoming_tasks(self) -> list[Task]:
        """Fetch unstarted issues at or above the configured priority."""
        issue_filter = {
            "state": {"type": {"in": ["unstarted"]}},
            "priority": {"lte": self.config.upcoming_priority_ceiling},
        }
        return [
            Task.from_api(issue)
            for issue in self._assigned_issues(issue_filter, order_by="updatedAt")
        ]
