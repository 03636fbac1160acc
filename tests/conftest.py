"""Shared fixtures for the PR status tests."""

from datetime import datetime, timedelta, timezone

import pytest

from pr_status.platform_client import PlatformClient, PlatformError

NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


def iso_days_ago(days: float, now: datetime = NOW) -> str:
    """GitHub-style timestamp for a moment `days` before now."""
    return (now - timedelta(days=days)).strftime('%Y-%m-%dT%H:%M:%SZ')


class FakePlatformClient(PlatformClient):
    """In-memory PlatformClient.

    Values in the lookup tables may be exceptions, which are raised instead
    of returned.
    """

    def __init__(self, user='alice', searches=None, details=None, check_runs=None):
        self.user = user
        self.searches = searches or {}
        self.details = details or {}
        self.check_runs = check_runs or {}
        self.calls = []

    @staticmethod
    def _resolve(value):
        if isinstance(value, Exception):
            raise value
        return value

    def get_authenticated_user(self):
        self.calls.append(('user',))
        return self._resolve(self.user)

    def search_open_prs(self, repo, author, limit=20):
        self.calls.append(('search', repo, author, limit))
        if repo not in self.searches:
            raise PlatformError(f"Could not resolve to a Repository with the name '{repo}'")
        return self._resolve(self.searches[repo])

    def get_pr_detail(self, repo, number):
        self.calls.append(('detail', repo, number))
        if (repo, number) not in self.details:
            raise PlatformError(f"HTTP 404: Not Found (repos/{repo}/pulls/{number})")
        return self._resolve(self.details[(repo, number)])

    def get_check_runs(self, repo, sha):
        self.calls.append(('checks', repo, sha))
        return self._resolve(self.check_runs.get((repo, sha), []))


@pytest.fixture
def now():
    return NOW


def make_scenario_client(now: datetime = NOW) -> FakePlatformClient:
    """One recent, self-reviewed PR in acme/server with two passing checks."""
    return FakePlatformClient(
        searches={
            'acme/server': [{'number': 42, 'title': 'Fix race condition', 'updatedAt': iso_days_ago(6.2, now)}],
        },
        details={
            ('acme/server', 42): {
                'title': 'Fix race condition',
                'updated_at': iso_days_ago(6.2, now),
                'labels': ['Self Reviewed'],
                'head_sha': 'abc1234def',
            },
        },
        check_runs={
            ('acme/server', 'abc1234def'): [
                {'name': 'build', 'status': 'completed', 'conclusion': 'success'},
                {'name': 'test', 'status': 'completed', 'conclusion': 'success'},
            ],
        },
    )


@pytest.fixture
def scenario_client():
    return make_scenario_client()
