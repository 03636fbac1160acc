"""Data models for the PR status dashboard."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Tuple


class CiStatus(Enum):
    """Aggregate CI state of a PR's head commit, highest priority first."""
    FAILED = 'Failed'
    RUNNING = 'Running'
    PASSED = 'Passed'
    NO_CI = 'No CI'


@dataclass(frozen=True)
class PullRequestRef:
    """A PR found during discovery, identified by repository and number."""
    repository: str
    number: int


@dataclass(frozen=True)
class PullRequestRecord:
    """A fully enriched PR, ready to be rendered."""
    repository: str
    number: int
    title: str
    updated_at: datetime
    labels: Tuple[str, ...] = ()
    head_commit: str = ''
    days_ago: int = 0
    ci_status: CiStatus = CiStatus.NO_CI
    ci_details: str = 'No checks configured'
    local_time: str = ''  # MM/DD, HH:MM in local time

    @property
    def url(self) -> str:
        return f"https://github.com/{self.repository}/pull/{self.number}"

    @property
    def checks_url(self) -> str:
        return f"{self.url}/checks"

    @property
    def short_repository(self) -> str:
        """Repository name without the owner prefix."""
        return self.repository.split('/', 1)[-1]
