"""PR discovery methods for PRStatusCollector."""

import logging
from datetime import datetime, timezone
from typing import Dict, List

from ..models import PullRequestRef
from ..platform_client import PlatformError, SEARCH_LIMIT

SECONDS_PER_DAY = 86400


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO-8601 timestamp such as 2024-05-01T10:00:00Z."""
    parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_between(now: datetime, then: datetime) -> int:
    """Whole days elapsed from then to now, floored."""
    return int((now - then).total_seconds() // SECONDS_PER_DAY)


def discover(self, repositories: List[str]) -> List[PullRequestRef]:
    """Find open PRs by the author updated within the lookback window.

    Args:
        repositories: Repositories as owner/name, searched in the given order

    Returns:
        Refs ordered by repository, then by the order the search returned them
    """
    refs = []

    for repo in repositories:
        for pr in self._search_repository(repo):
            try:
                updated_at = parse_timestamp(pr['updatedAt'])
                number = int(pr['number'])
            except (KeyError, TypeError, ValueError) as e:
                logging.warning(f"Ignoring malformed search result in {repo}: {e}")
                continue

            days_ago = days_between(self.now, updated_at)
            if days_ago <= self.lookback_days:
                refs.append(PullRequestRef(repo, number))
            else:
                logging.debug(f"Skipping {repo}#{number}: updated {days_ago} days ago")

    logging.info(f"Discovered {len(refs)} recent PRs across {len(repositories)} repositories")
    return refs


def _search_repository(self, repo: str) -> List[Dict]:
    """Search one repository, returning no PRs if the search fails."""
    logging.debug(f"Searching open PRs by {self.author} in {repo}")
    try:
        return self.client.search_open_prs(repo, self.author, limit=SEARCH_LIMIT)
    except PlatformError as e:
        logging.warning(f"Skipping {repo}: search failed ({e})")
        return []
