"""Main PR status collector."""

import logging
from datetime import datetime, timezone
from typing import Iterator, List

from ..models import PullRequestRef, PullRequestRecord
from ..platform_client import PlatformClient


class PRStatusCollector:
    """Collects a user's recent open PRs and their CI status across repositories."""

    def __init__(
        self,
        client: PlatformClient,
        author: str,
        lookback_days: int = 10,
        now: datetime = None
    ):
        """Initialize the collector.

        Args:
            client: Platform client used for every external query
            author: Username whose open PRs are collected
            lookback_days: Only PRs updated within this many days are kept
            now: Reference time for every day calculation in this run
                 (defaults to the current UTC time, captured once)
        """
        if lookback_days < 0:
            raise ValueError(f"lookback_days must be >= 0, got {lookback_days}")

        self.client = client
        self.author = author
        self.lookback_days = lookback_days
        self.now = now or datetime.now(timezone.utc)

        logging.info(f"Initialized collector for author '{author}' (last {lookback_days} days)")

    def iter_records(self, refs: List[PullRequestRef]) -> Iterator[PullRequestRecord]:
        """Enrich refs in discovery order, yielding only the records that survive.

        Args:
            refs: PRs found by discover()

        Yields:
            PullRequestRecord for every ref whose detail fetch succeeded
        """
        total = len(refs)
        for index, ref in enumerate(refs, start=1):
            logging.info(f"Processing PR #{ref.number} in {ref.repository} ({index}/{total})")
            record = self.enrich(ref)
            if record is not None:
                yield record

    def collect(self, repositories: List[str]) -> List[PullRequestRecord]:
        """Run discovery and enrichment for all repositories."""
        return list(self.iter_records(self.discover(repositories)))


# Import and attach methods from submodules
from .discovery import discover, _search_repository
from .enrichment import enrich, _fetch_ci_status

PRStatusCollector.discover = discover
PRStatusCollector._search_repository = _search_repository
PRStatusCollector.enrich = enrich
PRStatusCollector._fetch_ci_status = _fetch_ci_status
