"""PR enrichment methods for PRStatusCollector."""

import logging
from typing import Dict, List, Optional, Tuple

from ..models import CiStatus, PullRequestRef, PullRequestRecord
from ..platform_client import PlatformError
from .discovery import parse_timestamp, days_between

NO_CHECKS_DETAILS = 'No checks configured'
PENDING_STATES = ('in_progress', 'queued')


def classify_check_runs(check_runs: List[Dict]) -> Tuple[CiStatus, str]:
    """Reduce check-runs to one CiStatus and a details string.

    Any failure wins over anything pending, anything pending wins over
    success, and no check-runs at all means no CI.

    Args:
        check_runs: Dicts with status and conclusion keys

    Returns:
        Tuple of (status, details)
    """
    if not check_runs:
        return CiStatus.NO_CI, NO_CHECKS_DETAILS

    failed = sum(1 for run in check_runs if run.get('conclusion') == 'failure')
    succeeded = sum(1 for run in check_runs if run.get('conclusion') == 'success')
    pending = sum(1 for run in check_runs if run.get('status') in PENDING_STATES)

    if failed > 0:
        return CiStatus.FAILED, f"{failed} failed, {succeeded} passed"
    if pending > 0:
        return CiStatus.RUNNING, f"{pending} running, {succeeded} passed"
    return CiStatus.PASSED, f"All {succeeded} checks passed"


def enrich(self, ref: PullRequestRef) -> Optional[PullRequestRecord]:
    """Fetch details and CI status for a discovered PR.

    Args:
        ref: PR to enrich

    Returns:
        The enriched record, or None if the PR detail could not be fetched
    """
    try:
        detail = self.client.get_pr_detail(ref.repository, ref.number)
        title = detail['title']
        if not isinstance(title, str):
            raise TypeError(f"title is {type(title).__name__}, expected str")
        updated_at = parse_timestamp(detail['updated_at'])
        labels = tuple(str(label) for label in detail.get('labels') or [])
        head_sha = detail.get('head_sha') or ''
    except PlatformError as e:
        logging.warning(f"Skipping {ref.repository}#{ref.number}: {e}")
        return None
    except Exception as e:
        logging.warning(f"Skipping {ref.repository}#{ref.number}: unusable PR detail ({e})", exc_info=True)
        return None

    ci_status, ci_details = self._fetch_ci_status(ref.repository, head_sha)

    return PullRequestRecord(
        repository=ref.repository,
        number=ref.number,
        title=title,
        updated_at=updated_at,
        labels=labels,
        head_commit=head_sha,
        days_ago=days_between(self.now, updated_at),
        ci_status=ci_status,
        ci_details=ci_details,
        local_time=updated_at.astimezone().strftime('%m/%d, %H:%M'),
    )


def _fetch_ci_status(self, repo: str, sha: str) -> Tuple[CiStatus, str]:
    """Fetch and classify check-runs, degrading to NoCI on any failure."""
    if not sha:
        return CiStatus.NO_CI, NO_CHECKS_DETAILS

    try:
        return classify_check_runs(self.client.get_check_runs(repo, sha))
    except PlatformError as e:
        logging.debug(f"Check-runs unavailable for {repo}@{sha[:7]}: {e}")
    except (AttributeError, TypeError) as e:
        logging.debug(f"Unusable check-runs for {repo}@{sha[:7]}: {e}")
    return CiStatus.NO_CI, NO_CHECKS_DETAILS
