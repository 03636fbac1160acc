"""Colour and icon tables used by the renderers."""

from typing import Callable, List, Sequence, Tuple

from ..models import CiStatus

SELF_REVIEWED_LABEL = 'Self Reviewed'
NO_LABELS_TEXT = 'No labels'

DEFAULT_REPO_CATEGORY = 'gray'

# Evaluated top to bottom, first match wins
REPO_CATEGORY_RULES: List[Tuple[Callable[[str], bool], str]] = [
    (lambda repo: 'server' in repo, 'blue'),
    (lambda repo: 'client' in repo, 'purple'),
    (lambda repo: 'app' in repo, 'green'),
    (lambda repo: 'batch' in repo, 'orange'),
]

CI_ICONS = {
    CiStatus.FAILED: '❌',
    CiStatus.RUNNING: '⏳',
    CiStatus.PASSED: '✅',
    CiStatus.NO_CI: '⚪',
}

CI_CSS_CLASSES = {
    CiStatus.FAILED: 'badge-red',
    CiStatus.RUNNING: 'badge-yellow pulse',
    CiStatus.PASSED: 'badge-green',
    CiStatus.NO_CI: 'badge-gray',
}

# Legend order as shown under the table
LEGEND_ORDER = [CiStatus.PASSED, CiStatus.FAILED, CiStatus.RUNNING, CiStatus.NO_CI]


def repo_category(repo: str) -> str:
    """Pick the badge colour for a repository by substring match on its name."""
    for matches, category in REPO_CATEGORY_RULES:
        if matches(repo):
            return category
    return DEFAULT_REPO_CATEGORY


def ci_label(status: CiStatus) -> str:
    """Icon plus text, e.g. '✅ Passed'."""
    return f"{CI_ICONS[status]} {status.value}"


def is_self_reviewed(labels: Sequence[str]) -> bool:
    return SELF_REVIEWED_LABEL in labels
