"""Markdown table sink printed to a console stream."""

import sys
from typing import List, Sequence, TextIO

from ..models import PullRequestRecord
from .sink_base import ReportSink
from .styles import NO_LABELS_TEXT, ci_label, is_self_reviewed

MAX_TITLE_LENGTH = 60

TABLE_HEADER = '| PR | Repository | Title | Days Ago | Labels | CI Status | Details |'
TABLE_SEPARATOR = '|---|---|---|---|---|---|---|'


def truncate_title(title: str, limit: int = MAX_TITLE_LENGTH) -> str:
    return title[:limit] + '...' if len(title) > limit else title


def format_labels(labels: Sequence[str]) -> str:
    """Comma-joined labels, with a check mark when the PR is self reviewed."""
    if not labels:
        return NO_LABELS_TEXT
    text = ', '.join(labels)
    if is_self_reviewed(labels):
        text += ' ✅'
    return text


def format_row(record: PullRequestRecord) -> str:
    cells = [
        f"[#{record.number}]({record.url})",
        record.repository,
        truncate_title(record.title),
        str(record.days_ago),
        format_labels(record.labels),
        f"[{ci_label(record.ci_status)}]({record.checks_url})",
        record.ci_details,
    ]
    return '| ' + ' | '.join(cells) + ' |'


class MarkdownReportSink(ReportSink):
    """Prints a pipe table followed by a plain-text summary."""

    def __init__(self, author: str, days: int, repositories: List[str], stream: TextIO = None, generated_at=None):
        super().__init__(author, days, repositories, generated_at)
        self.stream = stream or sys.stdout

    def _print(self, line: str = ''):
        print(line, file=self.stream)

    def write_header(self):
        self._print()
        self._print(TABLE_HEADER)
        self._print(TABLE_SEPARATOR)

    def append_record(self, record: PullRequestRecord):
        self._print(format_row(record))
        self.record_count += 1

    def write_footer(self):
        self._print()
        self._print('📊 Summary:')
        self._print(f"  - Author: {self.author}")
        self._print(f"  - Time range: Last {self.days} days")
        self._print(f"  - Repositories: {', '.join(self.repositories)}")
        self._print(f"  - Generated: {self.generated_label}")

    def close(self):
        self.stream.flush()
