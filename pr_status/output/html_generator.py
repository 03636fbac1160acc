"""HTML report sink and deterministic report path."""

import hashlib
import logging
import os
import tempfile
from typing import List, Sequence

from ..models import PullRequestRecord
from .html_header import generate_html_header, generate_html_footer
from .sink_base import ReportSink
from .styles import (CI_CSS_CLASSES, NO_LABELS_TEXT, SELF_REVIEWED_LABEL,
                     ci_label, repo_category)

MAX_NAMED_REPOS = 4


def report_path(author: str, repositories: List[str], output_dir: str = None) -> str:
    """Build the report file path for an author and repository list.

    The same author and repositories always map to the same file, so a
    re-run replaces the previous report instead of adding a new one.

    Args:
        author: Username the report is about
        repositories: Repositories in command-line order
        output_dir: Directory for the report (defaults to the system temp dir)

    Returns:
        Absolute path of the HTML file
    """
    params = f"{author}_{'_'.join(repositories)}"
    params_hash = hashlib.sha256(params.encode('utf-8')).hexdigest()[:8]

    short_names = [repo.split('/', 1)[-1] for repo in repositories]
    if len(repositories) == 1:
        suffix = short_names[0].lower()
    elif len(repositories) <= MAX_NAMED_REPOS:
        suffix = '+'.join(short_names).lower()
    else:
        suffix = f"{len(repositories)}repos"

    output_dir = output_dir or tempfile.gettempdir()
    filename = f"pr-status-{author}-{suffix}-{params_hash}.html"
    return os.path.abspath(os.path.join(output_dir, filename))


def _escape_quotes(text: str) -> str:
    return text.replace('"', '&quot;')


def generate_labels_html(labels: Sequence[str]) -> str:
    if not labels:
        return f'<span class="no-labels">{NO_LABELS_TEXT}</span>'

    badges = []
    for label in labels:
        if label == SELF_REVIEWED_LABEL:
            badges.append(f'<span class="badge badge-green">✅ {label}</span>')
        else:
            badges.append(f'<span class="badge badge-gray">{label}</span>')
    return '\n                            '.join(badges)


def generate_row_html(record: PullRequestRecord) -> str:
    """Render one <tr> for a PR record."""
    day_word = 'day' if record.days_ago == 1 else 'days'

    return f'''                    <tr>
                        <td>
                            <a href="{record.url}" target="_blank" class="pr-link">#{record.number}</a>
                        </td>
                        <td>
                            <span class="badge repo-badge badge-{repo_category(record.repository)}">{record.short_repository}</span>
                        </td>
                        <td>
                            <div class="pr-title">{_escape_quotes(record.title)}</div>
                        </td>
                        <td>
                            <div class="updated-relative">{record.days_ago} {day_word} ago</div>
                            <div class="updated-absolute">{record.local_time}</div>
                        </td>
                        <td>
                            {generate_labels_html(record.labels)}
                        </td>
                        <td>
                            <a href="{record.checks_url}" target="_blank" class="badge {CI_CSS_CLASSES[record.ci_status]}">{ci_label(record.ci_status)}</a>
                            <div class="ci-details">{record.ci_details}</div>
                        </td>
                    </tr>
'''


class HtmlReportSink(ReportSink):
    """Writes the dashboard to a file, one row at a time."""

    def __init__(self, author: str, days: int, repositories: List[str], path: str = None, generated_at=None):
        """Initialize the HTML sink.

        Args:
            author: Username the report is about
            days: Lookback window in days
            repositories: Repositories in command-line order
            path: Output file (defaults to report_path(author, repositories))
            generated_at: Timestamp shown in the header
        """
        super().__init__(author, days, repositories, generated_at)
        self.path = path or report_path(author, self.repositories)
        self._file = None

    def _write(self, text: str):
        if self._file is None:
            raise RuntimeError('write_header() must be called before writing rows')
        self._file.write(text)
        self._file.flush()

    def write_header(self):
        # Truncates any report left by a previous run with the same parameters
        self._file = open(self.path, 'w', encoding='utf-8')
        logging.debug(f"Writing HTML report to {self.path}")
        self._write(generate_html_header(self.author, self.days, self.generated_label))

    def append_record(self, record: PullRequestRecord):
        self._write(generate_row_html(record))
        self.record_count += 1

    def write_footer(self):
        self._write(generate_html_footer())
        logging.info(f"Wrote {self.record_count} rows to {self.path}")

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
