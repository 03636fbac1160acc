"""Report sink base class shared by the HTML and markdown renderers."""

from datetime import datetime
from typing import List

from ..models import PullRequestRecord


class ReportSink:
    """Receives a report in three phases: header, one call per record, footer.

    Sinks are context managers; leaving the ``with`` block releases the
    underlying output whether rendering finished or failed partway.
    """

    def __init__(self, author: str, days: int, repositories: List[str], generated_at: datetime = None):
        """Initialize the sink.

        Args:
            author: Username the report is about
            days: Lookback window in days
            repositories: Repositories as given on the command line
            generated_at: Timestamp shown in the report (defaults to now)
        """
        self.author = author
        self.days = days
        self.repositories = list(repositories)
        self.generated_at = generated_at or datetime.now()
        self.record_count = 0

    @property
    def generated_label(self) -> str:
        return self.generated_at.strftime('%Y-%m-%d %H:%M:%S')

    def write_header(self):
        raise NotImplementedError

    def append_record(self, record: PullRequestRecord):
        raise NotImplementedError

    def write_footer(self):
        raise NotImplementedError

    def close(self):
        """Release the output. Safe to call more than once."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
