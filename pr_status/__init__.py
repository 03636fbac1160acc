"""PR Status Dashboard - open PRs and CI status across GitHub repositories."""

__version__ = '1.0.0'

from .models import CiStatus, PullRequestRef, PullRequestRecord
from .platform_client import PlatformClient, GhCliClient, PlatformError
from .analyzer import PRStatusCollector
from .output import ReportSink, HtmlReportSink, MarkdownReportSink

__all__ = [
    'CiStatus',
    'PullRequestRef',
    'PullRequestRecord',
    'PlatformClient',
    'GhCliClient',
    'PlatformError',
    'PRStatusCollector',
    'ReportSink',
    'HtmlReportSink',
    'MarkdownReportSink',
]
