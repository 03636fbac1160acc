"""Report renderers."""

from .sink_base import ReportSink
from .html_generator import HtmlReportSink, report_path
from .markdown import MarkdownReportSink

__all__ = ['ReportSink', 'HtmlReportSink', 'MarkdownReportSink', 'report_path']
