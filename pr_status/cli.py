"""Command-line entry point for the PR status dashboard."""

import logging
import os
import sys
import webbrowser
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from dotenv import load_dotenv

from .analyzer import PRStatusCollector
from .config import ConfigError, ReportConfig, load_config
from .output import HtmlReportSink, MarkdownReportSink, report_path
from .platform_client import GhCliClient, PlatformClient, PlatformError, is_cli_installed

# ANSI color codes
GREEN = '\033[92m'
YELLOW = '\033[93m'
RED = '\033[91m'
BLUE = '\033[94m'
GRAY = '\033[90m'
RESET = '\033[0m'


def configure_logging():
    """Configure logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def _error(message: str):
    print(f"{RED}❌ {message}{RESET}", file=sys.stderr)


def open_in_viewer(path: str) -> bool:
    """Open a report in the default browser. Failures are only logged."""
    try:
        opened = webbrowser.open(Path(path).as_uri())
    except webbrowser.Error as e:
        logging.warning(f"Could not open {path} in a browser: {e}")
        return False
    if not opened:
        logging.warning(f"No browser available to open {path}")
    return opened


def generate_report(
    config: ReportConfig,
    client: PlatformClient,
    author: str,
    now: datetime = None,
    console: TextIO = None,
    output_dir: str = None
) -> Optional[str]:
    """Run discovery, enrichment and rendering for one configuration.

    Args:
        config: Resolved run configuration
        client: Platform client for all queries
        author: Username whose PRs are reported
        now: Reference time for the whole run (defaults to current UTC time)
        console: Stream for progress messages
        output_dir: Directory for the HTML report (defaults to the temp dir)

    Returns:
        Path of the HTML report, or None for markdown output or when no PRs were found
    """
    console = console or sys.stdout
    collector = PRStatusCollector(client, author, config.days, now)

    print(f"{BLUE}🔍 Checking open PRs by {author} (within {config.days} days)...{RESET}", file=console)
    print(f"{GRAY}📂 Repositories: {', '.join(config.repositories)}{RESET}", file=console)

    refs = collector.discover(config.repositories)
    print(f"Found {len(refs)} recent PRs", file=console)

    if not refs:
        print(f"{YELLOW}No recent PRs found within {config.days} days.{RESET}", file=console)
        return None

    if config.output_format == 'html':
        sink = HtmlReportSink(
            author, config.days, config.repositories,
            path=report_path(author, config.repositories, output_dir)
        )
        print(f"{GRAY}📄 HTML file: {sink.path}{RESET}", file=console)
    else:
        sink = MarkdownReportSink(author, config.days, config.repositories)

    with sink:
        sink.write_header()
        for record in collector.iter_records(refs):
            try:
                sink.append_record(record)
            except Exception as e:
                logging.warning(f"Skipping {record.repository}#{record.number}: could not render row ({e})", exc_info=True)
        sink.write_footer()

    print(f"Processed {sink.record_count} of {len(refs)} PRs", file=console)
    return sink.path if config.output_format == 'html' else None


def main(argv: List[str] = None, client: PlatformClient = None) -> int:
    """Main entry point. Returns the process exit code."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    configure_logging()

    try:
        config = load_config(argv)
    except ConfigError as e:
        _error(f"Error: {e}")
        print('Usage: pr-status "repo1,repo2" [options]', file=sys.stderr)
        print("Run 'pr-status --help' for more information.", file=sys.stderr)
        return 1

    # Keep stdout for the table itself in markdown mode
    console = sys.stdout if config.output_format == 'html' else sys.stderr

    if client is None:
        if not is_cli_installed():
            _error('GitHub CLI (gh) is not installed. Please install it first.')
            print('Visit: https://cli.github.com/', file=sys.stderr)
            return 1
        client = GhCliClient()

    author = config.author
    if not author:
        try:
            author = client.get_authenticated_user()
        except PlatformError as e:
            logging.debug(f"Identity query failed: {e}")
            _error("Could not detect GitHub username. Please make sure you're authenticated with 'gh auth login'")
            print('Or provide the author manually with -a option', file=sys.stderr)
            return 1
        print(f"{GREEN}✅ Detected GitHub user: {author}{RESET}", file=console)

    try:
        report_file = generate_report(config, client, author, console=console)
    except KeyboardInterrupt:
        _error('Interrupted')
        return 130
    except Exception as e:
        logging.debug('Unhandled error', exc_info=True)
        _error(f"Error: {e}")
        return 1

    if report_file:
        print(f"\n{GREEN}📊 HTML report generated: {report_file}{RESET}", file=console)
        if config.open_report:
            print(f"{BLUE}🌐 Opening in browser...{RESET}", file=console)
            open_in_viewer(report_file)

    return 0


if __name__ == "__main__":
    sys.exit(main())
