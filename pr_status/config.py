"""Command-line and environment configuration for the PR status dashboard."""

import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from . import __version__

DEFAULT_DAYS = 10
DEFAULT_FORMAT = 'html'
OUTPUT_FORMATS = ('html', 'markdown')


class ConfigError(Exception):
    """Raised when required configuration is missing."""


@dataclass
class ReportConfig:
    """Resolved settings for one run."""
    repositories: List[str] = field(default_factory=list)
    days: int = DEFAULT_DAYS
    author: Optional[str] = None
    output_format: str = DEFAULT_FORMAT
    open_report: bool = True


def parse_repositories(value: str) -> List[str]:
    """Split a comma-separated repository list, keeping order and duplicates."""
    if not value:
        return []
    return [repo.strip() for repo in value.split(',') if repo.strip()]


def _non_negative_int(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days: '{value}'")
    if days < 0:
        raise argparse.ArgumentTypeError(f"number of days must be >= 0, got {days}")
    return days


def _env_days() -> int:
    days_env = os.environ.get('PR_STATUS_DAYS')
    if not days_env:
        return DEFAULT_DAYS
    try:
        return _non_negative_int(days_env)
    except argparse.ArgumentTypeError:
        logging.warning(f"Invalid PR_STATUS_DAYS value '{days_env}', using default: {DEFAULT_DAYS}")
        return DEFAULT_DAYS


def _env_format() -> str:
    format_env = os.environ.get('PR_STATUS_FORMAT', DEFAULT_FORMAT).strip().lower()
    if format_env not in OUTPUT_FORMATS:
        logging.warning(f"Invalid PR_STATUS_FORMAT value '{format_env}', using default: {DEFAULT_FORMAT}")
        return DEFAULT_FORMAT
    return format_env


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from the environment."""
    parser = argparse.ArgumentParser(
        prog='pr-status',
        description='Check GitHub PR status across multiple repositories with an HTML dashboard',
    )
    parser.add_argument(
        'repos',
        nargs='?',
        default=os.environ.get('GITHUB_REPOS'),
        help='Comma-separated list of repositories (owner/repo,owner/repo2)',
    )
    parser.add_argument(
        '-d', '--days',
        type=_non_negative_int,
        default=_env_days(),
        help=f'Number of days to look back (default: {DEFAULT_DAYS})',
    )
    parser.add_argument(
        '-a', '--author',
        default=os.environ.get('GITHUB_USERNAME') or None,
        help='GitHub username to filter PRs (default: auto-detect)',
    )
    parser.add_argument(
        '-f', '--format',
        dest='output_format',
        choices=OUTPUT_FORMATS,
        default=_env_format(),
        help='Output format: html or markdown (default: html)',
    )
    parser.add_argument(
        '--no-open',
        dest='open_report',
        action='store_false',
        default=os.environ.get('PR_STATUS_OPEN', 'true').lower() not in ('false', '0', 'no'),
        help='Do not open the HTML file in a browser',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def load_config(argv: List[str] = None) -> ReportConfig:
    """Resolve configuration from arguments, falling back to the environment.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        ReportConfig for this run

    Raises:
        ConfigError: If no repositories were given
    """
    args = build_parser().parse_args(argv)

    repositories = parse_repositories(args.repos)
    if not repositories:
        raise ConfigError('Repositories parameter is required!')

    author = args.author.strip() if args.author else None

    return ReportConfig(
        repositories=repositories,
        days=args.days,
        author=author or None,
        output_format=args.output_format,
        open_report=args.open_report,
    )
