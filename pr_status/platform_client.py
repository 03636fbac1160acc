"""Hosting-platform client that shells out to the GitHub CLI (gh)."""

import json
import logging
import subprocess
from typing import Dict, List

SEARCH_LIMIT = 20

PR_DETAIL_JQ = '{title: .title, updated_at: .updated_at, labels: [.labels[].name], head_sha: .head.sha}'
CHECK_RUNS_JQ = '[.check_runs[] | {name: .name, status: .status, conclusion: .conclusion}]'


class PlatformError(Exception):
    """Raised when a platform query fails or returns unusable output."""

    def __init__(self, message: str, command: List[str] = None, stderr: str = ''):
        super().__init__(message)
        self.command = command or []
        self.stderr = stderr


class PlatformClient:
    """Capability interface for the queries the dashboard needs.

    Implementations raise PlatformError on failure; callers decide whether a
    failure skips a repository, drops a PR or degrades CI status.
    """

    def get_authenticated_user(self) -> str:
        raise NotImplementedError

    def search_open_prs(self, repo: str, author: str, limit: int = SEARCH_LIMIT) -> List[Dict]:
        """Return open PRs by author as dicts with number, title and updatedAt."""
        raise NotImplementedError

    def get_pr_detail(self, repo: str, number: int) -> Dict:
        """Return a dict with title, updated_at, labels (names) and head_sha."""
        raise NotImplementedError

    def get_check_runs(self, repo: str, sha: str) -> List[Dict]:
        """Return check-runs for a commit as dicts with name, status and conclusion."""
        raise NotImplementedError


class GhCliClient(PlatformClient):
    """PlatformClient backed by the gh executable and its own auth session."""

    def __init__(self, executable: str = 'gh'):
        """Initialize the client.

        Args:
            executable: Name or path of the gh binary
        """
        self.executable = executable

    def _run(self, args: List[str]) -> str:
        """Run a gh command and return its stripped stdout.

        Raises:
            PlatformError: If gh is missing or exits non-zero
        """
        command = [self.executable, *args]
        logging.debug(f"Running: {' '.join(command)}")
        try:
            proc = subprocess.run(
                command,
                check=True,
                capture_output=True,
                encoding='utf-8',
                errors='replace',
            )
        except FileNotFoundError as e:
            raise PlatformError(f"{self.executable} executable not found", command) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or '').strip()
            raise PlatformError(
                f"{self.executable} exited with status {e.returncode}: {stderr}",
                command,
                stderr,
            ) from e
        return proc.stdout.strip()

    def _run_json(self, args: List[str]):
        raw = self._run(args)
        try:
            return json.loads(raw or 'null')
        except json.JSONDecodeError as e:
            raise PlatformError(f"Could not parse JSON output: {e}", [self.executable, *args]) from e

    def get_authenticated_user(self) -> str:
        login = self._run(['api', 'user', '--jq', '.login'])
        if not login:
            raise PlatformError('Authenticated user query returned no login')
        return login

    def search_open_prs(self, repo: str, author: str, limit: int = SEARCH_LIMIT) -> List[Dict]:
        prs = self._run_json([
            'search', 'prs',
            '--repo', repo,
            '--author', author,
            '--state', 'open',
            '--json', 'number,title,updatedAt',
            '--limit', str(limit),
        ])
        return prs or []

    def get_pr_detail(self, repo: str, number: int) -> Dict:
        detail = self._run_json(['api', f'/repos/{repo}/pulls/{number}', '--jq', PR_DETAIL_JQ])
        if not isinstance(detail, dict):
            raise PlatformError(f"Unexpected PR detail payload for {repo}#{number}")
        return detail

    def get_check_runs(self, repo: str, sha: str) -> List[Dict]:
        runs = self._run_json(['api', f'/repos/{repo}/commits/{sha}/check-runs', '--jq', CHECK_RUNS_JQ])
        return runs or []


def is_cli_installed(executable: str = 'gh') -> bool:
    """Check whether the gh executable can be run."""
    try:
        subprocess.run(
            [executable, '--version'],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return False
    return True
