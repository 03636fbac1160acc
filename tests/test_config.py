"""
Unit tests for configuration resolution
"""

import pytest

from pr_status.config import ConfigError, load_config, parse_repositories

ENV_VARS = ['GITHUB_REPOS', 'GITHUB_USERNAME', 'PR_STATUS_DAYS', 'PR_STATUS_FORMAT', 'PR_STATUS_OPEN']


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestParseRepositories:
    """Test cases for the repository list parser."""

    def test_strips_and_keeps_order(self):
        assert parse_repositories(' acme/server , acme/client') == ['acme/server', 'acme/client']

    def test_keeps_duplicates(self):
        assert parse_repositories('a/x,a/x') == ['a/x', 'a/x']

    def test_drops_empty_entries(self):
        assert parse_repositories('a/x,, ,a/y,') == ['a/x', 'a/y']

    def test_empty(self):
        assert parse_repositories('') == []
        assert parse_repositories(None) == []


class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self):
        config = load_config(['acme/server'])

        assert config.repositories == ['acme/server']
        assert config.days == 10
        assert config.author is None
        assert config.output_format == 'html'
        assert config.open_report is True

    def test_all_options(self):
        config = load_config(['acme/server,acme/client', '-d', '3', '-a', 'bob', '-f', 'markdown', '--no-open'])

        assert config.repositories == ['acme/server', 'acme/client']
        assert config.days == 3
        assert config.author == 'bob'
        assert config.output_format == 'markdown'
        assert config.open_report is False

    def test_missing_repositories(self):
        with pytest.raises(ConfigError):
            load_config([])

    def test_blank_repositories(self):
        with pytest.raises(ConfigError):
            load_config([' , '])

    def test_negative_days_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            load_config(['acme/server', '--days', '-1'])
        assert excinfo.value.code == 2

    def test_unknown_format_rejected(self):
        with pytest.raises(SystemExit):
            load_config(['acme/server', '--format', 'pdf'])

    def test_environment_defaults(self, monkeypatch):
        monkeypatch.setenv('GITHUB_REPOS', 'acme/app, acme/batch')
        monkeypatch.setenv('GITHUB_USERNAME', 'carol')
        monkeypatch.setenv('PR_STATUS_DAYS', '5')
        monkeypatch.setenv('PR_STATUS_FORMAT', 'Markdown')
        monkeypatch.setenv('PR_STATUS_OPEN', 'false')

        config = load_config([])

        assert config.repositories == ['acme/app', 'acme/batch']
        assert config.author == 'carol'
        assert config.days == 5
        assert config.output_format == 'markdown'
        assert config.open_report is False

    def test_arguments_override_environment(self, monkeypatch):
        monkeypatch.setenv('GITHUB_REPOS', 'acme/app')
        monkeypatch.setenv('PR_STATUS_DAYS', '5')

        config = load_config(['acme/server', '-d', '7'])

        assert config.repositories == ['acme/server']
        assert config.days == 7

    def test_invalid_environment_values_fall_back(self, monkeypatch):
        monkeypatch.setenv('PR_STATUS_DAYS', 'soon')
        monkeypatch.setenv('PR_STATUS_FORMAT', 'pdf')

        config = load_config(['acme/server'])

        assert config.days == 10
        assert config.output_format == 'html'

    def test_zero_days_allowed(self):
        assert load_config(['acme/server', '-d', '0']).days == 0
