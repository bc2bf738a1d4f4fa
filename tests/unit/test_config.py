"""Tests for environment configuration helpers."""

import logging

import pytest

from apiclient import config
from apiclient.config import env_var_name, load_environment, lookup_identifier


@pytest.fixture
def reset_dotenv(monkeypatch):
    """Allow each test to trigger a fresh .env load."""
    monkeypatch.setattr(config, "_dotenv_loaded", False)


class TestEnvVarName:

    def test_prefix_and_suffix_are_concatenated(self):
        assert env_var_name("FOO", "_API_KEY") == "FOO_API_KEY"


class TestLookupIdentifier:

    def test_returns_value(self):
        assert lookup_identifier({"FOO_API_KEY": "arn"}, "FOO", "_API_KEY") == "arn"

    def test_missing_is_none(self):
        assert lookup_identifier({}, "FOO", "_API_KEY") is None

    def test_empty_is_none(self):
        assert lookup_identifier({"FOO_API_KEY": ""}, "FOO", "_API_KEY") is None

    def test_logs_variable_name_only(self, caplog):
        caplog.set_level(logging.DEBUG)

        lookup_identifier({"FOO_API_KEY": "arn:secret"}, "FOO", "_API_KEY")

        assert "FOO_API_KEY" in caplog.text
        assert "arn:secret" not in caplog.text


class TestLoadEnvironment:

    def test_returns_process_environment(self, monkeypatch):
        monkeypatch.setenv("TEST_CLIENT_API_KEY", "arn")

        environ = load_environment(load_dotenv=False)

        assert environ["TEST_CLIENT_API_KEY"] == "arn"

    def test_snapshot_is_a_copy(self, monkeypatch):
        environ = load_environment(load_dotenv=False)
        monkeypatch.setenv("TEST_LATER", "value")

        assert "TEST_LATER" not in environ

    def test_loads_dotenv_file(self, tmp_path, monkeypatch, reset_dotenv):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_KEY=dotenv-value\n")
        monkeypatch.delenv("TEST_DOTENV_KEY", raising=False)

        environ = load_environment(dotenv_path=str(dotenv_file))

        assert environ["TEST_DOTENV_KEY"] == "dotenv-value"

    def test_dotenv_does_not_override_environment(self, tmp_path, monkeypatch, reset_dotenv):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_PRIORITY_KEY=dotenv-value\n")
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")

        environ = load_environment(dotenv_path=str(dotenv_file))

        assert environ["TEST_PRIORITY_KEY"] == "env-value"

    def test_dotenv_loaded_only_once(self, tmp_path, monkeypatch, reset_dotenv):
        first = tmp_path / "first.env"
        first.write_text("TEST_ONCE=first\n")
        second = tmp_path / "second.env"
        second.write_text("TEST_ONCE_SECOND=second\n")
        monkeypatch.delenv("TEST_ONCE", raising=False)
        monkeypatch.delenv("TEST_ONCE_SECOND", raising=False)

        load_environment(dotenv_path=str(first))
        environ = load_environment(dotenv_path=str(second))

        assert environ["TEST_ONCE"] == "first"
        assert "TEST_ONCE_SECOND" not in environ
