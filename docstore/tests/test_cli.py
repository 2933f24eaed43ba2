"""
Tests for the demo CLI.

These tests focus on CLI-specific concerns: option parsing, output
formatting, exit codes and logging configuration. Search semantics are
covered by the repository tests.
"""

import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from docstore.cli.demo import create_sample_documents, main, setup_logging
from docstore.repos.memory import MemoryDocumentRepository


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo the root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestDemoCLI:
    """Tests for the document store demo CLI program."""

    def test_no_options_lists_all_samples(self, runner: CliRunner) -> None:
        result = runner.invoke(main)

        assert result.exit_code == 0
        total = len(create_sample_documents())
        assert f"{total} of {total} documents matched" in result.output
        assert "Hello World" in result.output
        assert "Meeting Notes" in result.output

    def test_title_prefix_and_author(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["--title-prefix", "Hel", "--author-id", "a1"]
        )

        assert result.exit_code == 0
        assert "Hello World  (Alice Smith)" in result.output
        assert "Help Wanted" not in result.output
        assert "1 of 4 documents matched" in result.output

    def test_repeated_title_prefix(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["--title-prefix", "Hel", "--title-prefix", "Meet"]
        )

        assert result.exit_code == 0
        assert "3 of 4 documents matched" in result.output

    def test_date_range_is_inclusive(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main,
            [
                "--created-from",
                "2024-01-02T09:00:00+00:00",
                "--created-to",
                "2024-01-08T09:00:00",
            ],
        )

        assert result.exit_code == 0
        assert "Help Wanted" in result.output
        assert "Quarterly Report" in result.output
        assert "2 of 4 documents matched" in result.output

    def test_contains_without_match(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--contains", "nothing-like-this"])

        assert result.exit_code == 0
        assert "0 of 4 documents matched" in result.output

    def test_invalid_timestamp_is_usage_error(
        self, runner: CliRunner
    ) -> None:
        result = runner.invoke(main, ["--created-from", "yesterday"])

        assert result.exit_code == 2
        assert "not an ISO-8601 timestamp" in result.output

    def test_find_unknown_id_exits_with_error(
        self, runner: CliRunner
    ) -> None:
        result = runner.invoke(main, ["--find", "missing"])

        assert result.exit_code == 1
        assert "Document missing not found" in result.output

    def test_find_known_id(self, runner: CliRunner) -> None:
        with patch.object(
            MemoryDocumentRepository,
            "generate_id",
            side_effect=["g1", "g2", "g3", "g4"],
        ):
            result = runner.invoke(main, ["--find", "g2"])

        assert result.exit_code == 0
        assert "g2  Help Wanted  (Bob Jones)" in result.output
        assert "Created: 2024-01-02T09:00:00+00:00" in result.output


class TestSetupLogging:
    """Tests for environment-driven logging configuration."""

    def test_log_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        setup_logging()

        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_log_level_defaults_to_info(
        self, monkeypatch, capsys
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        setup_logging()

        assert logging.getLogger().level == logging.INFO
        assert "Invalid log level: CHATTY" in capsys.readouterr().err
