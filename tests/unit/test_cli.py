"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shorts_planner.cli import EXIT_INVALID, EXIT_OK, build_parser, main, payload_from_args


@pytest.fixture
def env_file(tmp_path: Path) -> str:
    path = tmp_path / "test.env"
    path.write_text("LOG_LEVEL=WARNING\n")
    return str(path)


class TestPayloadFromArgs:
    """Tests for turning flags into a request body."""

    def test_only_required(self) -> None:
        args = build_parser().parse_args(["plan", "--niche", "finance", "--tone", "calm"])
        assert payload_from_args(args) == {"niche": "finance", "tone": "calm"}

    def test_all_options(self) -> None:
        args = build_parser().parse_args([
            "plan",
            "--niche", "fitness",
            "--tone", "hype",
            "--topic", "Pushups",
            "--duration", "30",
            "--cta", "Follow along",
            "--no-captions",
            "--no-shot-list",
        ])
        assert payload_from_args(args) == {
            "niche": "fitness",
            "tone": "hype",
            "topic": "Pushups",
            "durationSeconds": 30,
            "callToAction": "Follow along",
            "includeCaptions": False,
            "includeShotList": False,
        }


class TestPlanCommand:
    """Tests for `shorts-planner plan`."""

    def test_json_output(self, env_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["plan", "--niche", "finance", "--tone", "calm", "--json", "--env-file", env_file])

        assert code == EXIT_OK
        body = json.loads(capsys.readouterr().out)
        assert body["usingAI"] is False
        assert body["plan"]["conceptTitle"] == "Trending tip in finance (finance calm)"

    def test_dashboard_output(self, env_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["plan", "--niche", "finance", "--tone", "calm", "--env-file", env_file])

        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "Production Plan" in out
        assert "Template fallback" in out

    def test_invalid_brief(self, env_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([
            "plan", "--niche", "finance", "--tone", "calm", "--duration", "5", "--env-file", env_file,
        ])

        assert code == EXIT_INVALID
        assert "durationSeconds" in capsys.readouterr().out


class TestSetupCommand:
    """Tests for `shorts-planner setup`."""

    def test_reports_missing_key(self, env_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["setup", "--env-file", env_file]) == EXIT_OK
        assert "Not set" in capsys.readouterr().out


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == EXIT_OK
    assert "shorts-planner" in capsys.readouterr().out
