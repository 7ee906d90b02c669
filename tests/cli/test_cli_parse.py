"""Tests for ``rtgate parse``."""

from __future__ import annotations

import json

from click.testing import CliRunner

from rtgate.cli import main


class TestParseCommand:
    def test_table(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["parse", "1.8.0_392", "21.0.2"])

        assert result.exit_code == 0
        assert "1.8.0_392" in result.output
        assert "21" in result.output

    def test_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["parse", "1.8.0_392", "22-ea", "garbage", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"1.8.0_392": 8, "22-ea": 22, "garbage": 0}

    def test_requires_argument(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["parse"])

        assert result.exit_code != 0
