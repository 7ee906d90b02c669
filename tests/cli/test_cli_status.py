"""Tests for ``rtgate status``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from click.testing import CliRunner

from rtgate.cli import main
from tests.fakes import write_collection, write_config

if TYPE_CHECKING:
    from pathlib import Path


class TestStatusCommand:
    def test_old_runtime_active_resource(self, tmp_path: Path) -> None:
        write_collection(tmp_path / "install", {"Neuroanatomy": True})
        f = write_config(tmp_path)

        runner = CliRunner()
        result = runner.invoke(main, ["status", str(f)])

        assert result.exit_code == 0
        assert "too old" in result.output
        assert "Neuroanatomy is active" in result.output

    def test_json(self, tmp_path: Path) -> None:
        write_collection(tmp_path / "install", {"Neuroanatomy": False})
        f = write_config(tmp_path, version="21.0.2")

        runner = CliRunner()
        result = runner.invoke(main, ["status", str(f), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["active"] is False
        assert data["compliant"] is True
        assert data["current_version"] == 21

    def test_undetermined_state_is_reported_active(self, tmp_path: Path) -> None:
        f = write_config(tmp_path)

        runner = CliRunner()
        result = runner.invoke(main, ["status", str(f), "--json"])

        data = json.loads(result.stdout)
        assert data["active"] is True
        assert data["determined"] is False

    def test_location_override(self, tmp_path: Path) -> None:
        other = tmp_path / "other"
        write_collection(other, {"Neuroanatomy": False})
        f = write_config(tmp_path)

        runner = CliRunner()
        result = runner.invoke(main, ["status", str(f), "--location", str(other), "--json"])

        assert json.loads(result.stdout)["active"] is False

    def test_bad_config(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("product: [unclosed")

        runner = CliRunner()
        result = runner.invoke(main, ["status", str(f)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
