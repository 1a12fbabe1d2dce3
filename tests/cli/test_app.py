"""Tests for template_method.cli — command smoke tests via CliRunner."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from template_method.cli.app import app
from template_method.framework.client import DEMO_BANNER
from template_method.framework.logging import configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    """The app callback binds logging to the runner's streams; rebind afterwards."""
    yield
    configure_logging(level="WARNING", format="console", force=True)


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.stdout.startswith("template-method ")


class TestDemo:
    def test_default_demo(self, concrete1_lines, concrete2_lines):
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        expected = [DEMO_BANNER, *concrete1_lines, "", DEMO_BANNER, *concrete2_lines]
        assert result.stdout.splitlines() == expected

    def test_selected_variant(self, concrete2_lines):
        result = runner.invoke(app, ["demo", "--variant", "ConcreteClass2"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [DEMO_BANNER, *concrete2_lines]

    def test_unknown_variant_exits_1(self):
        result = runner.invoke(app, ["demo", "-v", "Nope"])
        assert result.exit_code == 1
        assert DEMO_BANNER not in result.stdout


class TestRun:
    def test_run_variant(self, concrete1_lines):
        result = runner.invoke(app, ["run", "ConcreteClass1"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == concrete1_lines

    def test_run_unknown(self):
        result = runner.invoke(app, ["run", "Nope"])
        assert result.exit_code == 1
        assert "AbstractClass says" not in result.stdout


class TestList:
    def test_list_plain(self):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["ConcreteClass1", "ConcreteClass2"]

    def test_list_json(self):
        result = runner.invoke(app, ["list", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == ["ConcreteClass1", "ConcreteClass2"]


class TestSteps:
    def test_steps_table(self):
        result = runner.invoke(app, ["steps"])
        assert result.exit_code == 0
        for name in ("base_operation1", "required_operations1", "hook1", "hook2"):
            assert name in result.stdout


class TestNoArgs:
    def test_shows_help(self):
        result = runner.invoke(app, [])
        assert "demo" in result.output
