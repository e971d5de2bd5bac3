"""Tests for CLI commands."""

import importlib
from functools import partial

import pytest
from conftest import RecordingController, make_record
from typer.testing import CliRunner

from devports import __version__
from devports.cli import app

runner = CliRunner()

RECORDS = [
    make_record(port=5173, pid=200),
    make_record(port=8000, pid=300, command="uvicorn main:app --port 8000", cwd="/work/api"),
    make_record(port=22, pid=1, command="/usr/sbin/sshd -D", cwd=None),
]


def command_module(name):
    return importlib.import_module(f"devports.commands.{name}")


@pytest.fixture(autouse=True)
def isolated(monkeypatch, temp_dir):
    """Point the preference store at a temp dir and fake discovery."""
    monkeypatch.setenv("DEVPORTS_DATA_DIR", str(temp_dir))
    for name in ("common", "list", "hide"):
        monkeypatch.setattr(command_module(name), "discover_ports", lambda: list(RECORDS))
    monkeypatch.setattr(
        command_module("list"), "fetch_page_title", lambda port: None
    )


def test_version():
    """Test --version output."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_list_groups_ports():
    """Test list shows dev servers and other listeners."""
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Development Servers" in result.stdout
    assert "System & Apps" in result.stdout
    assert ":5173" in result.stdout
    assert ":22" in result.stdout


def test_hide_excludes_from_list():
    """Test hidden ports drop out of list until unhidden."""
    assert runner.invoke(app, ["hide", "22"]).exit_code == 0

    result = runner.invoke(app, ["list"])
    assert ":22 " not in result.stdout
    assert "1 service hidden" in result.stdout

    result = runner.invoke(app, ["list", "--all"])
    assert ":22" in result.stdout

    result = runner.invoke(app, ["unhide", "22"])
    assert "Port 22 unhidden" in result.stdout
    assert "hidden" not in runner.invoke(app, ["list"]).stdout


def test_hide_twice():
    """Test hiding an already hidden port."""
    runner.invoke(app, ["hide", "8000"])
    result = runner.invoke(app, ["hide", "8000"])
    assert "already hidden" in result.stdout


def test_hidden_lists_stored_ports():
    """Test hidden shows listening and free hidden ports."""
    runner.invoke(app, ["hide", "8000"])
    runner.invoke(app, ["hide", "9999"])

    result = runner.invoke(app, ["hidden"])
    assert result.exit_code == 0
    assert ":8000" in result.stdout
    assert ":9999" in result.stdout


def test_kill_missing_port():
    """Test acting on a port nobody listens on fails."""
    result = runner.invoke(app, ["kill", "4444", "--force"])
    assert result.exit_code == 1


def test_kill_force(monkeypatch):
    """Test kill without confirmation."""
    controller = RecordingController()
    monkeypatch.setattr(command_module("kill"), "get_controller", lambda: controller)

    result = runner.invoke(app, ["kill", "5173", "--force"])

    assert result.exit_code == 0
    assert controller.killed == [200]


def test_restart_invalid_port(monkeypatch):
    """Test a bad target port exits before anything is killed."""
    controller = RecordingController()
    monkeypatch.setattr(command_module("restart"), "get_controller", lambda: controller)

    result = runner.invoke(app, ["restart", "8000", "--to", "abc"])

    assert result.exit_code == 1
    assert controller.killed == []
    assert controller.spawned == []


def test_restart_prints_launch_command(monkeypatch):
    """Test a restart shows the issued command without markup tags."""
    controller = RecordingController()
    module = command_module("restart")
    monkeypatch.setattr(module, "get_controller", lambda: controller)
    monkeypatch.setattr(
        module, "RestartWorkflow", partial(module.RestartWorkflow, sleep=lambda seconds: None)
    )

    result = runner.invoke(app, ["restart", "8000"])

    assert result.exit_code == 0
    assert controller.killed == [300]
    assert "uvicorn main:app --port 8001 --reload" in result.stdout
    assert "(in /work/api)" in result.stdout
    assert "[dim]" not in result.stdout


def test_restart_not_offered(monkeypatch):
    """Test restart of a non-framework process is refused."""
    controller = RecordingController()
    monkeypatch.setattr(command_module("restart"), "get_controller", lambda: controller)

    result = runner.invoke(app, ["restart", "22"])

    assert result.exit_code == 1
    assert controller.killed == []
