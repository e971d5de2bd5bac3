"""Test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from devports.actions import ProcessController
from devports.classifier import classify
from devports.containers import ContainerInfo
from devports.discovery import PortRecord
from devports.errors import ActionError
from devports.preferences import MemoryPreferenceStore
from devports.system import SystemScanner


class FakeScanner(SystemScanner):
    """Scanner returning canned command output."""

    def __init__(
        self,
        listing: str | None = "",
        command_lines: dict[int, str] | None = None,
        cwds: dict[int, str] | None = None,
        containers: str | None = None,
    ) -> None:
        self.listing = listing
        self.command_lines = command_lines or {}
        self.cwds = cwds or {}
        self.containers = containers
        self.calls: list[str] = []

    def listing_output(self) -> str | None:
        self.calls.append("listing")
        return self.listing

    def command_line(self, pid: int) -> str | None:
        self.calls.append(f"ps {pid}")
        return self.command_lines.get(pid)

    def working_directory(self, pid: int) -> str | None:
        self.calls.append(f"cwd {pid}")
        path = self.cwds.get(pid)
        if path is None:
            return None
        return f"p{pid}\nfcwd\nn{path}\n"

    def container_table(self) -> str | None:
        self.calls.append("docker")
        return self.containers


class RecordingController(ProcessController):
    """Controller that records commands instead of running them."""

    def __init__(self, kill_ok: bool = True, spawn_error: bool = False) -> None:
        self.kill_ok = kill_ok
        self.spawn_error = spawn_error
        self.killed: list[int] = []
        self.spawned: list[tuple[str, Path]] = []
        self.docker: list[list[str]] = []
        self.interactive: list[list[str]] = []

    def kill(self, pid: int) -> bool:
        self.killed.append(pid)
        return self.kill_ok

    def spawn_detached(self, command: str, cwd: Path) -> None:
        if self.spawn_error:
            raise ActionError(f"Could not start '{command}'")
        self.spawned.append((command, cwd))

    def run_docker(self, args: list[str]) -> bool:
        self.docker.append(args)
        return True

    def run_interactive(self, args: list[str]) -> int:
        self.interactive.append(args)
        return 0


def make_record(
    port: int = 5173,
    pid: int = 100,
    command: str = "node /work/app/node_modules/.bin/vite",
    cwd: str | None = "/work/app",
    container: ContainerInfo | None = None,
) -> PortRecord:
    """Build a PortRecord classified from its command."""
    return PortRecord(
        port=port,
        pid=pid,
        user="dev",
        command=command,
        display_name="app",
        project_path=cwd,
        working_directory=cwd,
        flags=classify(command),
        container=container,
    )


@pytest.fixture
def temp_dir():
    """Temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_store():
    """In-memory preference store."""
    return MemoryPreferenceStore()


@pytest.fixture
def controller():
    """Controller that records instead of executing."""
    return RecordingController()
