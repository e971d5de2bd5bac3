"""System command runner for devports.

Every read of system state goes through SystemScanner so that the rest of
the engine can be exercised with canned output. A command that is missing,
fails, or exits non-zero yields None; callers decide how to degrade.
"""

import subprocess

from .config import tool_env
from .console import debug


class SystemScanner:
    """Run the external commands discovery depends on."""

    def listing_output(self) -> str | None:
        """Get field-tagged output for all TCP listeners.

        Returns:
            Raw ``lsof -F pcLn`` output, or None if lsof is unavailable
        """
        return self._run(
            ["lsof", "-iTCP", "-sTCP:LISTEN", "-P", "-n", "-F", "pcLn"],
            # lsof exits 1 when nothing matches
            accept_codes=(0, 1),
        )

    def command_line(self, pid: int) -> str | None:
        """Get the full argument vector of a process as one string.

        Args:
            pid: Process id

        Returns:
            Command line, or None if the process is gone
        """
        return self._run(["ps", "-p", str(pid), "-o", "args="])

    def working_directory(self, pid: int) -> str | None:
        """Get field-tagged lsof output for a process's cwd descriptor.

        Args:
            pid: Process id

        Returns:
            Raw ``lsof -Fn`` output, or None on failure
        """
        return self._run(["lsof", "-a", "-p", str(pid), "-d", "cwd", "-Fn"])

    def container_table(self) -> str | None:
        """Get running containers as ``name<TAB>ports<TAB>image`` rows.

        Returns:
            Raw ``docker ps`` output, or None if docker is not available
        """
        return self._run(
            ["docker", "ps", "--format", "{{.Names}}\t{{.Ports}}\t{{.Image}}"]
        )

    def _run(self, args: list[str], accept_codes: tuple[int, ...] = (0,)) -> str | None:
        """Run a command and return its stdout.

        Args:
            args: Command and arguments
            accept_codes: Exit codes treated as success

        Returns:
            Captured stdout, or None on failure
        """
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                encoding="utf-8",
                # Process names and argv may hold arbitrary bytes
                errors="replace",
                env=tool_env(),
            )
        except (subprocess.SubprocessError, FileNotFoundError, OSError) as e:
            debug(f"{args[0]} unavailable: {e}")
            return None

        if result.returncode not in accept_codes:
            debug(f"{' '.join(args)} exited with {result.returncode}")
            return None
        return result.stdout
