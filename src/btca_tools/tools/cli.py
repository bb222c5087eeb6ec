"""CLI tool wrapper for invoking the external command-line program."""

import asyncio
import logging
import os
import shutil
import time
from pathlib import Path

from .base import (
    TIMEOUT_EXIT_CODE,
    CommandResult,
    ToolExecutionError,
    ToolNotFoundError,
)

logger = logging.getLogger(__name__)

# Waits abandoned after a deadline; referenced here until the child exits
_abandoned_waits: set[asyncio.Future] = set()


def _forget_wait(task: asyncio.Future) -> None:
    """Drop an abandoned wait once its process finally exits."""
    _abandoned_waits.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Abandoned process wait failed: %s", exc)


class CLITool:
    """Wrapper for an external CLI program.

    Executes commands via subprocess and captures output. A non-zero exit
    status is reported in the returned CommandResult, never raised.
    """

    def __init__(
        self,
        name: str,
        command: str,
        working_dir: Path | str | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        """Initialize the CLI tool wrapper.

        Args:
            name: Display name for the tool
            command: Base command to invoke (e.g., "btca")
            working_dir: Directory to run commands from
            env: Additional environment variables for commands
        """
        self._name = name
        self._command = command
        self._working_dir = Path(working_dir) if working_dir else None
        self._env = env

    @property
    def name(self) -> str:
        """Display name for this tool."""
        return self._name

    @property
    def command(self) -> str:
        """Base command to invoke this tool."""
        return self._command

    @property
    def working_dir(self) -> Path | None:
        """Working directory for command execution."""
        return self._working_dir

    async def run_command(
        self,
        args: list[str],
        timeout: float | None = None,
    ) -> CommandResult:
        """Run a command with the given arguments.

        When a timeout is given, process completion is raced against it. If
        the deadline wins, the wait is abandoned (the child is left running)
        and a result with ``timed_out=True`` and exit code 124 is returned.

        Args:
            args: Arguments to pass to the tool command
            timeout: Optional maximum wait in seconds

        Returns:
            CommandResult with stdout, stderr, and exit code

        Raises:
            ToolNotFoundError: If the command is not found
            ToolExecutionError: If the process cannot be started
        """
        cmd = [self._command, *args]
        cmd_str = " ".join(cmd)
        logger.debug("Running: %s", cmd_str)

        start_time = time.perf_counter()

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self._working_dir,
                env=self._get_env() if self._env else None,
            )
        except FileNotFoundError:
            raise ToolNotFoundError(
                f"Command '{self._command}' not found. Is it installed and in PATH?",
                tool_name=self._name,
            ) from None
        except OSError as e:
            raise ToolExecutionError(
                f"Failed to execute command: {e}",
                tool_name=self._name,
            ) from e

        if timeout is None:
            stdout_bytes, stderr_bytes = await process.communicate()
        else:
            waiter = asyncio.ensure_future(process.communicate())
            done, _ = await asyncio.wait({waiter}, timeout=timeout)
            if not done:
                _abandoned_waits.add(waiter)
                waiter.add_done_callback(_forget_wait)
                logger.info(
                    "Stopped waiting for '%s' after %ss; process left running",
                    cmd_str,
                    timeout,
                )
                return CommandResult(
                    stdout="",
                    stderr="",
                    exit_code=TIMEOUT_EXIT_CODE,
                    command=cmd_str,
                    duration_ms=(time.perf_counter() - start_time) * 1000,
                    timed_out=True,
                )
            stdout_bytes, stderr_bytes = waiter.result()

        duration_ms = (time.perf_counter() - start_time) * 1000
        exit_code = process.returncode or 0
        if exit_code != 0:
            logger.debug("'%s' exited with code %d", cmd_str, exit_code)

        return CommandResult(
            stdout=stdout_bytes.decode("utf-8", errors="replace"),
            stderr=stderr_bytes.decode("utf-8", errors="replace"),
            exit_code=exit_code,
            command=cmd_str,
            duration_ms=duration_ms,
        )

    def command_exists(self) -> bool:
        """Check if the command exists in PATH."""
        return shutil.which(self._command) is not None

    def _get_env(self) -> dict[str, str]:
        """Get environment variables for subprocess.

        Merges custom env vars with current environment.
        """
        env = os.environ.copy()
        if self._env:
            env.update(self._env)
        return env
