"""Shared pytest fixtures and a fake subprocess for testing."""

import asyncio
from typing import Any

import pytest

import btca_tools.tools.cli as cli_module
from btca_tools.config import BtcaToolsConfig


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process.

    Returns canned output from communicate(). With hang=True,
    communicate() blocks until release() is called, like a command
    that never exits on its own.
    """

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        returncode: int = 0,
        hang: bool = False,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self._final_returncode = returncode
        self._hang = hang
        self._released = asyncio.Event()
        self.returncode: int | None = None
        self.killed = False

    async def communicate(self) -> tuple[bytes, bytes]:
        if self._hang:
            await self._released.wait()
        self.returncode = self._final_returncode
        return self._stdout, self._stderr

    def release(self) -> None:
        """Let a hanging communicate() finish."""
        self._released.set()

    def kill(self) -> None:
        self.killed = True


class FakeSpawner:
    """Replacement for asyncio.create_subprocess_exec that records calls."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, Any]] = []
        self.processes: list[FakeProcess] = []
        self._next: dict[str, Any] = {}
        self._error: OSError | None = None

    def respond(
        self,
        stdout: bytes | str = b"",
        stderr: bytes | str = b"",
        returncode: int = 0,
        hang: bool = False,
    ) -> None:
        """Set what the next spawned process will produce."""
        if isinstance(stdout, str):
            stdout = stdout.encode()
        if isinstance(stderr, str):
            stderr = stderr.encode()
        self._next = {
            "stdout": stdout,
            "stderr": stderr,
            "returncode": returncode,
            "hang": hang,
        }

    def fail_with(self, error: OSError) -> None:
        """Make the next spawn raise, like a missing binary."""
        self._error = error

    @property
    def spawned(self) -> bool:
        return bool(self.calls)

    @property
    def last_args(self) -> list[str]:
        """Arguments of the last call, without the command itself."""
        return self.calls[-1][1:]

    async def __call__(self, *cmd: str, **kwargs: Any) -> FakeProcess:
        self.calls.append(list(cmd))
        self.kwargs.append(kwargs)
        if self._error is not None:
            raise self._error
        process = FakeProcess(**self._next)
        self.processes.append(process)
        return process


@pytest.fixture
def spawner(monkeypatch: pytest.MonkeyPatch) -> FakeSpawner:
    """Patch subprocess creation with a recording fake."""
    fake = FakeSpawner()
    monkeypatch.setattr(cli_module.asyncio, "create_subprocess_exec", fake)
    return fake


@pytest.fixture
def default_config() -> BtcaToolsConfig:
    """Provide default settings."""
    return BtcaToolsConfig()


@pytest.fixture
def config_file(tmp_path):
    """Write a config TOML and return its path."""
    path = tmp_path / "config.toml"
    path.write_text(
        """
[btca]
command = "/opt/btca/bin/btca"
style = "flat"
model_timeout = 2.5

[btca.env]
BTCA_HOME = "/tmp/btca"
"""
    )
    return path
