"""Base types for invoking the btca CLI and normalizing its output."""

from dataclasses import dataclass

# Conventional "command timed out" exit status (coreutils `timeout`)
TIMEOUT_EXIT_CODE = 124

UNKNOWN_ERROR = "Unknown error"


@dataclass
class CommandResult:
    """Result from running a command on the external program.

    Attributes:
        stdout: Standard output from the command
        stderr: Standard error output
        exit_code: Process exit code (0 = success)
        command: The full command that was executed
        duration_ms: How long we waited for the command in milliseconds
        timed_out: True if the process was still running when the deadline passed
    """

    stdout: str
    stderr: str
    exit_code: int
    command: str
    duration_ms: float | None = None
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """Whether the command succeeded (exit code 0)."""
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Trimmed standard output."""
        return self.stdout.strip()

    @property
    def error_output(self) -> str:
        """Trimmed standard error."""
        return self.stderr.strip()


def format_error(result: CommandResult) -> str:
    """Format a failed command as `Error (exit <status>): <message>`.

    The message prefers stderr, then stdout, then a fixed placeholder.
    """
    message = result.error_output or result.output or UNKNOWN_ERROR
    return f"Error (exit {result.exit_code}): {message}"


def normalize_result(result: CommandResult) -> str:
    """Reduce a command result to the single string handed back to the caller.

    Args:
        result: Outcome of one invocation

    Returns:
        Trimmed stdout on exit 0, otherwise the formatted error string
    """
    if result.success:
        return result.output
    return format_error(result)


def is_error_result(text: str) -> bool:
    """Check whether a tool result string reports a failure.

    Only the exact prefixes this package produces count; an answer that
    merely begins with "Errors ..." is not a failure.
    """
    return text.startswith(("Error (exit ", "Error: "))


class ToolError(Exception):
    """Base exception for tool-related errors."""

    def __init__(self, message: str, tool_name: str | None = None) -> None:
        self.tool_name = tool_name
        super().__init__(message)


class ToolNotFoundError(ToolError):
    """Raised when the tool executable cannot be found."""

    pass


class ToolExecutionError(ToolError):
    """Raised when the tool process cannot be started."""

    pass
