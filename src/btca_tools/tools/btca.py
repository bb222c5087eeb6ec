"""btca CLI integration.

Exposes the btca subcommands (question answering, model selection and
resource management) as coroutines that always resolve to a single string:
the command's trimmed output, or an ``Error ...`` message.
"""

from pathlib import Path

from btca_tools.config import (
    DEFAULT_COMMAND,
    DEFAULT_MODEL_TIMEOUT,
    ArgumentStyle,
    BtcaToolsConfig,
)

from .base import TIMEOUT_EXIT_CODE, format_error, normalize_result
from .cli import CLITool
from .conventions import ArgumentConvention, get_convention
from .schemas import ResourceType


class BtcaTool(CLITool):
    """Specialized wrapper for the btca CLI.

    Example:
        tool = BtcaTool(style="flat")
        answer = await tool.ask(["svelte"], "How do runes work?")
        await tool.add_resource("docs", "git", url="https://github.com/org/docs")
    """

    def __init__(
        self,
        command: str = DEFAULT_COMMAND,
        style: ArgumentStyle | str = ArgumentStyle.NESTED,
        model_timeout: float = DEFAULT_MODEL_TIMEOUT,
        working_dir: Path | str | None = None,
        env: dict[str, str] | None = None,
    ) -> None:
        """Initialize the btca tool wrapper.

        Args:
            command: CLI command to use (default: "btca")
            style: Argument convention of the installed btca
            model_timeout: Seconds to wait for `set model` before assuming success
            working_dir: Directory to run commands from
            env: Additional environment variables for commands
        """
        super().__init__(
            name="btca",
            command=command,
            working_dir=working_dir,
            env=env,
        )
        self._convention = get_convention(style)
        self._model_timeout = model_timeout

    @classmethod
    def from_config(cls, config: BtcaToolsConfig) -> "BtcaTool":
        """Build a tool from loaded configuration."""
        return cls(
            command=config.command,
            style=config.style,
            model_timeout=config.model_timeout,
            working_dir=config.working_dir,
            env=config.env or None,
        )

    @property
    def convention(self) -> ArgumentConvention:
        """The active argument convention."""
        return self._convention

    @property
    def model_timeout(self) -> float:
        """Seconds `set_model` waits before assuming success."""
        return self._model_timeout

    async def run(self, args: list[str]) -> str:
        """Run btca and normalize the outcome to a string."""
        result = await self.run_command(args)
        return normalize_result(result)

    async def ask(self, resources: list[str], question: str) -> str:
        """Ask a question about the source code of one or more resources.

        Args:
            resources: Resource names to query (at least one)
            question: Natural language question

        Returns:
            btca's answer, or an error string
        """
        if not resources:
            return "Error: at least one resource is required"
        return await self.run(self._convention.ask(resources, question))

    async def set_model(self, provider: str, model: str) -> str:
        """Set the model provider and model in btca's config.

        btca writes the config and then keeps running, so completion is raced
        against ``model_timeout``. Reaching the deadline, or exit code 124,
        counts as success.

        Args:
            provider: Model provider id
            model: Model name

        Returns:
            btca's output or a confirmation, or an error string
        """
        confirmation = f"Model updated: {provider}/{model}"
        result = await self.run_command(
            self._convention.set_model(provider, model),
            timeout=self._model_timeout,
        )

        if result.timed_out:
            # Update is assumed written; btca is still running
            return confirmation

        if result.exit_code not in (0, TIMEOUT_EXIT_CODE):
            return format_error(result)

        return result.output or confirmation

    async def list_resources(self) -> str:
        """List configured resources."""
        return await self.run(self._convention.list_resources())

    async def add_resource(
        self,
        name: str,
        resource_type: ResourceType | str,
        url: str | None = None,
        branch: str | None = None,
        path: str | None = None,
        search_paths: list[str] | None = None,
        notes: str | None = None,
    ) -> str:
        """Add a git or local resource to btca's config.

        Required fields are checked before btca is invoked: git resources need
        a url and local resources need a path.

        Args:
            name: Resource name
            resource_type: "git" or "local"
            url: Git repository URL (git only)
            branch: Git branch (git only)
            path: Local filesystem path (local only)
            search_paths: Subdirectories to focus search on
            notes: Hints for the model about this resource

        Returns:
            btca's output, or a validation/error string
        """
        try:
            kind = ResourceType(resource_type)
        except ValueError:
            return f"Error: unknown resource type '{resource_type}' (expected git or local)"

        if kind == ResourceType.GIT:
            if not url:
                return "Error: url is required for git type resources"
            source = url
        else:
            if not path:
                return "Error: path is required for local type resources"
            source = path

        args = self._convention.add_resource(
            name=name,
            resource_type=kind.value,
            source=source,
            branch=branch,
            search_paths=search_paths,
            notes=notes,
        )
        return await self.run(args)

    async def remove_resource(self, name: str) -> str:
        """Remove a resource from btca's config."""
        return await self.run(self._convention.remove_resource(name))

    async def clear_cache(self) -> str:
        """Clear all locally cached resources (destructive)."""
        return await self.run(self._convention.clear())


def create_btca_tool(config: BtcaToolsConfig | None = None) -> BtcaTool:
    """Factory function to create a btca tool wrapper.

    Args:
        config: Settings to use; defaults if None

    Returns:
        Configured BtcaTool instance
    """
    return BtcaTool.from_config(config or BtcaToolsConfig())
