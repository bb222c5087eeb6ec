"""CLI interface for btca-tools."""

import asyncio
import json
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from btca_tools import __version__
from btca_tools.config import (
    ArgumentStyle,
    BtcaToolsConfig,
    get_config_file,
    load_config,
    load_default_config,
)
from btca_tools.log import setup_logging
from btca_tools.registry import get_tool, invoke_tool, list_tools
from btca_tools.tools.base import ToolError, is_error_result
from btca_tools.tools.btca import BtcaTool
from btca_tools.tools.schemas import ResourceType

app = typer.Typer(
    name="btca-tools",
    help="Run btca operations the way an agent runtime calls them.",
    no_args_is_help=True,
)

resources_app = typer.Typer(help="Manage btca resources.")
tools_app = typer.Typer(help="Inspect the tool definitions published to agents.")

app.add_typer(resources_app, name="resources")
app.add_typer(tools_app, name="tools")

console = Console()

# Set by the main callback
_config_path: Path | None = None
_style_override: ArgumentStyle | None = None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"btca-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a btca-tools config TOML"),
    ] = None,
    style: Annotated[
        ArgumentStyle | None,
        typer.Option("--style", "-s", help="btca argument convention: nested or flat"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log commands and exit codes"),
    ] = False,
) -> None:
    """btca-tools: agent tool adapters for the btca CLI."""
    global _config_path, _style_override
    _config_path = config
    _style_override = style
    setup_logging(verbose)


def _load_settings() -> BtcaToolsConfig:
    """Load configuration from --config or the default location."""
    try:
        settings = load_config(_config_path) if _config_path else load_default_config()
    except FileNotFoundError:
        console.print(f"[red]Config file not found: {_config_path}[/red]")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        raise typer.Exit(1) from None

    if _style_override is not None:
        settings = settings.model_copy(update={"style": _style_override})
    return settings


def _get_tool() -> BtcaTool:
    """Build the btca wrapper from the active settings."""
    return BtcaTool.from_config(_load_settings())


def _run(coro: Coroutine[Any, Any, str]) -> None:
    """Run one tool coroutine and print its result.

    Error results are printed in red and exit with code 1.
    """
    try:
        result = asyncio.run(coro)
    except ToolError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if is_error_result(result):
        console.print(f"[red]{escape(result)}[/red]")
        raise typer.Exit(1)

    if result:
        console.print(result, markup=False, highlight=False)


@app.command()
def ask(
    question: Annotated[str, typer.Argument(help="Question to answer using the resource source")],
    resources: Annotated[
        list[str],
        typer.Option("--resource", "-r", help="Resource name (repeatable)"),
    ],
) -> None:
    """Ask about a configured resource's source code in natural language."""
    tool = _get_tool()
    _run(tool.ask(resources, question))


@app.command("set-model")
def set_model(
    provider: Annotated[str, typer.Argument(help="Model provider id")],
    model: Annotated[str, typer.Argument(help="Model name")],
) -> None:
    """Set the model provider and model (updates btca config)."""
    tool = _get_tool()
    _run(tool.set_model(provider, model))


@app.command()
def clear(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Clear without confirmation"),
    ] = False,
) -> None:
    """Clear all locally cached resources (destructive)."""
    if not yes:
        confirm = typer.confirm("Clear all locally cached btca resources?")
        if not confirm:
            console.print("[dim]Cancelled.[/dim]")
            raise typer.Exit(0)

    tool = _get_tool()
    _run(tool.clear_cache())


@app.command()
def call(
    name: Annotated[str, typer.Argument(help="Tool name, see `btca-tools tools list`")],
    args: Annotated[
        str,
        typer.Option("--args", "-a", help="Tool arguments as a JSON object"),
    ] = "{}",
) -> None:
    """Call a tool by name, exactly as an agent runtime would."""
    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON for --args: {e}[/red]")
        raise typer.Exit(1) from None

    if not isinstance(arguments, dict):
        console.print("[red]--args must be a JSON object[/red]")
        raise typer.Exit(1)

    tool = _get_tool()
    _run(invoke_tool(tool, name, arguments))


@app.command()
def doctor() -> None:
    """Check btca-tools setup: config file and btca on PATH."""
    settings = _load_settings()
    tool = BtcaTool.from_config(settings)
    config_file = _config_path or get_config_file()

    console.print("\n[bold]btca-tools doctor[/bold]\n")
    if config_file.exists():
        console.print(f"[green]✓[/green] Config: {config_file}")
    else:
        console.print(f"[dim]-[/dim] Config: defaults ({config_file} not found)")
    console.print(f"  Style: {settings.style.value}")
    console.print(f"  Model timeout: {settings.model_timeout}s")

    if tool.command_exists():
        console.print(f"[green]✓[/green] Command: {settings.command}")
        console.print("\n[green]All checks passed[/green]")
    else:
        console.print(f"[red]✗[/red] Command not found in PATH: {settings.command}")
        raise typer.Exit(1)


# --- Resources subcommand group ---


@resources_app.command("list")
def resources_list() -> None:
    """List configured resources."""
    tool = _get_tool()
    _run(tool.list_resources())


@resources_app.command("add")
def resources_add(
    name: Annotated[str, typer.Argument(help="Resource name")],
    resource_type: Annotated[
        ResourceType,
        typer.Option("--type", "-t", help="Resource type: git or local"),
    ] = ResourceType.GIT,
    url: Annotated[
        str | None,
        typer.Option("--url", "-u", help="Git repository URL (required for git type)"),
    ] = None,
    branch: Annotated[
        str | None,
        typer.Option("--branch", "-b", help="Git branch (default: main)"),
    ] = None,
    path: Annotated[
        str | None,
        typer.Option("--path", "-p", help="Local filesystem path (required for local type)"),
    ] = None,
    search_paths: Annotated[
        list[str] | None,
        typer.Option("--search-path", help="Subdirectory to focus search on (repeatable)"),
    ] = None,
    notes: Annotated[
        str | None,
        typer.Option("--notes", help="Hints for the AI about this resource"),
    ] = None,
) -> None:
    """Add a git or local resource (updates btca config)."""
    tool = _get_tool()
    _run(
        tool.add_resource(
            name=name,
            resource_type=resource_type,
            url=url,
            branch=branch,
            path=path,
            search_paths=search_paths,
            notes=notes,
        )
    )


@resources_app.command("remove")
def resources_remove(
    name: Annotated[str, typer.Argument(help="Resource name, see `resources list`")],
) -> None:
    """Remove a resource (updates btca config)."""
    tool = _get_tool()
    _run(tool.remove_resource(name))


# --- Tools subcommand group ---


@tools_app.command("list")
def tools_list() -> None:
    """List the tools published to agent runtimes."""
    table = Table(title="btca Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Arguments")

    for definition in list_tools():
        properties = definition.to_json_schema().get("properties", {})
        table.add_row(definition.name, definition.description, ", ".join(properties))

    console.print(table)


@tools_app.command("schema")
def tools_schema(
    name: Annotated[
        str | None,
        typer.Argument(help="Tool name (omit for all tools)"),
    ] = None,
) -> None:
    """Print tool definitions with their JSON argument schemas."""
    if name is None:
        payload: Any = [definition.to_dict() for definition in list_tools()]
    else:
        definition = get_tool(name)
        if definition is None:
            console.print(f"[red]Unknown tool: {name}[/red]")
            raise typer.Exit(1)
        payload = definition.to_dict()

    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()
