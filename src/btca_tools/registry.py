"""Tool registry: definitions the agent runtime can discover and call."""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from btca_tools.tools.btca import BtcaTool
from btca_tools.tools.schemas import (
    AddResourceArgs,
    AskArgs,
    NoArgs,
    RemoveResourceArgs,
    SetModelArgs,
)

# Handlers receive the tool and already-validated arguments
ToolHandler = Callable[[BtcaTool, Any], Awaitable[str]]


@dataclass
class ToolDefinition:
    """A single callable action exposed to the agent runtime.

    Attributes:
        name: Tool name as the runtime sees it
        description: One-line description shown to the model
        args_model: pydantic model validating the arguments
        handler: Coroutine invoking btca with validated arguments
    """

    name: str
    description: str
    args_model: type[BaseModel]
    handler: ToolHandler

    def to_json_schema(self) -> dict:
        """JSON Schema for this tool's arguments."""
        return self.args_model.model_json_schema(by_alias=True)

    def to_dict(self) -> dict:
        """Name, description and parameter schema in one mapping."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.to_json_schema(),
        }


async def _ask(tool: BtcaTool, args: AskArgs) -> str:
    return await tool.ask(args.resources, args.question)


async def _config_model(tool: BtcaTool, args: SetModelArgs) -> str:
    return await tool.set_model(args.provider, args.model)


async def _config_resources_list(tool: BtcaTool, args: NoArgs) -> str:
    return await tool.list_resources()


async def _config_resources_add(tool: BtcaTool, args: AddResourceArgs) -> str:
    return await tool.add_resource(
        name=args.name,
        resource_type=args.type,
        url=args.url,
        branch=args.branch,
        path=args.path,
        search_paths=args.search_paths,
        notes=args.notes,
    )


async def _config_resources_remove(tool: BtcaTool, args: RemoveResourceArgs) -> str:
    return await tool.remove_resource(args.name)


async def _clear(tool: BtcaTool, args: NoArgs) -> str:
    return await tool.clear_cache()


_TOOLS: dict[str, ToolDefinition] = {
    definition.name: definition
    for definition in (
        ToolDefinition(
            name="ask",
            description="BTCA: ask about a configured resource's source code in natural language",
            args_model=AskArgs,
            handler=_ask,
        ),
        ToolDefinition(
            name="config_model",
            description="BTCA: set the model provider and model (updates BTCA config)",
            args_model=SetModelArgs,
            handler=_config_model,
        ),
        ToolDefinition(
            name="config_resources_list",
            description="BTCA: list configured resources",
            args_model=NoArgs,
            handler=_config_resources_list,
        ),
        ToolDefinition(
            name="config_resources_add",
            description="BTCA: add a resource (updates BTCA config)",
            args_model=AddResourceArgs,
            handler=_config_resources_add,
        ),
        ToolDefinition(
            name="config_resources_remove",
            description="BTCA: remove a resource (updates BTCA config)",
            args_model=RemoveResourceArgs,
            handler=_config_resources_remove,
        ),
        ToolDefinition(
            name="clear",
            description="BTCA: clear all locally cached resources (destructive)",
            args_model=NoArgs,
            handler=_clear,
        ),
    )
}


def list_tools() -> list[ToolDefinition]:
    """List all tool definitions in registration order."""
    return list(_TOOLS.values())


def get_tool(name: str) -> ToolDefinition | None:
    """Look up a tool definition by name.

    Args:
        name: Tool name (e.g. "config_resources_add")

    Returns:
        ToolDefinition if found, None otherwise
    """
    return _TOOLS.get(name)


def _format_validation_error(name: str, error: ValidationError) -> str:
    """Flatten a pydantic error into one readable line."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return f"Error: invalid arguments for {name}: {'; '.join(problems)}"


async def invoke_tool(
    tool: BtcaTool,
    name: str,
    arguments: Mapping[str, Any] | None = None,
) -> str:
    """Validate raw arguments and call the named tool.

    Unknown names, non-object arguments and invalid arguments are reported
    as ``Error: ...`` strings; btca is not invoked for them.

    Args:
        tool: The btca wrapper to call through
        name: Tool name
        arguments: Raw argument mapping from the runtime

    Returns:
        The tool's string result
    """
    definition = get_tool(name)
    if definition is None:
        return f"Error: unknown tool '{name}'"

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        return f"Error: invalid arguments for {name}: arguments must be an object"

    try:
        args = definition.args_model.model_validate(dict(arguments))
    except ValidationError as e:
        return _format_validation_error(name, e)

    return await definition.handler(tool, args)
