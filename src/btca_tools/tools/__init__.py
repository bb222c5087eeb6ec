"""Tool abstractions for invoking the btca CLI.

This module provides the infrastructure for wrapping btca's subcommands.
It includes:

- Result types and error formatting (CommandResult, normalize_result)
- Generic CLI invoker with an optional timeout race (CLITool)
- Argument conventions for the nested and flat btca layouts
- The btca wrapper itself (BtcaTool)

Example:
    from btca_tools.tools import BtcaTool

    btca = BtcaTool(style="nested")
    answer = await btca.ask(["svelte"], "Where is $state defined?")
    print(await btca.list_resources())
"""

from .base import (
    TIMEOUT_EXIT_CODE,
    CommandResult,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
    format_error,
    is_error_result,
    normalize_result,
)
from .btca import BtcaTool, create_btca_tool
from .cli import CLITool
from .conventions import (
    ArgumentConvention,
    FlatConvention,
    NestedConvention,
    get_convention,
)
from .schemas import (
    AddResourceArgs,
    AskArgs,
    NoArgs,
    RemoveResourceArgs,
    ResourceType,
    SetModelArgs,
)

__all__ = [
    # Base types
    "CommandResult",
    "TIMEOUT_EXIT_CODE",
    "format_error",
    "normalize_result",
    "is_error_result",
    # Exceptions
    "ToolError",
    "ToolNotFoundError",
    "ToolExecutionError",
    # Invoker
    "CLITool",
    # Conventions
    "ArgumentConvention",
    "NestedConvention",
    "FlatConvention",
    "get_convention",
    # btca integration
    "BtcaTool",
    "create_btca_tool",
    # Argument schemas
    "AskArgs",
    "SetModelArgs",
    "NoArgs",
    "AddResourceArgs",
    "RemoveResourceArgs",
    "ResourceType",
]
