"""Argument schemas for the btca tools."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ResourceType(str, Enum):
    """Kinds of resource btca can index."""

    GIT = "git"
    LOCAL = "local"


class AskArgs(BaseModel):
    """Arguments for the ``ask`` tool."""

    resources: list[str] = Field(
        min_length=1,
        description="BTCA resource names (configured repos or packages)",
    )
    question: str = Field(description="Question to answer using the resource source")


class SetModelArgs(BaseModel):
    """Arguments for the ``config_model`` tool."""

    provider: str = Field(description="Model provider id")
    model: str = Field(description="Model name")


class NoArgs(BaseModel):
    """Tools that take no arguments."""


class AddResourceArgs(BaseModel):
    """Arguments for the ``config_resources_add`` tool."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="BTCA resource name")
    type: ResourceType = Field(description="Resource type: git or local")
    url: str | None = Field(
        default=None, description="Git repository URL (required for git type)"
    )
    branch: str | None = Field(default=None, description="Git branch (default: main)")
    path: str | None = Field(
        default=None, description="Local filesystem path (required for local type)"
    )
    search_paths: list[str] | None = Field(
        default=None,
        alias="searchPaths",
        description="Subdirectories to focus search on",
    )
    notes: str | None = Field(
        default=None, description="Special notes/hints for the AI about this resource"
    )


class RemoveResourceArgs(BaseModel):
    """Arguments for the ``config_resources_remove`` tool."""

    name: str = Field(
        description="BTCA resource name, use `config_resources_list` to see names"
    )
