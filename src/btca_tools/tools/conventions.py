"""Argument conventions for the btca CLI.

btca has shipped two command layouts for the same operations. Older
releases nest resource management under ``config``::

    btca config resources add -n docs -t git -u https://... -b main

newer releases use flat subcommands with positional sources::

    btca add https://... -n docs -t git -b main

Each convention turns a structured request into the argument vector for
one layout. The invoker itself is shared.
"""

from abc import ABC, abstractmethod

from btca_tools.config import ArgumentStyle


class ArgumentConvention(ABC):
    """Builds btca argument vectors for each supported operation."""

    style: ArgumentStyle

    def ask(self, resources: list[str], question: str) -> list[str]:
        """Arguments for a question over one or more resources."""
        args = ["ask"]
        for resource in resources:
            args.extend(["-r", resource])
        args.extend(["-q", question])
        return args

    @abstractmethod
    def set_model(self, provider: str, model: str) -> list[str]:
        """Arguments to select the provider and model."""
        ...

    @abstractmethod
    def list_resources(self) -> list[str]:
        """Arguments to list configured resources."""
        ...

    @abstractmethod
    def add_resource(
        self,
        name: str,
        resource_type: str,
        source: str,
        branch: str | None = None,
        search_paths: list[str] | None = None,
        notes: str | None = None,
    ) -> list[str]:
        """Arguments to add a resource.

        Args:
            name: Resource name
            resource_type: "git" or "local"
            source: Repository URL for git, filesystem path for local
            branch: Git branch (ignored for local resources)
            search_paths: Subdirectories to focus search on
            notes: Hints for the model about this resource
        """
        ...

    @abstractmethod
    def remove_resource(self, name: str) -> list[str]:
        """Arguments to remove a resource."""
        ...

    def clear(self) -> list[str]:
        """Arguments to clear all locally cached resources."""
        return ["clear"]


class NestedConvention(ArgumentConvention):
    """``btca config ...`` layout."""

    style = ArgumentStyle.NESTED

    def set_model(self, provider: str, model: str) -> list[str]:
        return ["config", "model", "--provider", provider, "--model", model]

    def list_resources(self) -> list[str]:
        return ["config", "resources", "list"]

    def add_resource(
        self,
        name: str,
        resource_type: str,
        source: str,
        branch: str | None = None,
        search_paths: list[str] | None = None,
        notes: str | None = None,
    ) -> list[str]:
        args = ["config", "resources", "add", "-n", name, "-t", resource_type]

        if resource_type == "git":
            args.extend(["-u", source])
            if branch:
                args.extend(["-b", branch])
        else:
            args.extend(["--path", source])

        for search_path in search_paths or []:
            args.extend(["--search-path", search_path])

        if notes:
            args.extend(["--notes", notes])

        return args

    def remove_resource(self, name: str) -> list[str]:
        return ["config", "resources", "remove", "--name", name]


class FlatConvention(ArgumentConvention):
    """Flat ``btca add|remove|resources|connect`` layout."""

    style = ArgumentStyle.FLAT

    def set_model(self, provider: str, model: str) -> list[str]:
        return ["connect", "--provider", provider, "--model", model]

    def list_resources(self) -> list[str]:
        return ["resources"]

    def add_resource(
        self,
        name: str,
        resource_type: str,
        source: str,
        branch: str | None = None,
        search_paths: list[str] | None = None,
        notes: str | None = None,
    ) -> list[str]:
        # Source is positional in this layout
        args = ["add", source, "-n", name, "-t", resource_type]

        if resource_type == "git" and branch:
            args.extend(["-b", branch])

        for search_path in search_paths or []:
            args.extend(["-s", search_path])

        if notes:
            args.extend(["--notes", notes])

        return args

    def remove_resource(self, name: str) -> list[str]:
        return ["remove", name]


_CONVENTIONS: dict[ArgumentStyle, type[ArgumentConvention]] = {
    ArgumentStyle.NESTED: NestedConvention,
    ArgumentStyle.FLAT: FlatConvention,
}


def get_convention(style: ArgumentStyle | str) -> ArgumentConvention:
    """Get the argument convention for a style.

    Args:
        style: ArgumentStyle or its string value ("nested" or "flat")

    Returns:
        ArgumentConvention instance

    Raises:
        ValueError: If the style is unknown
    """
    return _CONVENTIONS[ArgumentStyle(style)]()
