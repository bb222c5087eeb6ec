"""Tests for the nested and flat btca argument conventions."""

import pytest

from btca_tools.config import ArgumentStyle
from btca_tools.tools.conventions import (
    FlatConvention,
    NestedConvention,
    get_convention,
)


class TestGetConvention:
    """Test convention lookup."""

    def test_nested_by_enum(self):
        assert isinstance(get_convention(ArgumentStyle.NESTED), NestedConvention)

    def test_flat_by_string(self):
        assert isinstance(get_convention("flat"), FlatConvention)

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            get_convention("sideways")

    def test_style_attribute(self):
        assert get_convention("nested").style == ArgumentStyle.NESTED
        assert get_convention("flat").style == ArgumentStyle.FLAT


class TestSharedCommands:
    """ask and clear have the same shape in both layouts."""

    @pytest.mark.parametrize("style", ["nested", "flat"])
    def test_ask_repeats_resource_flag(self, style):
        args = get_convention(style).ask(["svelte", "kit"], "How do runes work?")
        assert args == ["ask", "-r", "svelte", "-r", "kit", "-q", "How do runes work?"]

    @pytest.mark.parametrize("style", ["nested", "flat"])
    def test_clear(self, style):
        assert get_convention(style).clear() == ["clear"]


class TestNestedConvention:
    """Test the `btca config ...` layout."""

    def setup_method(self):
        self.convention = NestedConvention()

    def test_set_model(self):
        assert self.convention.set_model("anthropic", "claude-haiku") == [
            "config",
            "model",
            "--provider",
            "anthropic",
            "--model",
            "claude-haiku",
        ]

    def test_list_resources(self):
        assert self.convention.list_resources() == ["config", "resources", "list"]

    def test_remove_resource(self):
        assert self.convention.remove_resource("svelte") == [
            "config",
            "resources",
            "remove",
            "--name",
            "svelte",
        ]

    def test_add_git_resource_full(self):
        args = self.convention.add_resource(
            name="svelte",
            resource_type="git",
            source="https://github.com/sveltejs/svelte",
            branch="next",
            search_paths=["packages/svelte", "documentation"],
            notes="Prefer the docs folder",
        )
        assert args == [
            "config", "resources", "add",
            "-n", "svelte",
            "-t", "git",
            "-u", "https://github.com/sveltejs/svelte",
            "-b", "next",
            "--search-path", "packages/svelte",
            "--search-path", "documentation",
            "--notes", "Prefer the docs folder",
        ]  # fmt: skip

    def test_add_git_resource_minimal(self):
        args = self.convention.add_resource(
            name="svelte", resource_type="git", source="https://github.com/sveltejs/svelte"
        )
        assert args == [
            "config", "resources", "add",
            "-n", "svelte",
            "-t", "git",
            "-u", "https://github.com/sveltejs/svelte",
        ]  # fmt: skip

    def test_add_local_resource_ignores_branch(self):
        args = self.convention.add_resource(
            name="mine", resource_type="local", source="/srv/code/mine", branch="main"
        )
        assert args == [
            "config", "resources", "add",
            "-n", "mine",
            "-t", "local",
            "--path", "/srv/code/mine",
        ]  # fmt: skip

    def test_empty_search_paths_and_notes_emit_nothing(self):
        args = self.convention.add_resource(
            name="mine", resource_type="local", source="/srv/code/mine", search_paths=[], notes=""
        )
        assert "--search-path" not in args
        assert "--notes" not in args


class TestFlatConvention:
    """Test the flat `btca add|remove|resources|connect` layout."""

    def setup_method(self):
        self.convention = FlatConvention()

    def test_set_model(self):
        assert self.convention.set_model("openai", "gpt-5") == [
            "connect",
            "--provider",
            "openai",
            "--model",
            "gpt-5",
        ]

    def test_list_resources(self):
        assert self.convention.list_resources() == ["resources"]

    def test_remove_resource(self):
        assert self.convention.remove_resource("svelte") == ["remove", "svelte"]

    def test_add_git_resource_source_is_positional(self):
        args = self.convention.add_resource(
            name="svelte",
            resource_type="git",
            source="https://github.com/sveltejs/svelte",
            branch="main",
            search_paths=["packages/svelte"],
            notes="runes",
        )
        assert args == [
            "add", "https://github.com/sveltejs/svelte",
            "-n", "svelte",
            "-t", "git",
            "-b", "main",
            "-s", "packages/svelte",
            "--notes", "runes",
        ]  # fmt: skip

    def test_add_local_resource(self):
        args = self.convention.add_resource(
            name="mine",
            resource_type="local",
            source="./vendor/mine",
            branch="ignored",
            search_paths=["src"],
        )
        assert args == ["add", "./vendor/mine", "-n", "mine", "-t", "local", "-s", "src"]
