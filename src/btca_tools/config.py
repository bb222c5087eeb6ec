"""Configuration models and loading for btca-tools."""

import tomllib
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

DEFAULT_COMMAND = "btca"
DEFAULT_MODEL_TIMEOUT = 5.0  # seconds


class ArgumentStyle(str, Enum):
    """Which argument convention the installed btca CLI expects."""

    NESTED = "nested"  # btca config resources add ...
    FLAT = "flat"  # btca add ...


class BtcaToolsConfig(BaseModel):
    """Settings for invoking the btca CLI."""

    command: str = DEFAULT_COMMAND
    style: ArgumentStyle = ArgumentStyle.NESTED
    model_timeout: float = Field(default=DEFAULT_MODEL_TIMEOUT, gt=0)
    """How long `set model` waits before assuming success (btca keeps running)."""
    working_dir: str | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Ensure command is not empty."""
        if not v.strip():
            raise ValueError("Command cannot be empty")
        return v.strip()


def load_config(path: Path) -> BtcaToolsConfig:
    """Load and validate a TOML configuration file.

    Settings may live at the top level or under a ``[btca]`` table.

    Args:
        path: Path to the TOML config file

    Returns:
        Validated BtcaToolsConfig

    Raises:
        FileNotFoundError: If config file doesn't exist
        tomllib.TOMLDecodeError: If TOML is malformed
        pydantic.ValidationError: If config doesn't match schema
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return BtcaToolsConfig.model_validate(data.get("btca", data))


def get_default_config_dir() -> Path:
    """Get the default configuration directory (~/.config/btca-tools)."""
    return Path.home() / ".config" / "btca-tools"


def get_config_file() -> Path:
    """Get the path to the user config file."""
    return get_default_config_dir() / "config.toml"


def load_default_config() -> BtcaToolsConfig:
    """Load the user config file, falling back to defaults if it is absent."""
    path = get_config_file()
    if not path.exists():
        return BtcaToolsConfig()
    return load_config(path)
