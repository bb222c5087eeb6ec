"""btca-tools: agent tool adapters for the btca CLI."""

__version__ = "0.1.0"
