"""Node-graph model for render passes and their resources, stored as YAML, with a command to edit it."""

__version__ = "0.1.0"
__all__ = ["cli", "editor", "ids", "nodes"]