"""Generate typed react-query hooks from GraphQL operations."""

from .core.plugin import DocumentFile, PluginOutput, plugin, validate

__all__ = ["DocumentFile", "PluginOutput", "plugin", "validate"]
