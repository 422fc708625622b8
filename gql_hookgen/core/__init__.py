"""Core modules for hook generation."""

from .base_visitor import ClientSideBaseVisitor, LoadedFragment
from .config import (
    BrowserFetch,
    CustomMapper,
    ExternalFragment,
    GraphQLClientFetch,
    HardcodedFetch,
    PluginConfig,
)
from .errors import ConfigurationError, HookgenError, UnsupportedExtensionError
from .fetchers import (
    CustomMapperFetcher,
    FetcherRenderer,
    FetchFetcher,
    GraphQLRequestClientFetcher,
    HardcodedFetchFetcher,
    create_fetcher,
)
from .ir import (
    CompilationState,
    Diagnostic,
    HookMethodMap,
    HookNames,
    MapperReference,
    OperationDescriptor,
    OperationKind,
)
from .mappers import build_mapper_import, parse_mapper
from .plugin import DocumentFile, PluginOutput, plugin, validate
from .visitor import ReactQueryVisitor

__all__ = [
    # Config
    "BrowserFetch",
    "CustomMapper",
    "ExternalFragment",
    "GraphQLClientFetch",
    "HardcodedFetch",
    "PluginConfig",
    # Errors
    "ConfigurationError",
    "HookgenError",
    "UnsupportedExtensionError",
    # Fetchers
    "CustomMapperFetcher",
    "FetcherRenderer",
    "FetchFetcher",
    "GraphQLRequestClientFetcher",
    "HardcodedFetchFetcher",
    "create_fetcher",
    # IR
    "CompilationState",
    "Diagnostic",
    "HookMethodMap",
    "HookNames",
    "MapperReference",
    "OperationDescriptor",
    "OperationKind",
    # Mappers
    "build_mapper_import",
    "parse_mapper",
    # Visitors
    "ClientSideBaseVisitor",
    "LoadedFragment",
    "ReactQueryVisitor",
    # Plugin
    "DocumentFile",
    "PluginOutput",
    "plugin",
    "validate",
]
