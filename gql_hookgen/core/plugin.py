"""Plugin entry points: assembly of the generated module."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from graphql import DocumentNode, GraphQLSchema, concat_ast, visit

from .base_visitor import LoadedFragment, fragments_from_document
from .config import PluginConfig
from .errors import UnsupportedExtensionError
from .ir import Diagnostic
from .visitor import ReactQueryVisitor

SUPPORTED_EXTENSIONS = (".ts", ".tsx")


@dataclass
class DocumentFile:
    """A parsed operations document and where it came from."""
    document: DocumentNode
    location: str | None = None


@dataclass
class PluginOutput:
    """Generated text handed back to the host.

    ``prepend`` holds the import statements and the runtime helper,
    ``content`` the fragment constants followed by the bindings.
    """
    prepend: list[str]
    content: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def render(self) -> str:
        """Join both streams the way the host writes them to a file."""
        return "\n".join([*self.prepend, self.content])


def _documents(documents: Iterable[DocumentFile | DocumentNode]) -> list[DocumentNode]:
    return [doc.document if isinstance(doc, DocumentFile) else doc for doc in documents]


def plugin(
    schema: GraphQLSchema | None,
    documents: Iterable[DocumentFile | DocumentNode],
    config: dict[str, Any] | PluginConfig | None = None,
) -> PluginOutput:
    """Generate react-query bindings for every operation in the documents."""
    plugin_config = PluginConfig.from_raw(config)
    all_ast = concat_ast(_documents(documents))

    fragments = [
        LoadedFragment(name=fragment.name, on_type=fragment.on_type, is_external=True)
        for fragment in plugin_config.external_fragments
    ]
    fragments.extend(fragments_from_document(all_ast))

    visitor = ReactQueryVisitor(schema, fragments, plugin_config)
    visit(all_ast, visitor)

    prepend = visitor.get_imports()
    implementation = visitor.get_fetcher_implementation()
    if implementation is not None:
        prepend.append(implementation)

    return PluginOutput(
        prepend=prepend,
        content="\n".join([visitor.fragments, *visitor.state.bindings]),
        diagnostics=list(visitor.state.diagnostics),
    )


def validate(
    schema: GraphQLSchema | None,
    documents: Iterable[DocumentFile | DocumentNode],
    config: dict[str, Any] | PluginConfig | None,
    output_file: str,
) -> None:
    """Reject output files that are not TypeScript sources."""
    if Path(output_file).suffix not in SUPPORTED_EXTENSIONS:
        raise UnsupportedExtensionError(output_file)
