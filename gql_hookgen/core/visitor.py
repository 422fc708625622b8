"""Operation compiler: turns operation definitions into react-query bindings."""

import logging

from graphql import GraphQLSchema, OperationDefinitionNode

from .base_visitor import ClientSideBaseVisitor, LoadedFragment, to_pascal_case
from .config import PluginConfig
from .fetchers import FetcherRenderer, create_fetcher
from .ir import Diagnostic, OperationDescriptor, OperationKind
from .rendering import render
from .signatures import generate_query_key, generate_query_variables_signature

logger = logging.getLogger(__name__)

PLUGIN_NAME = "typescript-react-query"


class ReactQueryVisitor(ClientSideBaseVisitor):
    """Compiles each query and mutation with the configured fetcher.

    Run it with ``graphql.visit(document, visitor)``; afterwards
    ``get_imports()``, ``get_fetcher_implementation()`` and
    ``state.bindings`` hold everything the plugin output is assembled from.
    """

    def __init__(
        self,
        schema: GraphQLSchema | None,
        fragments: list[LoadedFragment],
        config: PluginConfig,
    ):
        super().__init__(schema, fragments, config)
        self.query_method_map = config.hook_map
        self.fetcher: FetcherRenderer = create_fetcher(config.fetcher, self.query_method_map)
        self._external_import_prefix = config.external_import_prefix

    def get_imports(self) -> list[str]:
        imports = super().get_imports()
        if self.state.operation_count == 0 or not self.state.identifiers:
            return imports
        identifiers = ", ".join(self.state.identifiers_in_use)
        return [*imports, f"import {{ {identifiers} }} from '{self.query_method_map.module}';"]

    def get_fetcher_implementation(self) -> str | None:
        return self.fetcher.generate_fetcher_implementation()

    def describe_operation(
        self,
        node: OperationDefinitionNode,
        document_variable: str,
        kind: OperationKind,
        result_type: str,
        variables_type: str,
        required_variables: bool,
    ) -> OperationDescriptor:
        name = node.name.value if node.name else ""
        suffix = "" if self.config.omit_operation_suffix else to_pascal_case(kind.value)
        return OperationDescriptor(
            name=name,
            kind=kind,
            document_variable=document_variable,
            binding_name=self.convert_name(name, suffix=suffix),
            result_type=self._external_import_prefix + result_type,
            variables_type=self._external_import_prefix + variables_type,
            has_required_variables=required_variables,
        )

    def build_operation(
        self,
        node: OperationDefinitionNode,
        document_variable: str,
        kind: OperationKind,
        result_type: str,
        variables_type: str,
        required_variables: bool,
    ) -> str | None:
        op = self.describe_operation(
            node, document_variable, kind, result_type, variables_type, required_variables
        )
        if node.name is None and kind is not OperationKind.SUBSCRIPTION:
            self._warn(
                op,
                f'Anonymous {kind.value.lower()} generates "{op.hook_name}", which may clash '
                f"with the imported hooks. Give the operation a name.",
            )

        if kind is OperationKind.QUERY:
            query = self.fetcher.generate_query_hook(op, self.state)
            if self.config.expose_query_keys:
                query += "\n" + render(
                    "query_key.ts.j2",
                    op=op,
                    variables=generate_query_variables_signature(op),
                    query_key=generate_query_key(op),
                )
            return query
        if kind is OperationKind.MUTATION:
            return self.fetcher.generate_mutation_hook(op, self.state)

        self._warn(
            op,
            f'Plugin "{PLUGIN_NAME}" does not support GraphQL Subscriptions at the moment! '
            f'Ignoring "{op.name}"...',
        )
        return None

    def _warn(self, op: OperationDescriptor, message: str):
        logger.warning(message)
        self.state.diagnostics.append(Diagnostic(operation_name=op.name, message=message))

