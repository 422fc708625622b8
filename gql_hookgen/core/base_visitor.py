"""Client-side base visitor.

Does the bookkeeping every client-side plugin needs before a binding can be
rendered: naming, document and fragment constants, operation type names and
required-variable detection. Subclasses implement ``build_operation``.
"""

import re
from dataclasses import dataclass

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLSchema,
    Node,
    NonNullTypeNode,
    OperationDefinitionNode,
    Visitor,
    print_ast,
    visit,
)

from .config import PluginConfig
from .ir import CompilationState, OperationKind


def to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def to_pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    snake = to_snake_case(name)
    return "".join(word.capitalize() for word in snake.split("_"))


def escape_template_literal(text: str) -> str:
    """Make text safe inside a TypeScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


@dataclass(frozen=True)
class LoadedFragment:
    """A fragment available to the documents being compiled."""
    name: str
    on_type: str
    node: FragmentDefinitionNode | None = None
    is_external: bool = False


class FragmentSpreadCollector(Visitor):
    """Collects fragment spread names in the order they appear."""

    def __init__(self):
        super().__init__()
        self.names: list[str] = []

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        if node.name.value not in self.names:
            self.names.append(node.name.value)


def collect_fragment_spreads(node: Node) -> list[str]:
    collector = FragmentSpreadCollector()
    visit(node, collector)
    return collector.names


def has_required_variables(node: OperationDefinitionNode) -> bool:
    """True when a variable is non-null and has no default value."""
    return any(
        isinstance(var.type, NonNullTypeNode) and var.default_value is None
        for var in node.variable_definitions or ()
    )


def fragments_from_document(document: DocumentNode) -> list[LoadedFragment]:
    return [
        LoadedFragment(
            name=definition.name.value,
            on_type=definition.type_condition.name.value,
            node=definition,
        )
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    ]


class ClientSideBaseVisitor(Visitor):
    """Base visitor emitting document constants in string mode."""

    def __init__(
        self,
        schema: GraphQLSchema | None,
        fragments: list[LoadedFragment],
        config: PluginConfig,
    ):
        super().__init__()
        self.schema = schema
        self.config = config
        self.state = CompilationState()
        self._fragments = {fragment.name: fragment for fragment in fragments}
        self._fragment_deps = {
            fragment.name: collect_fragment_spreads(fragment.node)
            for fragment in fragments
            if fragment.node is not None
        }

    def convert_name(self, name: str, suffix: str = "", prefix: str = "") -> str:
        return f"{prefix}{to_pascal_case(name)}{suffix}"

    def get_fragment_variable_name(self, fragment_name: str) -> str:
        return self.convert_name(fragment_name, suffix=self.config.fragment_variable_suffix)

    def _transitive_fragments(self, names: list[str]) -> list[str]:
        """Resolve spreads to every known fragment they pull in, first use first."""
        resolved: list[str] = []
        pending = list(names)
        while pending:
            name = pending.pop(0)
            if name in resolved or name not in self._fragments:
                continue
            resolved.append(name)
            pending.extend(self._fragment_deps.get(name, []))
        return resolved

    def _fragments_in_dependency_order(self) -> list[LoadedFragment]:
        """Fragments with every dependency ahead of the fragments spreading it."""
        ordered: list[LoadedFragment] = []
        visited: set[str] = set()

        def add(name: str):
            if name in visited or name not in self._fragments:
                return
            visited.add(name)
            for dep in self._fragment_deps.get(name, []):
                add(dep)
            ordered.append(self._fragments[name])

        for name in self._fragments:
            add(name)
        return ordered

    def _document_constant(self, variable_name: str, node: Node, fragment_names: list[str]) -> str:
        printed = escape_template_literal(print_ast(node))
        lines = [f"export const {variable_name} = `"]
        lines.extend(f"    {line}" if line else line for line in printed.split("\n"))
        for name in fragment_names:
            lines.append(f"    ${{{self.get_fragment_variable_name(name)}}}")
        return "\n".join(lines) + "`;"

    @property
    def fragments(self) -> str:
        """Constants for every fragment defined in the compiled documents.

        Each constant holds its own definition only; operation documents pull
        in the whole transitive set, so no definition is ever sent twice.
        """
        constants = []
        for fragment in self._fragments_in_dependency_order():
            if fragment.is_external or fragment.node is None:
                continue
            constants.append(
                self._document_constant(
                    self.get_fragment_variable_name(fragment.name), fragment.node, []
                )
            )
        return "\n".join(constants)

    def build_document_constant(self, node: OperationDefinitionNode, variable_name: str) -> str:
        fragment_names = self._transitive_fragments(collect_fragment_spreads(node))
        return self._document_constant(variable_name, node, fragment_names)

    def get_imports(self) -> list[str]:
        return self.state.extra_imports

    def build_operation(
        self,
        node: OperationDefinitionNode,
        document_variable: str,
        kind: OperationKind,
        result_type: str,
        variables_type: str,
        required_variables: bool,
    ) -> str | None:
        """Render the binding for an operation, or None to skip it."""
        return None

    def leave_operation_definition(self, node: OperationDefinitionNode, *_args):
        self.state.operation_count += 1
        name = node.name.value if node.name else ""
        kind = OperationKind.from_operation_type(node.operation.value)
        type_suffix = "" if self.config.omit_operation_suffix else kind.value
        document_variable = self.convert_name(name, suffix=self.config.document_variable_suffix)

        binding = self.build_operation(
            node,
            document_variable,
            kind,
            self.convert_name(name, suffix=type_suffix),
            self.convert_name(name, suffix=f"{type_suffix}Variables"),
            has_required_variables(node),
        )
        if binding is not None:
            self.state.bindings.append(
                "\n".join([self.build_document_constant(node, document_variable), binding])
            )
