"""Intermediate representation shared by the compiler and the fetchers.

These dataclasses describe one compilation run: the operations being
compiled, the hook identifiers bindings target, and the state accumulated
while the document is traversed.
"""

from dataclasses import dataclass, field
from enum import Enum


class OperationKind(str, Enum):
    """GraphQL operation kinds, valued as the names used in type suffixes."""
    QUERY = "Query"
    MUTATION = "Mutation"
    SUBSCRIPTION = "Subscription"

    @classmethod
    def from_operation_type(cls, operation: str) -> "OperationKind":
        """Map a graphql-core OperationType value ('query', ...) to a kind."""
        return cls(operation.capitalize())


@dataclass(frozen=True)
class OperationDescriptor:
    """Everything a fetcher needs to render the binding of one operation."""
    name: str  # declared name, "" for anonymous operations
    kind: OperationKind
    document_variable: str  # e.g. "GetUserDocument"
    binding_name: str  # e.g. "GetUserQuery", exported as useGetUserQuery
    result_type: str
    variables_type: str
    has_required_variables: bool = False

    @property
    def hook_name(self) -> str:
        return f"use{self.binding_name}"


@dataclass(frozen=True)
class MapperReference:
    """Pointer to a user-supplied fetcher function."""
    symbol_name: str
    is_external: bool = False
    module_path: str | None = None
    is_default_export: bool = False


@dataclass(frozen=True)
class HookNames:
    """A hook identifier and the options type that goes with it."""
    hook: str
    options: str


@dataclass(frozen=True)
class HookMethodMap:
    """Identifiers of the reactive query library targeted by bindings."""
    query: HookNames = HookNames(hook="useQuery", options="UseQueryOptions")
    mutation: HookNames = HookNames(hook="useMutation", options="UseMutationOptions")
    module: str = "react-query"


@dataclass
class Diagnostic:
    """A non-fatal problem found while compiling an operation."""
    operation_name: str
    message: str


@dataclass
class CompilationState:
    """Per-run accumulator threaded through the traversal.

    Identifiers and imports are kept in insertion-ordered dicts so that
    repeated runs over the same input produce byte-identical output.
    """
    identifiers: dict[str, None] = field(default_factory=dict)
    imports: dict[str, None] = field(default_factory=dict)
    bindings: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    operation_count: int = 0

    def use_identifiers(self, *names: str):
        """Record hook/options identifiers referenced by emitted code."""
        for name in names:
            self.identifiers.setdefault(name, None)

    def add_import(self, statement: str):
        """Record an extra import statement requested by a fetcher."""
        self.imports.setdefault(statement, None)

    @property
    def identifiers_in_use(self) -> list[str]:
        return list(self.identifiers)

    @property
    def extra_imports(self) -> list[str]:
        return list(self.imports)
