"""Fetcher strategies.

Each fetcher decides how a generated binding performs its network call. All
of them implement the FetcherRenderer protocol, so the compiler can render
any operation without knowing which strategy is active.

Example:
    fetcher = create_fetcher(HardcodedFetch(endpoint="https://api.example.com/graphql"), HookMethodMap())
    state = CompilationState()
    code = fetcher.generate_query_hook(op, state)
"""

from typing import Protocol, runtime_checkable

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .config import (
    BrowserFetch,
    CustomMapper,
    FetcherConfig,
    GraphQLClientFetch,
    HardcodedFetch,
)
from .errors import ConfigurationError
from .ir import CompilationState, HookMethodMap, MapperReference, OperationDescriptor
from .mappers import build_mapper_import, parse_mapper
from .rendering import render, ts_json
from .signatures import (
    generate_mutation_variables_signature,
    generate_query_key,
    generate_query_variables_signature,
    typed_fetcher,
)

GRAPHQL_CLIENT_IMPORT = "import { GraphQLClient } from 'graphql-request';"

_url_adapter = TypeAdapter(AnyUrl)


@runtime_checkable
class FetcherRenderer(Protocol):
    """Protocol for fetcher strategies."""

    def generate_fetcher_implementation(self) -> str | None:
        """Return the runtime helper (or mapper import) to prepend, if any."""
        ...

    def generate_query_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        """Render the query binding for an operation."""
        ...

    def generate_mutation_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        """Render the mutation binding for an operation."""
        ...


def _render_query_hook(
    hooks: HookMethodMap,
    op: OperationDescriptor,
    state: CompilationState,
    params: list[str],
    fetcher_call: str,
) -> str:
    state.use_identifiers(hooks.query.hook, hooks.query.options)
    return render(
        "query_hook.ts.j2",
        op=op,
        hooks=hooks,
        params=params + [generate_query_variables_signature(op)],
        query_key=generate_query_key(op),
        fetcher_call=fetcher_call,
    )


def _render_mutation_hook(
    hooks: HookMethodMap,
    op: OperationDescriptor,
    state: CompilationState,
    params: list[str],
    mutation_fn: str,
) -> str:
    state.use_identifiers(hooks.mutation.hook, hooks.mutation.options)
    return render(
        "mutation_hook.ts.j2",
        op=op,
        hooks=hooks,
        params=params,
        mutation_fn=mutation_fn,
    )


def _variables_thunk(op: OperationDescriptor, call: str) -> str:
    """Wrap a fetcher call into the variables-accepting mutation function."""
    return f"({generate_mutation_variables_signature(op)}) => {call}()"


class FetchFetcher:
    """Plain ``fetch``; the caller passes ``{ endpoint, fetchParams }``."""

    DATA_SOURCE_PARAM = "dataSource: { endpoint: string, fetchParams?: RequestInit }"

    def __init__(self, hooks: HookMethodMap):
        self.hooks = hooks

    def generate_fetcher_implementation(self) -> str:
        return render("fetcher_fetch.ts.j2")

    def _call(self, op: OperationDescriptor) -> str:
        return (
            f"{typed_fetcher('fetcher', op)}(dataSource.endpoint, "
            f"dataSource.fetchParams || {{}}, {op.document_variable}, variables)"
        )

    def generate_query_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        return _render_query_hook(
            self.hooks, op, state, [self.DATA_SOURCE_PARAM], self._call(op)
        )

    def generate_mutation_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        return _render_mutation_hook(
            self.hooks, op, state, [self.DATA_SOURCE_PARAM],
            _variables_thunk(op, self._call(op)),
        )


class HardcodedFetchFetcher:
    """``fetch`` against an endpoint and request options fixed at generation time."""

    def __init__(self, hooks: HookMethodMap, config: HardcodedFetch):
        self.hooks = hooks
        self.config = config

    def get_endpoint(self) -> str:
        """Endpoint expression: a string literal for absolute URLs, else an identifier."""
        try:
            _url_adapter.validate_python(self.config.endpoint)
        except ValidationError:
            return f"{self.config.endpoint} as string"
        return ts_json(self.config.endpoint)

    def get_fetch_params(self) -> dict:
        return {"method": "POST", **self.config.fetch_params}

    def generate_fetcher_implementation(self) -> str:
        return render(
            "fetcher_hardcoded.ts.j2",
            endpoint=self.get_endpoint(),
            fetch_params=self.get_fetch_params(),
        )

    def _call(self, op: OperationDescriptor) -> str:
        return f"{typed_fetcher('fetcher', op)}({op.document_variable}, variables)"

    def generate_query_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        return _render_query_hook(self.hooks, op, state, [], self._call(op))

    def generate_mutation_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        return _render_mutation_hook(
            self.hooks, op, state, [], _variables_thunk(op, self._call(op))
        )


class GraphQLRequestClientFetcher:
    """Delegates to a graphql-request client handed in by the caller."""

    CLIENT_PARAM = "client: GraphQLClient"

    def __init__(self, hooks: HookMethodMap):
        self.hooks = hooks

    def generate_fetcher_implementation(self) -> str:
        return render("fetcher_graphql_request.ts.j2")

    def _call(self, op: OperationDescriptor) -> str:
        return f"{typed_fetcher('fetcher', op)}(client, {op.document_variable}, variables)"

    def generate_query_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        state.add_import(GRAPHQL_CLIENT_IMPORT)
        return _render_query_hook(
            self.hooks, op, state, [self.CLIENT_PARAM], self._call(op)
        )

    def generate_mutation_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        state.add_import(GRAPHQL_CLIENT_IMPORT)
        return _render_mutation_hook(
            self.hooks, op, state, [self.CLIENT_PARAM],
            _variables_thunk(op, self._call(op)),
        )


class CustomMapperFetcher:
    """Delegates to a user function named in the config.

    With ``lazy_variables`` the mapper is expected to return the
    ``(variables) => Promise`` function itself, so mutation bindings hand it
    to the hook as-is.
    """

    def __init__(self, hooks: HookMethodMap, config: CustomMapper):
        self.hooks = hooks
        self.mapper: MapperReference = parse_mapper(config.func)
        self.lazy_variables = config.lazy_variables

    def get_fetcher_fn_name(self) -> str:
        return self.mapper.symbol_name

    def generate_fetcher_implementation(self) -> str | None:
        return build_mapper_import(self.mapper)

    def generate_query_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        call = f"{typed_fetcher(self.get_fetcher_fn_name(), op)}({op.document_variable}, variables)"
        return _render_query_hook(self.hooks, op, state, [], call)

    def generate_mutation_hook(self, op: OperationDescriptor, state: CompilationState) -> str:
        typed = typed_fetcher(self.get_fetcher_fn_name(), op)
        if self.lazy_variables:
            mutation_fn = f"{typed}({op.document_variable})"
        else:
            mutation_fn = _variables_thunk(op, f"{typed}({op.document_variable}, variables)")
        return _render_mutation_hook(self.hooks, op, state, [], mutation_fn)


def create_fetcher(config: FetcherConfig, hooks: HookMethodMap) -> FetcherRenderer:
    """Build the fetcher for a decoded fetcher config."""
    if isinstance(config, BrowserFetch):
        return FetchFetcher(hooks)
    if isinstance(config, HardcodedFetch):
        return HardcodedFetchFetcher(hooks, config)
    if isinstance(config, GraphQLClientFetch):
        return GraphQLRequestClientFetcher(hooks)
    if isinstance(config, CustomMapper):
        return CustomMapperFetcher(hooks, config)
    raise ConfigurationError(f"Unsupported fetcher configuration: {config!r}")
