"""Plugin configuration models.

The host hands the plugin a loosely shaped mapping. It is decoded once,
here, into pydantic models; the ``fetcher`` option in particular becomes one
of four tagged variants so that the rest of the code never has to sniff
strings and dicts again.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import ConfigurationError
from .ir import HookMethodMap

FETCH = "fetch"
GRAPHQL_REQUEST = "graphql-request"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class BrowserFetch(_ConfigModel):
    """Use ``fetch`` against an endpoint supplied by the caller."""
    kind: Literal["fetch"] = "fetch"


class HardcodedFetch(_ConfigModel):
    """Use ``fetch`` against an endpoint baked into the generated code."""
    kind: Literal["hardcoded"] = "hardcoded"
    endpoint: str = Field(min_length=1)
    fetch_params: dict[str, Any] = Field(default_factory=dict)


class GraphQLClientFetch(_ConfigModel):
    """Delegate to a graphql-request ``GraphQLClient`` passed by the caller."""
    kind: Literal["graphql-request"] = "graphql-request"


class CustomMapper(_ConfigModel):
    """Delegate to a user function, local or imported (``module#symbol``)."""
    kind: Literal["custom"] = "custom"
    func: str = Field(min_length=1)
    lazy_variables: bool = False


FetcherConfig = Annotated[
    Union[BrowserFetch, HardcodedFetch, GraphQLClientFetch, CustomMapper],
    Field(discriminator="kind"),
]


class ExternalFragment(_ConfigModel):
    """A fragment defined outside the documents being compiled."""
    name: str
    on_type: str = ""


class PluginConfig(_ConfigModel):
    """Options recognised by the plugin. Unknown keys are ignored."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    fetcher: FetcherConfig = Field(default_factory=BrowserFetch)
    expose_query_keys: bool = False
    omit_operation_suffix: bool = False
    import_operation_types_from: str | None = None
    external_fragments: list[ExternalFragment] = Field(default_factory=list)
    document_variable_suffix: str = "Document"
    fragment_variable_suffix: str = "FragmentDoc"
    hook_module: str = "react-query"

    @field_validator("fetcher", mode="before")
    @classmethod
    def _normalize_fetcher(cls, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value
        if value is None:
            return {"kind": FETCH}
        if isinstance(value, str):
            if value == FETCH:
                return {"kind": FETCH}
            if value == GRAPHQL_REQUEST:
                return {"kind": GRAPHQL_REQUEST}
            return {"kind": "custom", "func": value}
        if isinstance(value, dict):
            if "kind" in value:
                return value
            if value.get("endpoint"):
                return {"kind": "hardcoded", **value}
            if "func" in value:
                return {"kind": "custom", **value}
        raise ValueError(f"Unrecognized fetcher configuration: {value!r}")

    @property
    def hook_map(self) -> HookMethodMap:
        return HookMethodMap(module=self.hook_module)

    @property
    def external_import_prefix(self) -> str:
        if self.import_operation_types_from:
            return f"{self.import_operation_types_from}."
        return ""

    @classmethod
    def from_raw(cls, raw: "dict[str, Any] | PluginConfig | None") -> "PluginConfig":
        """Decode a raw config mapping, raising ConfigurationError on bad shapes."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls.model_validate(raw or {})
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid plugin configuration: {e}", errors=e.errors()
            ) from e
