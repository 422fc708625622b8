"""Parsing of custom fetcher mapper strings.

A mapper is either a bare symbol name assumed to exist in the generated
module (``myFetcher``) or an external reference of the form
``<module>#<symbol>``:

    ./mappers#myFetcher              named import
    ./mappers#default as myFetcher   default import bound to myFetcher
    ./mappers#default                default import bound to customFetcher
"""

from .errors import ConfigurationError
from .ir import MapperReference

DEFAULT_IMPORT_NAME = "customFetcher"


def is_external_mapper(value: str) -> bool:
    return "#" in value


def parse_mapper(value: str) -> MapperReference:
    """Parse a mapper string into a MapperReference."""
    value = value.strip()
    if not value:
        raise ConfigurationError("Custom fetcher mapper must not be empty")

    if not is_external_mapper(value):
        return MapperReference(symbol_name=value)

    module_path, _, symbol = value.partition("#")
    module_path = module_path.strip()
    symbol = symbol.strip()
    if not module_path or not symbol:
        raise ConfigurationError(
            f'Invalid custom fetcher "{value}", expected "<module>#<symbol>"'
        )

    if symbol == "default":
        return MapperReference(
            symbol_name=DEFAULT_IMPORT_NAME,
            is_external=True,
            module_path=module_path,
            is_default_export=True,
        )
    if symbol.startswith("default as "):
        return MapperReference(
            symbol_name=symbol[len("default as "):].strip(),
            is_external=True,
            module_path=module_path,
            is_default_export=True,
        )
    return MapperReference(
        symbol_name=symbol,
        is_external=True,
        module_path=module_path,
    )


def build_mapper_import(mapper: MapperReference) -> str | None:
    """Build the import statement for an external mapper, None for local ones."""
    if not mapper.is_external:
        return None
    if mapper.is_default_export:
        return f"import {mapper.symbol_name} from '{mapper.module_path}';"
    return f"import {{ {mapper.symbol_name} }} from '{mapper.module_path}';"
