"""Tests for custom fetcher mapper parsing."""

import pytest

from gql_hookgen.core.errors import ConfigurationError
from gql_hookgen.core.ir import MapperReference
from gql_hookgen.core.mappers import (
    DEFAULT_IMPORT_NAME,
    build_mapper_import,
    is_external_mapper,
    parse_mapper,
)


class TestParseMapper:
    """Tests for parse_mapper."""

    def test_local_symbol(self):
        assert parse_mapper("myFetcher") == MapperReference(symbol_name="myFetcher")

    def test_named_export(self):
        mapper = parse_mapper("./mappers#myFetcher")
        assert mapper.is_external
        assert mapper.module_path == "./mappers"
        assert mapper.symbol_name == "myFetcher"
        assert not mapper.is_default_export

    def test_default_export_with_name(self):
        mapper = parse_mapper("../lib/fetch#default as useFetchData")
        assert mapper.is_default_export
        assert mapper.symbol_name == "useFetchData"
        assert mapper.module_path == "../lib/fetch"

    def test_bare_default_export(self):
        mapper = parse_mapper("./fetcher#default")
        assert mapper.is_default_export
        assert mapper.symbol_name == DEFAULT_IMPORT_NAME

    def test_scoped_package(self):
        mapper = parse_mapper("@acme/fetch#request")
        assert mapper.module_path == "@acme/fetch"

    @pytest.mark.parametrize("value", ["", "   ", "#myFetcher", "./mappers#"])
    def test_invalid(self, value):
        with pytest.raises(ConfigurationError):
            parse_mapper(value)

    def test_is_external_mapper(self):
        assert is_external_mapper("./a#b")
        assert not is_external_mapper("b")


class TestBuildMapperImport:
    """Tests for build_mapper_import."""

    def test_local_needs_no_import(self):
        assert build_mapper_import(MapperReference(symbol_name="myFetcher")) is None

    def test_named_import(self):
        assert (
            build_mapper_import(parse_mapper("./mappers#myFetcher"))
            == "import { myFetcher } from './mappers';"
        )

    def test_default_import(self):
        assert (
            build_mapper_import(parse_mapper("./mappers#default as myFetcher"))
            == "import myFetcher from './mappers';"
        )
