"""Tests for the command-line interface."""

import click
import pytest
from click.testing import CliRunner

from gql_hookgen.cli import build_fetcher_config, main, parse_fetch_params


@pytest.fixture
def project(tmp_path, schema_sdl, operations_source):
    (tmp_path / "schema.graphql").write_text(schema_sdl)
    operations = tmp_path / "operations"
    operations.mkdir()
    (operations / "users.graphql").write_text(operations_source)
    return tmp_path


def run(project, *args):
    runner = CliRunner()
    return runner.invoke(
        main,
        [
            "generate",
            "-s", str(project / "schema.graphql"),
            "-d", str(project / "operations"),
            *args,
        ],
    )


class TestGenerateCommand:
    """Tests for `gql-hookgen generate`."""

    def test_writes_hooks(self, project):
        output = project / "src" / "hooks.ts"
        result = run(project, "-o", str(output))

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert code.startswith("import { useQuery, UseQueryOptions")
        assert "export const useGetUserQuery = <" in code
        assert "OnUserCreated" not in code

    def test_rejects_non_typescript_output(self, project):
        result = run(project, "-o", str(project / "hooks.graphql"))

        assert result.exit_code != 0
        assert "requires extension" in result.output
        assert not (project / "hooks.graphql").exists()

    def test_hardcoded_endpoint(self, project):
        output = project / "hooks.ts"
        result = run(
            project,
            "-o", str(output),
            "--endpoint", "https://api.example.com/graphql",
            "--fetch-param", 'headers={"Authorization": "token"}',
        )

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert 'await fetch("https://api.example.com/graphql", {' in code
        assert 'headers: {"Authorization": "token"},' in code

    def test_custom_lazy_fetcher(self, project):
        output = project / "hooks.tsx"
        result = run(
            project,
            "-o", str(output),
            "-f", "./fetcher#useFetchData",
            "--lazy-variables",
            "--expose-query-keys",
        )

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert "import { useFetchData } from './fetcher';" in code
        assert "useGetUserQuery.getKey" in code

    def test_verbose_lists_skipped_operations(self, project):
        result = run(project, "-o", str(project / "hooks.ts"), "-v")

        assert result.exit_code == 0, result.output
        assert "Skipped OnUserCreated" in result.output

    def test_missing_documents(self, project, tmp_path_factory):
        empty = tmp_path_factory.mktemp("empty")
        result = CliRunner().invoke(
            main,
            ["generate", "-s", str(project / "schema.graphql"), "-d", str(empty), "-o", str(project / "h.ts")],
        )
        assert result.exit_code != 0
        assert "No GraphQL documents found" in result.output


    def test_output_is_utf8(self, project):
        output = project / "hooks.ts"
        result = run(
            project,
            "-o", str(output),
            "--endpoint", "API_URL",
            "--fetch-param", 'headers={"X-Client": "Zoë ✓"}',
        )

        assert result.exit_code == 0, result.output
        assert 'headers: {"X-Client": "Zoë ✓"},' in output.read_bytes().decode("utf-8")

    @pytest.mark.parametrize(
        "args",
        [
            ["-f", "graphql-request", "--lazy-variables"],
            ["--lazy-variables"],
            ["-f", "graphql-request", "--endpoint", "API_URL"],
            ["-f", "./fetcher#run", "--endpoint", "API_URL"],
            ["--endpoint", "API_URL", "--lazy-variables"],
            ["--fetch-param", "mode=cors"],
        ],
    )
    def test_rejects_conflicting_fetcher_options(self, project, args):
        output = project / "hooks.ts"
        result = run(project, "-o", str(output), *args)

        assert result.exit_code == 2
        assert "Invalid value" in result.output
        assert not output.exists()


class TestHelpers:
    """Tests for option parsing helpers."""

    def test_parse_fetch_params(self):
        params = parse_fetch_params(('credentials="include"', "mode=cors", "keepalive=true"))
        assert params == {"credentials": "include", "mode": "cors", "keepalive": True}

    def test_build_fetcher_config(self):
        assert build_fetcher_config("fetch", None, {}, False) == "fetch"
        assert build_fetcher_config("fetch", "API_URL", {}, False) == {
            "endpoint": "API_URL",
            "fetchParams": {},
        }
        assert build_fetcher_config("./f#g", None, {}, True) == {
            "func": "./f#g",
            "lazyVariables": True,
        }

    def test_build_fetcher_config_rejects_lazy_builtin(self):
        with pytest.raises(click.BadParameter):
            build_fetcher_config("graphql-request", None, {}, True)

    def test_build_fetcher_config_rejects_endpoint_with_other_fetcher(self):
        with pytest.raises(click.BadParameter):
            build_fetcher_config("graphql-request", "API_URL", {}, False)
