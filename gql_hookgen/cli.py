"""Command-line interface for gql-hookgen."""

import json
import logging
from pathlib import Path

import click
from graphql import GraphQLError

from .core.errors import HookgenError
from .core.loader import load_documents, load_schema
from .core.plugin import plugin, validate


def parse_fetch_params(values: tuple[str, ...]) -> dict:
    """Parse KEY=JSON pairs; values that are not JSON are kept as strings."""
    params = {}
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="--fetch-param")
        try:
            params[key] = json.loads(raw)
        except json.JSONDecodeError:
            params[key] = raw
    return params


BUILTIN_FETCHERS = ("fetch", "graphql-request")


def build_fetcher_config(
    fetcher: str, endpoint: str | None, fetch_params: dict, lazy_variables: bool
):
    if endpoint:
        if fetcher != "fetch":
            raise click.BadParameter(
                f"--endpoint hardcodes the fetch fetcher and cannot be used with {fetcher!r}",
                param_hint="--fetcher",
            )
        if lazy_variables:
            raise click.BadParameter(
                "only applies to custom fetchers, not to --endpoint",
                param_hint="--lazy-variables",
            )
        return {"endpoint": endpoint, "fetchParams": fetch_params}
    if fetch_params:
        raise click.BadParameter("requires --endpoint", param_hint="--fetch-param")
    if lazy_variables:
        if fetcher in BUILTIN_FETCHERS:
            raise click.BadParameter(
                f"only applies to custom fetchers, not to {fetcher!r}",
                param_hint="--lazy-variables",
            )
        return {"func": fetcher, "lazyVariables": True}
    return fetcher


@click.group()
@click.version_option(package_name="gql-hookgen")
def main():
    """GraphQL react-query hook generator.

    Generate typed TypeScript hooks from GraphQL operations.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL operations file or directory.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated hooks (.ts or .tsx).",
)
@click.option(
    "--fetcher",
    "-f",
    default="fetch",
    show_default=True,
    help='"fetch", "graphql-request", or a custom fetcher ("./module#symbol").',
)
@click.option("--endpoint", help="Hardcode this endpoint into the generated fetcher.")
@click.option(
    "--fetch-param",
    "fetch_params",
    multiple=True,
    help="Request option KEY=JSON for a hardcoded endpoint (repeatable).",
)
@click.option(
    "--lazy-variables",
    is_flag=True,
    help="Custom fetcher returns a (variables) => Promise function.",
)
@click.option("--expose-query-keys", is_flag=True, help="Add .getKey() to query hooks.")
@click.option("--omit-operation-suffix", is_flag=True, help="Do not suffix names with Query/Mutation.")
@click.option(
    "--import-operation-types-from",
    default=None,
    help="Namespace prefix for operation result and variables types.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: str,
    output: str,
    fetcher: str,
    endpoint: str | None,
    fetch_params: tuple[str, ...],
    lazy_variables: bool,
    expose_query_keys: bool,
    omit_operation_suffix: bool,
    import_operation_types_from: str | None,
    verbose: bool,
):
    """Generate react-query hooks for GraphQL operations.

    Examples:

        gql-hookgen generate -s ./schema.graphql -d ./operations -o ./src/hooks.ts

        gql-hookgen generate -s ./schema -d ./ops -o hooks.ts --endpoint https://api.example.com/graphql

        gql-hookgen generate -s ./schema -d ./ops -o hooks.ts -f ./fetcher#useFetchData --lazy-variables
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    output_path = Path(output).resolve()
    config = {
        "fetcher": build_fetcher_config(
            fetcher, endpoint, parse_fetch_params(fetch_params), lazy_variables
        ),
        "exposeQueryKeys": expose_query_keys,
        "omitOperationSuffix": omit_operation_suffix,
        "importOperationTypesFrom": import_operation_types_from,
    }

    try:
        validate(None, [], config, str(output_path))

        click.echo("Parsing schema...")
        parsed_schema = load_schema(schema)
        click.echo("Parsing documents...")
        parsed_documents = load_documents(documents)
        if verbose:
            click.echo(f"  Documents: {len(parsed_documents)}")

        click.echo("Generating hooks...")
        result = plugin(parsed_schema, parsed_documents, config)
    except (HookgenError, GraphQLError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"  Bindings: {result.content.count('export const use')}")
        for diagnostic in result.diagnostics:
            click.echo(f"  Skipped {diagnostic.operation_name}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    click.echo(f"Writing to {output_path}...")
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(result.render())

    click.echo(f"Done! Generated hooks in {output_path}")


if __name__ == "__main__":
    main()
