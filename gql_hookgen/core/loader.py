"""Loading of schema and operation documents from disk, for the CLI."""

import logging
import os

from graphql import GraphQLSchema, build_ast_schema, concat_ast, parse

from .plugin import DocumentFile

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect files with the given extensions from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def load_schema(path: str) -> GraphQLSchema:
    """Parse and build a schema from one file or a directory of SDL files."""
    files = collect_files(path, SCHEMA_EXTENSIONS)
    if not files:
        raise FileNotFoundError(f"No schema files found in {path}")

    documents = []
    for file_path in files:
        logger.debug("Parsing schema file %s", file_path)
        with open(file_path, encoding="utf-8") as f:
            documents.append(parse(f.read()))
    return build_ast_schema(concat_ast(documents))


def load_documents(path: str) -> list[DocumentFile]:
    """Parse every operations document found under path."""
    files = collect_files(path, DOCUMENT_EXTENSIONS)
    if not files:
        raise FileNotFoundError(f"No GraphQL documents found in {path}")

    documents = []
    for file_path in files:
        logger.debug("Parsing document %s", file_path)
        with open(file_path, encoding="utf-8") as f:
            documents.append(DocumentFile(document=parse(f.read()), location=file_path))
    return documents
