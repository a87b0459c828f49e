"""Load and parse GraphQL documents.

Reads SDL / operation text from disk and turns it into a graphql-core
DocumentNode.
"""

from __future__ import annotations

from pathlib import Path

from graphql import DocumentNode, GraphQLSyntaxError, parse

from .errors import SchemaParseError


def load_text(path: Path) -> str:
    """Read a GraphQL document from disk."""
    with open(path, encoding="utf-8") as f:
        return f.read()


def parse_document(source: str, document: str = "GraphQL document") -> DocumentNode:
    """Parse GraphQL text into an AST.

    ``document`` names the input in the error message, e.g. "actions SDL".
    Locations are dropped since nothing downstream reports positions.
    """
    try:
        return parse(source, no_location=True)
    except GraphQLSyntaxError as e:
        raise SchemaParseError(document, e.message) from e
