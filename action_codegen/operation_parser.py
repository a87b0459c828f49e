"""Extract the root field and variables from a derive operation."""

from __future__ import annotations

import logging
from typing import Any

from graphql import DocumentNode, FieldNode, OperationDefinitionNode

from .errors import MissingRootFieldError, UnsupportedOperationError

logger = logging.getLogger(__name__)

# Introspection fields (__typename, __schema, ...) are never the payload
INTROSPECTION_PREFIX = "__"


def find_root_field(operation: OperationDefinitionNode) -> FieldNode | None:
    """Return the first non-introspection field of the top selection set."""
    for selection in operation.selection_set.selections:
        if not isinstance(selection, FieldNode):
            continue
        if not selection.name.value.startswith(INTROSPECTION_PREFIX):
            return selection
    return None


def response_key(field: FieldNode) -> str:
    """The key a field appears under in the response: its alias, else its name."""
    if field.alias is not None:
        return field.alias.value
    return field.name.value


def variable_names(operation: OperationDefinitionNode) -> list[str]:
    """Declared variable names, in declaration order."""
    return [vdef.variable.name.value for vdef in operation.variable_definitions or ()]


def parse_operation(ast: DocumentNode) -> dict[str, Any]:
    """Analyse a parsed derive operation.

    Only single-operation documents are supported.
    """
    if not ast.definitions:
        raise MissingRootFieldError("the document is empty")
    if len(ast.definitions) > 1:
        raise UnsupportedOperationError(
            f"expected a single operation, found {len(ast.definitions)} definitions"
        )

    operation = ast.definitions[0]
    if not isinstance(operation, OperationDefinitionNode):
        raise UnsupportedOperationError("the definition is not an operation")

    field = find_root_field(operation)
    if field is None:
        raise MissingRootFieldError("no top-level field selection outside introspection fields")

    root_field = response_key(field)
    variables = variable_names(operation)
    logger.info("Derive root field name: %s", root_field)
    logger.info("Derive variable names: %s", ", ".join(variables))

    return {
        "root_field": root_field,
        "variables": variables,
    }
