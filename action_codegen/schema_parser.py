"""Extract an action's arguments and output fields from the actions SDL.

Handles:
- `type Mutation` and `extend type Mutation` declarations
- Non-null / list wrapped return types (`Result!`, `[Result]`)
- Only type definitions and extensions are searched; directives,
  operations, fragments and schema definitions live in other namespaces

Lookups are plain linear scans with exact, case-sensitive name matches.
The helpers return None on a miss; only parse_action raises.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from graphql import (
    DocumentNode,
    FieldDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    TypeDefinitionNode,
    TypeExtensionNode,
    TypeNode,
)

from .errors import MissingActionError, MissingMutationTypeError, MissingOutputTypeError

logger = logging.getLogger(__name__)

MUTATION_TYPE = "Mutation"


def _named_definitions(ast: DocumentNode, name: str) -> Iterator[Any]:
    for definition in ast.definitions:
        if not isinstance(definition, (TypeDefinitionNode, TypeExtensionNode)):
            continue
        if definition.name.value == name:
            yield definition


def find_definition(ast: DocumentNode, name: str) -> Any | None:
    """Return the first type definition or extension called ``name``."""
    return next(_named_definitions(ast, name), None)


def find_field(definition: Any, name: str) -> FieldDefinitionNode | None:
    """Return the field called ``name`` on a type definition."""
    for field in getattr(definition, "fields", None) or ():
        if field.name.value == name:
            return field
    return None


def named_type_name(type_node: TypeNode) -> str:
    """Unwrap `Foo!` / `[Foo]` down to `Foo`."""
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        type_node = type_node.type
    return type_node.name.value


def find_action_field(ast: DocumentNode, action_name: str) -> FieldDefinitionNode | None:
    """Find the action among the fields of every Mutation declaration."""
    for definition in _named_definitions(ast, MUTATION_TYPE):
        field = find_field(definition, action_name)
        if field is not None:
            return field
    return None


def parse_action(ast: DocumentNode, action_name: str) -> dict[str, Any]:
    """Locate an action and its output type in a parsed actions SDL.

    Returns a dict with the argument names and output field names, both
    in declaration order.
    """
    if find_definition(ast, MUTATION_TYPE) is None:
        raise MissingMutationTypeError()

    action = find_action_field(ast, action_name)
    if action is None:
        raise MissingActionError(action_name)

    arguments = [arg.name.value for arg in action.arguments or ()]
    logger.info("Input arguments: %s", ", ".join(arguments))

    output_type = named_type_name(action.type)
    output_def = find_definition(ast, output_type)
    if output_def is None:
        raise MissingOutputTypeError(action_name, output_type)
    if getattr(output_def, "fields", None) is None:
        raise MissingOutputTypeError(action_name, output_type, reason="has no fields")
    logger.info("Output type: %s", output_type)

    output_fields = [f.name.value for f in output_def.fields]
    logger.info("Output type fields: %s", ", ".join(output_fields))

    return {
        "name": action_name,
        "arguments": arguments,
        "output_type": output_type,
        "output_fields": output_fields,
    }
