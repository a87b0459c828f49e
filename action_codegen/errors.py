"""Exceptions raised while generating an action handler.

Every failure aborts the run: nothing is rendered or written once one
of these is raised.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for all generator errors."""


class SchemaParseError(CodegenError):
    """A GraphQL document could not be parsed."""

    def __init__(self, document: str, detail: str) -> None:
        self.document = document
        self.detail = detail
        super().__init__(f"Could not parse {document}: {detail}")


class DefinitionLookupError(CodegenError):
    """A definition the handler depends on is missing from a document."""


class MissingMutationTypeError(DefinitionLookupError):
    """The actions SDL declares no Mutation type."""

    def __init__(self) -> None:
        super().__init__("No 'Mutation' type found in the actions SDL")


class MissingActionError(DefinitionLookupError):
    """The Mutation type has no field for the requested action."""

    def __init__(self, action_name: str) -> None:
        self.action_name = action_name
        super().__init__(
            f"Action {action_name!r} is not a field of the 'Mutation' type"
        )


class MissingOutputTypeError(DefinitionLookupError):
    """The action's return type is absent or is not an object type."""

    def __init__(self, action_name: str, type_name: str, reason: str = "is not defined") -> None:
        self.action_name = action_name
        self.type_name = type_name
        super().__init__(
            f"Output type {type_name!r} of action {action_name!r} {reason} in the actions SDL"
        )


class MissingRootFieldError(DefinitionLookupError):
    """The derive operation selects no field outside introspection fields."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Derive operation has no root field: {reason}")


class UnsupportedOperationError(DefinitionLookupError):
    """The derive document is not a single operation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unsupported derive operation: {reason}")


class UnboundVariableError(CodegenError):
    """Operation variables that have no same-named action argument."""

    def __init__(self, action_name: str, variables: list[str]) -> None:
        self.action_name = action_name
        self.variables = variables
        names = ", ".join(f"${v}" for v in variables)
        super().__init__(
            f"Derive operation variables {names} have no matching argument"
            f" on action {action_name!r}"
        )
