"""Build Jinja2 template context from the analysed action and operation.

Joins the schema and operation analysis into the flat dict the handler
templates render from.
"""

from __future__ import annotations

from typing import Any

from .config import GeneratorConfig
from .errors import UnboundVariableError
from .naming import execute_function_name, query_constant_name


def _escape_template_literal(text: str) -> str:
    """Escape text for embedding inside a JavaScript `...` literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def bind_variables(action: dict[str, Any], variables: list[str]) -> list[str]:
    """Check every operation variable has a same-named action argument.

    Returns the variables in operation order. Raises UnboundVariableError
    naming every variable left without an argument.
    """
    arguments = set(action["arguments"])
    unbound = [v for v in variables if v not in arguments]
    if unbound:
        raise UnboundVariableError(action["name"], unbound)
    return list(variables)


def variables_literal(variables: list[str]) -> str:
    """Render the variables object passed to the upstream call.

    Each variable is a shorthand property for the same-named argument
    binding destructured in the handler prologue.
    """
    if not variables:
        return "{}"
    return "{ " + ", ".join(variables) + " }"


def destructure_pattern(arguments: list[str]) -> str:
    """Object pattern pulling the arguments out of the request input."""
    return "{" + ", ".join(arguments) + "}"


def output_literal(fields: list[str]) -> str:
    """Placeholder response body: every output field set to ""."""
    if not fields:
        return "{}"
    body = ",\n      ".join(f'{field}: ""' for field in fields)
    return "{\n      " + body + "\n    }"


def build_context(
    action: dict[str, Any],
    operation: dict[str, Any] | None = None,
    operation_source: str | None = None,
    config: GeneratorConfig | None = None,
) -> dict[str, Any]:
    """Build the full template context for one action handler."""
    config = config or GeneratorConfig()
    context: dict[str, Any] = {
        "action_name": action["name"],
        "arguments": action["arguments"],
        "output_fields": action["output_fields"],
        "destructure": destructure_pattern(action["arguments"]),
        "output_literal": output_literal(action["output_fields"]),
        "is_derived": operation is not None,
    }

    if operation is not None:
        variables = bind_variables(action, operation["variables"])
        context.update({
            "query_name": query_constant_name(action["name"]),
            "execute_name": execute_function_name(action["name"]),
            "operation_source": _escape_template_literal(operation_source or ""),
            "root_field": operation["root_field"],
            "variables_literal": variables_literal(variables),
            "endpoint_env_var": config.endpoint_env_var,
        })

    return context
