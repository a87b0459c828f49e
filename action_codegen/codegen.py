"""Render templates and assemble the handler.

Each template renders one named fragment; the handler is those fragments
joined in a fixed, mode-dependent order:

  plain:   handler_beginning, business_logic, error_success_response
  derived: fetch_execute, handler_beginning, run_execute
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from .config import GeneratorConfig
from .context_builder import build_context
from .loader import parse_document
from .naming import handler_file_name
from .operation_parser import parse_operation
from .schema_parser import parse_action

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

PLAIN_FRAGMENTS = ("handler_beginning", "business_logic", "error_success_response")
DERIVE_FRAGMENTS = ("fetch_execute", "handler_beginning", "run_execute")


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_fragments(context: dict[str, Any]) -> list[tuple[str, str]]:
    """Render the fragments for the context's mode, in output order."""
    env = _environment()
    names = DERIVE_FRAGMENTS if context["is_derived"] else PLAIN_FRAGMENTS
    return [
        (name, env.get_template(f"{name}.js.j2").render(**context))
        for name in names
    ]


def assemble(fragments: list[tuple[str, str]]) -> str:
    return "".join(text for _, text in fragments)


def generate(
    action_name: str,
    actions_sdl: str,
    derive: dict[str, Any] | None = None,
    config: GeneratorConfig | None = None,
) -> list[dict[str, str]]:
    """Generate the handler source for one action.

    ``derive`` is ``{"operation": <GraphQL operation text>}`` when the
    handler should proxy an existing operation. Returns a single
    ``{"name": "<action>.js", "content": ...}`` artifact; any lookup or
    parse failure raises before anything is rendered.
    """
    logger.info("Running the codegen for: %s", action_name)

    action = parse_action(parse_document(actions_sdl, "actions SDL"), action_name)

    operation = None
    operation_source = None
    if derive and derive.get("operation"):
        operation_source = derive["operation"]
        logger.debug("Derive operation:\n%s", operation_source)
        operation = parse_operation(parse_document(operation_source, "derive operation"))

    context = build_context(action, operation, operation_source, config)

    logger.info("Rendering handler")
    fragments = render_fragments(context)
    logger.debug("Fragments: %s", ", ".join(name for name, _ in fragments))

    return [{
        "name": handler_file_name(action_name),
        "content": assemble(fragments),
    }]


def write_artifacts(artifacts: list[dict[str, str]], output_dir: Path) -> list[Path]:
    """Write each artifact under output_dir and return the written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for artifact in artifacts:
        output_path = output_dir / artifact["name"]
        output_path.write_text(artifact["content"])
        paths.append(output_path)
    return paths
