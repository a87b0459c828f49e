"""Entry point: python -m action_codegen

Reads an actions SDL (and optionally a derive operation), writes
<action>.js to the output directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .codegen import generate, write_artifacts
from .config import GeneratorConfig
from .errors import CodegenError
from .loader import load_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="action_codegen",
        description="Generate a serverless handler for a GraphQL action.",
    )
    parser.add_argument("action", help="name of the Mutation field to generate a handler for")
    parser.add_argument("--sdl", type=Path, required=True, help="file with the actions SDL")
    parser.add_argument(
        "--derive-operation", type=Path,
        help="file with a GraphQL operation the handler should proxy",
    )
    parser.add_argument("--output-dir", type=Path, help="where to write <action>.js")
    parser.add_argument(
        "--endpoint-env",
        help="env var the generated handler reads the upstream GraphQL URL from",
    )
    parser.add_argument(
        "--stdout", action="store_true",
        help="print the handler instead of writing it",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    config = GeneratorConfig.from_env()
    if args.output_dir is not None:
        config = replace(config, output_dir=args.output_dir)
    if args.endpoint_env:
        config = replace(config, endpoint_env_var=args.endpoint_env)

    try:
        derive = None
        if args.derive_operation is not None:
            derive = {"operation": load_text(args.derive_operation)}
        artifacts = generate(args.action, load_text(args.sdl), derive, config)
        if args.stdout:
            for artifact in artifacts:
                sys.stdout.write(artifact["content"])
            return 0
        written = write_artifacts(artifacts, config.output_dir)
    except (CodegenError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for output_path in written:
        print(f"Generated {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
