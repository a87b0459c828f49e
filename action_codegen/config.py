"""Generator settings.

Values come from the environment so the CLI can be driven from CI
without flags:

  ACTION_CODEGEN_OUTPUT_DIR    directory that receives <action>.js
  ACTION_CODEGEN_ENDPOINT_ENV  env var the generated handler reads the
                               upstream GraphQL URL from
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_DIR = Path("generated")
DEFAULT_ENDPOINT_ENV = "HASURA_GRAPHQL_URL"


@dataclass(frozen=True)
class GeneratorConfig:
    output_dir: Path = DEFAULT_OUTPUT_DIR
    endpoint_env_var: str = DEFAULT_ENDPOINT_ENV

    @classmethod
    def from_env(cls) -> GeneratorConfig:
        """Build a config from ACTION_CODEGEN_* environment variables."""
        return cls(
            output_dir=Path(os.environ.get("ACTION_CODEGEN_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR),
            endpoint_env_var=os.environ.get("ACTION_CODEGEN_ENDPOINT_ENV") or DEFAULT_ENDPOINT_ENV,
        )
