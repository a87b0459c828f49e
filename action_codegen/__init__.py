"""Generate serverless handlers for GraphQL actions."""

from .codegen import generate, write_artifacts
from .config import GeneratorConfig
from .errors import CodegenError

__all__ = ["CodegenError", "GeneratorConfig", "generate", "write_artifacts"]
