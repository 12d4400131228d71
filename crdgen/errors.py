"""Error taxonomy for the code-generation pipeline.

Every error is terminal: nothing is retried, and each one reaches the
top-level caller unchanged with the failing stage and its context.
"""

from __future__ import annotations

from typing import Any


class CodegenError(Exception):
    """Base class for all code-generation failures."""

    stage = "codegen"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = {key: value for key, value in context.items() if value is not None}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            parts = ", ".join(f"{key}={value}" for key, value in self.context.items())
            return f"{self.message} ({parts})"
        return self.message


class ProjectRootError(CodegenError):
    """Raised when the working directory is not an operator project root."""

    stage = "discovery"


class DiscoveryError(CodegenError):
    """Raised when group versions or the module root cannot be discovered."""

    stage = "discovery"


class GeneratorValidationError(CodegenError):
    """Raised when generator arguments are rejected before running."""

    stage = "generation"


class GeneratorExecutionError(CodegenError):
    """Raised when the schema generator fails mid-run."""

    stage = "generation"


class DirectoryReadError(CodegenError):
    """Raised when the CRD manifest directory cannot be read."""

    stage = "enumeration"


class ManifestError(DirectoryReadError):
    """Raised when a CRD manifest is not valid YAML or not a valid CRD."""


class VersionMissingError(CodegenError):
    """Raised when a CRD declares neither a version nor a version list."""

    stage = "enumeration"


MissingVersionError = VersionMissingError


class ResourceConstructionError(CodegenError):
    """Raised when a resource identity cannot be formed from a CRD."""

    stage = "scaffolding"


class ScaffoldWriteError(CodegenError):
    """Raised when the scaffold engine fails to render or write a file."""

    stage = "scaffolding"
