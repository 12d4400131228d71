# noqa: D104
"""Drivers for the external schema generator."""

from crdgen.generators.header import generate_with_header_file
from crdgen.generators.openapi import (
    OUTPUT_FILE_BASE,
    OpenAPIGenArgs,
    OpenAPIGenCLI,
    SchemaGenerator,
    build_args,
    openapi_gen,
    relative_api_path,
    validate_args,
)

__all__ = [
    "OUTPUT_FILE_BASE",
    "OpenAPIGenArgs",
    "OpenAPIGenCLI",
    "SchemaGenerator",
    "build_args",
    "generate_with_header_file",
    "openapi_gen",
    "relative_api_path",
    "validate_args",
]
