# noqa: D104
"""OpenAPI validation code generation for operator projects."""

__version__ = "0.1.0"
