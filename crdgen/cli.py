#!/usr/bin/env python3
"""Command-line entrypoint for OpenAPI code generation."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from crdgen import generate
from crdgen.errors import CodegenError
from crdgen.lib.env import get_project_root
from crdgen.lib.logging import configure_logging
from crdgen.settings import get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crdgen", description="Generate code for an operator project"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="Run a code generator")
    generate_sub = generate_parser.add_subparsers(dest="generator", required=True)

    openapi_parser = generate_sub.add_parser(
        "openapi", help="Generate OpenAPI validation specs and CRD manifests"
    )
    openapi_parser.add_argument("--root", type=Path, help="Project root (default: cwd)")
    openapi_parser.add_argument(
        "--header-file", type=Path, help="Header comment template for generated files"
    )
    openapi_parser.add_argument(
        "--ignore-group",
        dest="ignore_groups",
        action="append",
        default=[],
        metavar="GROUP",
        help="API group to skip when scaffolding CRDs (repeatable)",
    )
    openapi_parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def run_openapi(args: argparse.Namespace) -> int:
    settings = get_settings()
    project = get_project_root(args.root)
    try:
        if args.ignore_groups:
            generate.openapi_gen_with_ignore(
                project, args.ignore_groups, header_file=args.header_file, settings=settings
            )
        else:
            generate.openapi_gen(project, header_file=args.header_file, settings=settings)
    except CodegenError as e:
        logger.error("%s failed: %s", e.stage.capitalize(), e)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return run_openapi(args)


if __name__ == "__main__":
    raise SystemExit(main())
