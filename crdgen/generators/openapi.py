"""OpenAPI validation code generation through ``openapi-gen``.

The generator resolves input packages against its working directory, so
every fully-qualified API path is turned into a project-relative one before
the generator is invoked. It runs once per API package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import subprocess
from typing import Protocol

from crdgen.errors import GeneratorExecutionError, GeneratorValidationError
from crdgen.lib.env import ProjectRoot
from crdgen.settings import APIS_DIR

logger = logging.getLogger(__name__)

OUTPUT_FILE_BASE = "zz_generated.openapi"


@dataclass
class OpenAPIGenArgs:
    """Arguments for a single generator run."""

    input_dirs: list[str] = field(default_factory=list)
    output_base: str = ""
    output_package: str = ""
    output_file_base: str = OUTPUT_FILE_BASE
    header_file: str = ""
    generated_by_comment_template: str = ""
    report_filename: str = "-"

    def to_cli(self) -> list[str]:
        """Render as ``openapi-gen`` command-line flags."""
        return [
            f"--input-dirs={','.join(self.input_dirs)}",
            f"--output-base={self.output_base}",
            f"--output-package={self.output_package}",
            f"--output-file-base={self.output_file_base}",
            f"--go-header-file={self.header_file}",
            f"--report-filename={self.report_filename}",
            "--logtostderr=true",
        ]


class SchemaGenerator(Protocol):
    """External schema generator."""

    def generate(self, args: OpenAPIGenArgs) -> None:
        """Run the generator, raising GeneratorExecutionError on failure."""
        ...


class OpenAPIGenCLI:
    """Run the ``openapi-gen`` binary as a subprocess."""

    def __init__(self, project: ProjectRoot, binary: str = "openapi-gen") -> None:
        self.project = project
        self.binary = binary

    def generate(self, args: OpenAPIGenArgs) -> None:
        cmd = [self.binary, *args.to_cli()]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(  # noqa: S603
                cmd,
                cwd=self.project.path,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise GeneratorExecutionError(
                f"openapi-gen generator error: {e}", input=",".join(args.input_dirs)
            ) from e

        if result.stdout:
            # API rule violations are reported on stdout.
            logger.info("%s", result.stdout.rstrip())
        if result.returncode != 0:
            raise GeneratorExecutionError(
                "openapi-gen generator error",
                input=",".join(args.input_dirs),
                exit_code=result.returncode,
                stderr=result.stderr.strip() or None,
            )


def relative_api_path(fq_api: str, apis_dir: str = APIS_DIR) -> str:
    """Turn a fully-qualified API path into a ``./``-prefixed relative path.

    Raises:
        GeneratorValidationError: If the path does not contain ``apis_dir``
    """
    idx = fq_api.find(apis_dir)
    if idx < 0:
        raise GeneratorValidationError(
            "openapi-gen argument validation error: input path is outside the API tree",
            input=fq_api,
            apis_dir=apis_dir,
        )
    return "./" + fq_api[idx:]


def build_args(
    header_file: str,
    fq_api: str,
    project: ProjectRoot,
    apis_dir: str = APIS_DIR,
) -> OpenAPIGenArgs:
    """Build generator arguments for one API package."""
    api_path = relative_api_path(fq_api, apis_dir)
    return OpenAPIGenArgs(
        input_dirs=[api_path],
        # Our own output location and header replace the generator defaults.
        output_base="",
        generated_by_comment_template="",
        output_file_base=OUTPUT_FILE_BASE,
        output_package=str(project.join(api_path)),
        header_file=header_file,
        report_filename="-",
    )


def validate_args(args: OpenAPIGenArgs) -> None:
    """Reject generator arguments that cannot produce output.

    Raises:
        GeneratorValidationError: On the first invalid argument
    """
    context = {"input": ",".join(args.input_dirs) or None}
    if not args.input_dirs or not all(args.input_dirs):
        raise GeneratorValidationError(
            "openapi-gen argument validation error: input directories cannot be empty",
            **context,
        )
    if not args.output_file_base:
        raise GeneratorValidationError(
            "openapi-gen argument validation error: output file base name cannot be empty",
            **context,
        )
    if not args.output_package:
        raise GeneratorValidationError(
            "openapi-gen argument validation error: output package cannot be empty",
            **context,
        )
    if not args.header_file or not Path(args.header_file).is_file():
        raise GeneratorValidationError(
            "openapi-gen argument validation error: header file not found",
            header=args.header_file or None,
            **context,
        )


def openapi_gen(
    header_file: str,
    fq_apis: list[str],
    *,
    project: ProjectRoot,
    generator: SchemaGenerator,
    apis_dir: str = APIS_DIR,
) -> int:
    """Run the generator once for every distinct API package.

    Stops at the first failure; packages generated before it keep their
    output.

    Returns:
        Number of generator invocations
    """
    count = 0
    for fq_api in dict.fromkeys(fq_apis):
        args = build_args(header_file, fq_api, project, apis_dir)
        validate_args(args)
        logger.info("Generating OpenAPI code for %s", args.input_dirs[0])
        generator.generate(args)
        count += 1
    return count
