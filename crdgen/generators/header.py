"""Header-comment template resolution for generated files."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
import tempfile
from typing import TypeVar

from crdgen.errors import GeneratorValidationError
from crdgen.lib.env import ProjectRoot
from crdgen.settings import BOILERPLATE_FILE, BUILD_BIN_DIR

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_with_header_file(
    fn: Callable[[str], T],
    project: ProjectRoot,
    header_file: Path | None = None,
) -> T:
    """Call ``fn`` with the path of the header template to use.

    An explicit ``header_file`` wins (relative paths are taken from the
    project root), then the project's boilerplate file.
    Without either, an empty temporary header is created under the build
    output dir and removed once ``fn`` returns.
    """
    if header_file is not None:
        if not header_file.is_absolute():
            header_file = project.join(header_file)
        if not header_file.is_file():
            raise GeneratorValidationError("header file not found", header=header_file)
        return fn(str(header_file))

    boilerplate = project.join(BOILERPLATE_FILE)
    if boilerplate.is_file():
        return fn(str(boilerplate))

    bin_dir = project.join(BUILD_BIN_DIR)
    bin_dir.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w", prefix="codegen-header", dir=bin_dir, delete=False
    ) as tmp:
        tmp_path = Path(tmp.name)
    logger.debug("Using empty header file %s", tmp_path)
    try:
        return fn(str(tmp_path))
    finally:
        tmp_path.unlink(missing_ok=True)
