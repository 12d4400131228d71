"""Template-driven scaffold engine.

Files are described by ``ScaffoldFile`` objects and rendered with Jinja2
into the project tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any, Literal, Protocol

from jinja2 import Environment, FileSystemLoader, TemplateError

from crdgen.errors import ScaffoldWriteError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

IfExists = Literal["overwrite", "skip", "error"]


@dataclass(frozen=True)
class ProjectConfig:
    """Project-wide values available to every template."""

    repo: str
    abs_project_path: Path
    project_name: str


@dataclass
class ScaffoldReport:
    """Tracks what was created, updated, or left alone."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    existing: list[str] = field(default_factory=list)


class ScaffoldFile:
    """A single file produced by the scaffold engine."""

    template_name: str = ""
    if_exists: IfExists = "overwrite"

    def path(self) -> Path:
        """Project-relative destination of the file."""
        raise NotImplementedError

    def context(self, cfg: ProjectConfig) -> dict[str, Any]:
        return {
            "repo": cfg.repo,
            "project_name": cfg.project_name,
        }

    def render(self, env: Environment, cfg: ProjectConfig, existing: str | None) -> str | None:
        """Return the new file content, or None to leave the file unchanged."""
        template = env.get_template(self.template_name)
        return template.render(**self.context(cfg))


class Scaffolder(Protocol):
    """Anything that can materialize scaffold files."""

    def execute(self, cfg: ProjectConfig, *files: ScaffoldFile) -> None: ...


class Scaffold:
    """Render scaffold files into the project tree."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR) -> None:
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,  # noqa: S701
        )
        self.report = ScaffoldReport()

    def execute(self, cfg: ProjectConfig, *files: ScaffoldFile) -> None:
        for scaffold_file in files:
            self._write(cfg, scaffold_file)

    def _write(self, cfg: ProjectConfig, scaffold_file: ScaffoldFile) -> None:
        rel_path = scaffold_file.path()
        dest = cfg.abs_project_path / rel_path
        existing: str | None = None

        if dest.exists():
            if scaffold_file.if_exists == "skip":
                self.report.existing.append(str(rel_path))
                return
            if scaffold_file.if_exists == "error":
                raise ScaffoldWriteError("file already exists", path=rel_path)
            try:
                existing = dest.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                raise ScaffoldWriteError(f"file is not valid UTF-8: {e}", path=rel_path) from e
            except OSError as e:
                raise ScaffoldWriteError(f"failed to read file: {e}", path=rel_path) from e

        try:
            content = scaffold_file.render(self.env, cfg, existing)
        except TemplateError as e:
            raise ScaffoldWriteError(f"failed to render template: {e}", path=rel_path) from e

        if content is None or content == existing:
            self.report.existing.append(str(rel_path))
            return

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ScaffoldWriteError(f"failed to write file: {e}", path=rel_path) from e

        if existing is None:
            self.report.created.append(str(rel_path))
            logger.info("Created %s", rel_path)
        else:
            self.report.updated.append(str(rel_path))
            logger.info("Updated %s", rel_path)
