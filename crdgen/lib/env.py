"""Project environment helpers.

Everything that depends on the operator project's location works from an
explicit ``ProjectRoot`` rather than the process working directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

from crdgen.errors import DiscoveryError, ProjectRootError
from crdgen.settings import get_settings

DOCKERFILE = Path("build") / "Dockerfile"
GO_MOD = "go.mod"
MANAGER_MAIN = Path("cmd") / "manager" / "main.go"

_MODULE_RE = re.compile(r"^module\s+(\S+)", re.MULTILINE)


@dataclass(frozen=True)
class ProjectRoot:
    """Absolute location of an operator project."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path).resolve())

    def join(self, *parts: str | Path) -> Path:
        return self.path.joinpath(*parts)

    @property
    def name(self) -> str:
        return self.path.name


def get_project_root(override: str | Path | None = None) -> ProjectRoot:
    """Return the project root, honoring CRDGEN_PROJECT_ROOT overrides."""

    if override is not None:
        return ProjectRoot(Path(override))
    configured = get_settings().project_root
    if configured is not None:
        return ProjectRoot(configured)
    return ProjectRoot(Path.cwd())


def check_project_root(project: ProjectRoot) -> None:
    """Ensure the project looks like an operator project root."""

    if not project.join(DOCKERFILE).is_file():
        raise ProjectRootError(
            f"must run from the project root, {DOCKERFILE} not found",
            path=project.path,
        )


def get_module_root(project: ProjectRoot) -> str:
    """Read the module import path from the project's go.mod."""

    go_mod = project.join(GO_MOD)
    try:
        content = go_mod.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DiscoveryError(f"{GO_MOD} is not valid UTF-8: {e}", path=go_mod) from e
    except OSError as e:
        raise DiscoveryError(f"failed to read {GO_MOD}: {e}", path=go_mod) from e
    match = _MODULE_RE.search(content)
    if not match:
        raise DiscoveryError(f"no module directive in {GO_MOD}", path=go_mod)
    return match.group(1)


def is_operator_go(project: ProjectRoot) -> bool:
    """Return True if the project is a Go operator."""

    return project.join(MANAGER_MAIN).is_file()
