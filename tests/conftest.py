"""Shared fixtures: a fake operator project and recording collaborators."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import yaml

from crdgen.errors import GeneratorExecutionError
from crdgen.generators.openapi import OpenAPIGenArgs
from crdgen.lib.env import ProjectRoot
from crdgen.scaffold import ProjectConfig, ScaffoldFile
from crdgen.settings import get_settings

MODULE = "github.com/example/app-operator"


class RecordingGenerator:
    """SchemaGenerator that records every run instead of executing it."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[OpenAPIGenArgs] = []
        self.fail_on = fail_on

    def generate(self, args: OpenAPIGenArgs) -> None:
        self.calls.append(args)
        if self.fail_on and self.fail_on in args.input_dirs[0]:
            raise GeneratorExecutionError("openapi-gen generator error", input=args.input_dirs[0])


class RecordingScaffolder:
    """Scaffolder that records every file it is asked to write."""

    def __init__(self) -> None:
        self.calls: list[tuple[ProjectConfig, ScaffoldFile]] = []

    def execute(self, cfg: ProjectConfig, *files: ScaffoldFile) -> None:
        self.calls.extend((cfg, f) for f in files)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator:
    """Isolate cached settings from the developer's environment."""

    for var in ("CRDGEN_PROJECT_ROOT", "CRDGEN_HEADER_FILE", "CRDGEN_APIS_DIR", "CRDGEN_CRDS_DIR"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_project(tmp_path: Path) -> ProjectRoot:
    """Provide a minimal operator project with an empty API and CRD tree."""

    root = tmp_path / "app-operator"
    (root / "build").mkdir(parents=True)
    (root / "build" / "Dockerfile").write_text("FROM scratch\n", encoding="utf-8")
    (root / "go.mod").write_text(f"module {MODULE}\n\ngo 1.13\n", encoding="utf-8")
    (root / "pkg" / "apis").mkdir(parents=True)
    (root / "deploy" / "crds").mkdir(parents=True)
    return ProjectRoot(root)


@pytest.fixture
def add_api() -> Callable[..., Path]:
    """Create ``pkg/apis/<group>/<version>/types.go`` in a project."""

    def _add(project: ProjectRoot, group: str, version: str) -> Path:
        version_dir = project.join("pkg", "apis", group, version)
        version_dir.mkdir(parents=True, exist_ok=True)
        (version_dir / "types.go").write_text(f"package {version}\n", encoding="utf-8")
        return version_dir

    return _add


@pytest.fixture
def write_crd() -> Callable[..., Path]:
    """Write a CRD manifest into ``deploy/crds``."""

    def _write(
        project: ProjectRoot,
        kind: str,
        group: str = "cache.example.com",
        version: str = "v1alpha1",
        versions: list[str] | None = None,
        filename: str | None = None,
    ) -> Path:
        spec: dict = {
            "group": group,
            "names": {"kind": kind, "plural": kind.lower() + "s"},
            "scope": "Namespaced",
        }
        if version:
            spec["version"] = version
        if versions is not None:
            spec["versions"] = [
                {"name": v, "served": True, "storage": i == 0} for i, v in enumerate(versions)
            ]
        manifest = {
            "apiVersion": "apiextensions.k8s.io/v1beta1",
            "kind": "CustomResourceDefinition",
            "metadata": {"name": f"{kind.lower()}s.{group}"},
            "spec": spec,
        }
        name = filename or f"{group}_{version or 'none'}_{kind.lower()}_crd.yaml"
        path = project.join("deploy", "crds", name)
        path.write_text(yaml.safe_dump(manifest, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def generator() -> RecordingGenerator:
    return RecordingGenerator()


@pytest.fixture
def scaffolder() -> RecordingScaffolder:
    return RecordingScaffolder()
