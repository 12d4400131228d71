"""CRD manifest scaffold file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment
import yaml

from crdgen.errors import ScaffoldWriteError
from crdgen.scaffold.engine import ProjectConfig, ScaffoldFile
from crdgen.scaffold.resource import Resource
from crdgen.settings import CRDS_DIR


class CRDFile(ScaffoldFile):
    """The ``deploy/crds/<group>_<version>_<kind>_crd.yaml`` manifest.

    A new manifest is rendered from the template. An existing one keeps its
    content and only gains the resource's version in ``spec.versions``.
    """

    template_name = "crd.yaml.j2"

    def __init__(
        self, resource: Resource, *, is_operator_go: bool = False, crds_dir: str = CRDS_DIR
    ) -> None:
        self.resource = resource
        self.is_operator_go = is_operator_go
        self.crds_dir = crds_dir

    def path(self) -> Path:
        r = self.resource
        return Path(self.crds_dir) / f"{r.full_group}_{r.version}_{r.lower_kind}_crd.yaml"

    def context(self, cfg: ProjectConfig) -> dict[str, Any]:
        return {
            **super().context(cfg),
            "resource": self.resource,
            "is_operator_go": self.is_operator_go,
        }

    def render(self, env: Environment, cfg: ProjectConfig, existing: str | None) -> str | None:
        if existing is None:
            return super().render(env, cfg, existing)
        return self._merge_version(existing)

    def _merge_version(self, existing: str) -> str | None:
        try:
            data = yaml.safe_load(existing) or {}
        except yaml.YAMLError as e:
            raise ScaffoldWriteError(f"Invalid YAML syntax: {e}", path=self.path()) from e
        spec = data.get("spec") if isinstance(data, dict) else None
        if not isinstance(spec, dict):
            raise ScaffoldWriteError("CRD manifest has no spec", path=self.path())

        version = self.resource.version
        versions = spec.get("versions") or []
        if not isinstance(versions, list):
            raise ScaffoldWriteError("spec.versions must be a list", path=self.path())
        spec["versions"] = versions
        if any(isinstance(v, dict) and v.get("name") == version for v in versions):
            return None
        # The first version listed stays the storage version.
        versions.append({"name": version, "served": True, "storage": not versions})
        if not spec.get("version"):
            spec["version"] = version
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
