# noqa: D104
"""Scaffolding of supporting files for CRD kinds."""

from __future__ import annotations

from crdgen.scaffold.crd import CRDFile
from crdgen.scaffold.engine import (
    ProjectConfig,
    Scaffold,
    Scaffolder,
    ScaffoldFile,
    ScaffoldReport,
)
from crdgen.scaffold.resource import Resource, new_resource
from crdgen.settings import CRDS_DIR
from crdgen.spec.crd import CRDDescriptor


def do_scaffolding(
    descriptor: CRDDescriptor,
    scaffolder: Scaffolder,
    cfg: ProjectConfig,
    *,
    is_operator_go: bool = False,
    crds_dir: str = CRDS_DIR,
) -> None:
    """Scaffold the CRD manifest for one descriptor."""
    resource = new_resource(descriptor.api_version, descriptor.kind)
    scaffolder.execute(cfg, CRDFile(resource, is_operator_go=is_operator_go, crds_dir=crds_dir))


__all__ = [
    "CRDFile",
    "ProjectConfig",
    "Resource",
    "Scaffold",
    "ScaffoldFile",
    "ScaffoldReport",
    "Scaffolder",
    "do_scaffolding",
    "new_resource",
]
