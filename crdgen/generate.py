"""OpenAPI code-generation entrypoints.

A run has two phases. The first discovers every API group version, resolves
it to a package path and runs the schema generator once per package. Only
after it finishes does the second phase enumerate the CRD manifests and
scaffold each kind.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from pathlib import Path

from crdgen.generators.header import generate_with_header_file
from crdgen.generators.openapi import OpenAPIGenCLI, SchemaGenerator
from crdgen.generators.openapi import openapi_gen as run_generator
from crdgen.lib.env import ProjectRoot, check_project_root, get_module_root, is_operator_go
from crdgen.scaffold import ProjectConfig, Scaffold, Scaffolder, do_scaffolding
from crdgen.settings import Settings, get_settings
from crdgen.spec.apis import (
    api_package,
    create_fq_apis,
    format_group_versions,
    parse_group_subpackages,
)
from crdgen.spec.crd import CRDDescriptor
from crdgen.spec.loader import load_crds

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Output of the generation phase needed for scaffolding."""

    cfg: ProjectConfig
    crds: list[CRDDescriptor]
    crds_dir: str
    invocations: int


def pre_scaffold_setup(
    project: ProjectRoot,
    *,
    generator: SchemaGenerator | None = None,
    header_file: Path | None = None,
    settings: Settings | None = None,
) -> SetupResult:
    """Run OpenAPI generation and enumerate the project's CRDs."""
    settings = settings or get_settings()
    check_project_root(project)
    repo_pkg = get_module_root(project)

    gv_map = parse_group_subpackages(project.join(settings.apis_dir))
    logger.info(
        "Running OpenAPI code-generation for Custom Resource group versions: [%s]",
        format_group_versions(gv_map),
    )

    fq_apis = create_fq_apis(api_package(repo_pkg, settings.apis_dir), gv_map)
    if generator is None:
        generator = OpenAPIGenCLI(project, settings.generator_bin)
    invocations = generate_with_header_file(
        lambda hf: run_generator(
            hf, fq_apis, project=project, generator=generator, apis_dir=settings.apis_dir
        ),
        project,
        header_file if header_file is not None else settings.header_file,
    )

    cfg = ProjectConfig(
        repo=repo_pkg,
        abs_project_path=project.path,
        project_name=project.name,
    )
    crds = load_crds(project.join(settings.crds_dir))
    return SetupResult(
        cfg=cfg, crds=crds, crds_dir=settings.crds_dir, invocations=invocations
    )


def openapi_gen(
    project: ProjectRoot,
    *,
    generator: SchemaGenerator | None = None,
    scaffolder: Scaffolder | None = None,
    header_file: Path | None = None,
    settings: Settings | None = None,
) -> None:
    """Generate OpenAPI validation specs and scaffold every CRD once."""
    setup = pre_scaffold_setup(
        project, generator=generator, header_file=header_file, settings=settings
    )
    scaffolder = scaffolder or Scaffold()
    operator_go = is_operator_go(project)

    for crd in setup.crds:
        do_scaffolding(
            crd, scaffolder, setup.cfg, is_operator_go=operator_go, crds_dir=setup.crds_dir
        )

    logger.info("Code-generation complete.")


def openapi_gen_with_ignore(
    project: ProjectRoot,
    ignore_groups: Sequence[str],
    *,
    generator: SchemaGenerator | None = None,
    scaffolder: Scaffolder | None = None,
    header_file: Path | None = None,
    settings: Settings | None = None,
) -> None:
    """Generate OpenAPI validation specs, scaffolding CRDs per ignore entry.

    Each ignore entry is checked on its own: a CRD is scaffolded once for
    every entry its group differs from, so a group outside an ignore list of
    n entries is scaffolded n times.
    """
    setup = pre_scaffold_setup(
        project, generator=generator, header_file=header_file, settings=settings
    )
    scaffolder = scaffolder or Scaffold()
    operator_go = is_operator_go(project)

    for crd in setup.crds:
        for group in ignore_groups:
            if crd.group != group:
                do_scaffolding(
                    crd,
                    scaffolder,
                    setup.cfg,
                    is_operator_go=operator_go,
                    crds_dir=setup.crds_dir,
                )

    logger.info("Code-generation complete.")
