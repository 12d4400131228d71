"""Resource identity used to scaffold files for a CRD kind."""

from __future__ import annotations

from dataclasses import dataclass
import re

from crdgen.errors import ResourceConstructionError

VERSION_RE = re.compile(r"^v[1-9][0-9]*((alpha|beta)[1-9][0-9]*)?$")

_PLURAL_EXCEPTIONS = {
    "Endpoints": "Endpoints",
}
_VOWELS = frozenset("aeiou")


def pluralize(kind: str) -> str:
    """Return the lower-case English plural of a kind name."""
    if kind in _PLURAL_EXCEPTIONS:
        return _PLURAL_EXCEPTIONS[kind].lower()
    if len(kind) < 2:
        return kind.lower()

    last, prev = kind[-1], kind[-2].lower()
    if last in "sxz" or (last == "h" and prev in "cs"):
        plural = kind + "es"
    elif last == "y" and prev not in _VOWELS:
        plural = kind[:-1] + "ies"
    elif last == "f":
        plural = kind[:-1] + "ves"
    elif last == "e" and prev == "f":
        plural = kind[:-2] + "ves"
    else:
        plural = kind + "s"
    return plural.lower()


@dataclass(frozen=True)
class Resource:
    """A validated group/version/kind with derived names."""

    api_version: str
    kind: str
    full_group: str
    group: str
    version: str
    lower_kind: str
    plural: str


def new_resource(api_version: str, kind: str) -> Resource:
    """Build a Resource from ``<full group>/<version>`` and a kind.

    Raises:
        ResourceConstructionError: If any part is empty or malformed
    """
    ctx = {"api_version": api_version or None, "kind": kind or None}
    if not api_version:
        raise ResourceConstructionError("api-version cannot be empty", **ctx)
    if not kind:
        raise ResourceConstructionError("kind cannot be empty", **ctx)

    parts = api_version.split("/")
    if len(parts) != 2 or not parts[0]:
        raise ResourceConstructionError("full group cannot be empty", **ctx)
    full_group, version = parts
    group = full_group.split(".")[0]
    if not group:
        raise ResourceConstructionError("group cannot be empty", **ctx)
    if not version:
        raise ResourceConstructionError("version cannot be empty", **ctx)
    if not VERSION_RE.match(version):
        raise ResourceConstructionError(
            "version is not in the correct Kubernetes version format, ex. v1alpha1", **ctx
        )
    if not kind[0].isupper():
        raise ResourceConstructionError("kind must start with an uppercase character", **ctx)

    return Resource(
        api_version=api_version,
        kind=kind,
        full_group=full_group,
        group=group,
        version=version,
        lower_kind=kind.lower(),
        plural=pluralize(kind),
    )
