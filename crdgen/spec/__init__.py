# noqa: D104
"""API tree discovery and CRD manifest models."""

from crdgen.spec.apis import GroupVersionMap, api_package, create_fq_apis, parse_group_subpackages
from crdgen.spec.crd import CRDDescriptor, CRDNames, CRDSpec, CRDVersion, CustomResourceDefinition
from crdgen.spec.loader import load_crds, resolve_descriptor

__all__ = [
    "GroupVersionMap",
    "api_package",
    "create_fq_apis",
    "parse_group_subpackages",
    "CRDDescriptor",
    "CRDNames",
    "CRDSpec",
    "CRDVersion",
    "CustomResourceDefinition",
    "load_crds",
    "resolve_descriptor",
]
