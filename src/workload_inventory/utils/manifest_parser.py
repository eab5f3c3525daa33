"""Parse multi-document YAML manifests into individual resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from workload_inventory.core.normalizer import to_workload
from workload_inventory.core.resource_kinds import RESOURCE_KINDS
from workload_inventory.models.workload import Workload


@dataclass
class ParsedResource:
    kind: str
    name: str
    namespace: str
    raw: dict[str, Any]


def _text(value: Any) -> str:
    # Null or non-string fields read as empty
    return value if isinstance(value, str) else ""


def parse_manifest(manifest: str) -> list[ParsedResource]:
    """Parse a multi-document YAML string into a list of ParsedResource."""
    resources: list[ParsedResource] = []
    if not manifest:
        return resources

    for doc in yaml.safe_load_all(manifest):
        if not doc or not isinstance(doc, dict):
            continue
        metadata = doc.get("metadata")
        if not isinstance(metadata, dict):
            metadata = {}
        resources.append(ParsedResource(
            kind=_text(doc.get("kind")),
            name=_text(metadata.get("name")),
            namespace=_text(metadata.get("namespace")),
            raw=doc,
        ))
    return resources


def load_workloads(manifest: str, default_namespace: str = "default") -> list[Workload]:
    """Normalize the workloads declared in a manifest, without a cluster.

    Documents of unsupported kinds, or without a kind or name, are ignored.
    """
    workloads: list[Workload] = []
    for res in parse_manifest(manifest):
        adapter = RESOURCE_KINDS.get(res.kind.lower())
        if adapter is None or not res.name:
            continue
        pc = adapter.make_pod_controller(res.raw)
        if not pc.namespace:
            pc.namespace = default_namespace
        workloads.append(to_workload(pc))
    return workloads
