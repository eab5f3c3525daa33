"""Workload models: the intermediate pod controller and the normalized view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from workload_inventory.models import ResourceID
from workload_inventory.models.image import ImageRef
from workload_inventory.models.pod import PodTemplate


@dataclass(frozen=True)
class Container:
    name: str
    image: ImageRef


@dataclass
class ContainersOrExcuse:
    """Either the full container list of a workload, or why there is none."""

    containers: list[Container] = field(default_factory=list)
    excuse: str = ""

    @property
    def ok(self) -> bool:
        return not self.excuse


@dataclass
class PodController:
    """A fetched workload reduced to what every kind has in common.

    Typed kinds carry a ``pod_template``; chart releases carry ``values``
    and ``chart_path`` instead.
    """

    api_version: str
    kind: str
    name: str
    namespace: str
    status: str
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    pod_template: PodTemplate | None = None
    values: dict[str, Any] | None = None
    chart_path: str = ""

    def resource_id(self) -> ResourceID:
        return ResourceID(namespace=self.namespace, kind=self.kind, name=self.name)


@dataclass
class Workload:
    id: ResourceID
    status: str
    containers: ContainersOrExcuse = field(default_factory=ContainersOrExcuse)
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    @property
    def images(self) -> list[ImageRef]:
        return [c.image for c in self.containers.containers]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": str(self.id),
            "namespace": self.id.namespace,
            "kind": self.id.kind,
            "name": self.id.name,
            "status": self.status,
            "containers": [
                {"name": c.name, "image": str(c.image)}
                for c in self.containers.containers
            ],
        }
        if self.containers.excuse:
            data["excuse"] = self.containers.excuse
        return data
