"""Data models for the workload inventory."""

from __future__ import annotations

from dataclasses import dataclass

from workload_inventory.exceptions import InvalidResourceID

STATUS_READY = "ready"
STATUS_UPDATING = "updating"


@dataclass(frozen=True, order=True)
class ResourceID:
    """Identifies one namespaced workload as ``namespace:kind/name``."""

    namespace: str
    kind: str
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", self.kind.lower())

    def __str__(self) -> str:
        return f"{self.namespace}:{self.kind}/{self.name}"

    @classmethod
    def parse(cls, s: str) -> ResourceID:
        namespace, sep, rest = s.partition(":")
        kind, slash, name = rest.partition("/")
        if not (sep and slash and namespace and kind and name) or "/" in name:
            raise InvalidResourceID(f"invalid resource id {s!r}, expected namespace:kind/name")
        return cls(namespace=namespace, kind=kind, name=name)
