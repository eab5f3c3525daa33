"""Pod template models shared by the typed workload kinds."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ContainerPort:
    container_port: int = 0
    name: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ContainerPort:
        return cls(
            container_port=d.get("containerPort", 0),
            name=d.get("name", "") or "",
        )


@dataclass
class ContainerSpec:
    name: str = ""
    image: str = ""
    args: list[str] = field(default_factory=list)
    ports: list[ContainerPort] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> ContainerSpec:
        # Entries sourced via valueFrom carry no literal value
        env = {
            e.get("name", ""): e.get("value", "") or ""
            for e in d.get("env", None) or []
        }
        return cls(
            name=d.get("name", "") or "",
            image=d.get("image", "") or "",
            args=list(d.get("args", None) or []),
            ports=[ContainerPort.from_dict(p) for p in d.get("ports", None) or []],
            env=env,
        )


@dataclass
class PodSpec:
    containers: list[ContainerSpec] = field(default_factory=list)
    image_pull_secrets: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> PodSpec:
        if not d:
            return cls()
        return cls(
            containers=[ContainerSpec.from_dict(c) for c in d.get("containers", None) or []],
            image_pull_secrets=[
                s.get("name", "") for s in d.get("imagePullSecrets", None) or []
            ],
        )


@dataclass
class PodTemplate:
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    spec: PodSpec = field(default_factory=PodSpec)

    @property
    def containers(self) -> list[ContainerSpec]:
        return self.spec.containers

    @classmethod
    def from_dict(cls, d: dict) -> PodTemplate:
        if not d:
            return cls()
        metadata = d.get("metadata", None) or {}
        return cls(
            labels=dict(metadata.get("labels", None) or {}),
            annotations=dict(metadata.get("annotations", None) or {}),
            spec=PodSpec.from_dict(d.get("spec", None) or {}),
        )
