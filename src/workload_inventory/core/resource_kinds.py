"""Resource kind registry.

One adapter per supported workload kind. An adapter knows how to fetch
its objects through :class:`K8sClient` and how to reduce one raw object
to a :class:`PodController`. Supporting another kind means writing one
more adapter and adding it to ``RESOURCE_KINDS``.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from workload_inventory.config.settings import settings
from workload_inventory.core.k8s_client import K8sClient
from workload_inventory.core.status import rollout_status
from workload_inventory.exceptions import UnsupportedKind
from workload_inventory.models import STATUS_READY
from workload_inventory.models.pod import PodTemplate
from workload_inventory.models.workload import PodController


def _metadata(obj: dict) -> dict:
    return obj.get("metadata", None) or {}


def _spec(obj: dict) -> dict:
    return obj.get("spec", None) or {}


def _status(obj: dict) -> dict:
    return obj.get("status", None) or {}


def _dig(d: dict, *keys: str) -> Any:
    for key in keys:
        if not isinstance(d, dict):
            return None
        d = d.get(key)
    return d


class ResourceKind(abc.ABC):
    """Adapter for one workload kind."""

    tag: str = ""
    kind: str = ""
    api_version: str = ""

    @abc.abstractmethod
    def get_pod_controller(self, k8s: K8sClient, namespace: str, name: str) -> PodController:
        """Fetch one object; NotFoundError/TransportError propagate."""

    @abc.abstractmethod
    def get_pod_controllers(self, k8s: K8sClient, namespace: str) -> list[PodController]:
        """Fetch every object of this kind in a namespace."""

    @abc.abstractmethod
    def status_of(self, obj: dict) -> str:
        """Derive the rollout status of a raw object."""

    @abc.abstractmethod
    def make_pod_controller(self, obj: dict) -> PodController:
        """Reduce a raw object to a PodController, without any API call."""

    def _base(self, obj: dict, **kwargs: Any) -> PodController:
        metadata = _metadata(obj)
        return PodController(
            api_version=obj.get("apiVersion") or self.api_version,
            kind=self.kind,
            name=metadata.get("name", "") or "",
            namespace=metadata.get("namespace", "") or "",
            status=self.status_of(obj),
            labels=dict(metadata.get("labels", None) or {}),
            annotations=dict(metadata.get("annotations", None) or {}),
            **kwargs,
        )


class _TypedKind(ResourceKind):
    """A built-in kind with a pod template, served by a typed API."""

    def get_pod_controller(self, k8s: K8sClient, namespace: str, name: str) -> PodController:
        return self.make_pod_controller(k8s.read_namespaced(self.tag, namespace, name))

    def get_pod_controllers(self, k8s: K8sClient, namespace: str) -> list[PodController]:
        return [self.make_pod_controller(obj) for obj in k8s.list_namespaced(self.tag, namespace)]

    def pod_template_of(self, obj: dict) -> dict:
        return _spec(obj).get("template", None) or {}

    def make_pod_controller(self, obj: dict) -> PodController:
        return self._base(obj, pod_template=PodTemplate.from_dict(self.pod_template_of(obj)))


class DeploymentKind(_TypedKind):
    tag = "deployment"
    kind = "Deployment"
    api_version = "apps/v1"

    def status_of(self, obj: dict) -> str:
        replicas = _spec(obj).get("replicas")
        # The API server defaults an unset replica count to 1
        desired = 1 if replicas is None else replicas
        return rollout_status(
            _metadata(obj).get("generation") or 0,
            _status(obj).get("observedGeneration") or 0,
            _status(obj).get("updatedReplicas") or 0,
            desired,
        )


class DaemonSetKind(_TypedKind):
    tag = "daemonset"
    kind = "DaemonSet"
    api_version = "apps/v1"

    def status_of(self, obj: dict) -> str:
        status = _status(obj)
        return rollout_status(
            _metadata(obj).get("generation") or 0,
            status.get("observedGeneration") or 0,
            status.get("updatedNumberScheduled") or 0,
            status.get("desiredNumberScheduled") or 0,
        )


class StatefulSetKind(_TypedKind):
    tag = "statefulset"
    kind = "StatefulSet"
    api_version = "apps/v1"

    def status_of(self, obj: dict) -> str:
        replicas = _spec(obj).get("replicas")
        desired = 1 if replicas is None else replicas
        return rollout_status(
            _metadata(obj).get("generation") or 0,
            _status(obj).get("observedGeneration") or 0,
            _status(obj).get("updatedReplicas") or 0,
            desired,
        )


class CronJobKind(_TypedKind):
    tag = "cronjob"
    kind = "CronJob"
    api_version = "batch/v1"

    def status_of(self, obj: dict) -> str:
        # Nothing runs between schedules, so there is no rollout to track
        return STATUS_READY

    def pod_template_of(self, obj: dict) -> dict:
        return _dig(obj, "spec", "jobTemplate", "spec", "template") or {}


class FluxHelmReleaseKind(ResourceKind):
    """Flux's chart release custom resource.

    Its containers come from ``spec.values``, whose shape depends on the
    chart, so no pod template is built here.
    """

    tag = "fluxhelmrelease"
    kind = "FluxHelmRelease"

    @property
    def api_version(self) -> str:  # type: ignore[override]
        return settings.flux_helm_api_version

    def get_pod_controller(self, k8s: K8sClient, namespace: str, name: str) -> PodController:
        obj = k8s.read_custom_object(
            settings.flux_helm_group,
            settings.flux_helm_version,
            settings.flux_helm_plural,
            namespace,
            name,
        )
        return self.make_pod_controller(obj)

    def get_pod_controllers(self, k8s: K8sClient, namespace: str) -> list[PodController]:
        objects = k8s.list_custom_objects(
            settings.flux_helm_group,
            settings.flux_helm_version,
            settings.flux_helm_plural,
            namespace,
        )
        return [self.make_pod_controller(obj) for obj in objects]

    def status_of(self, obj: dict) -> str:
        # TODO: derive readiness from the release's status conditions once
        # the operator reports them; until then every release reads as ready.
        return STATUS_READY

    def make_pod_controller(self, obj: dict) -> PodController:
        spec = _spec(obj)
        return self._base(
            obj,
            values=spec.get("values", None) or {},
            chart_path=spec.get("chartGitPath", "") or "",
        )


def _build_registry() -> Mapping[str, ResourceKind]:
    kinds: dict[str, ResourceKind] = {
        "cronjob": CronJobKind(),
        "daemonset": DaemonSetKind(),
        "deployment": DeploymentKind(),
        "statefulset": StatefulSetKind(),
        "fluxhelmrelease": FluxHelmReleaseKind(),
    }
    return MappingProxyType(kinds)


# Built once at import, read-only afterwards
RESOURCE_KINDS: Mapping[str, ResourceKind] = _build_registry()


def get_kind(tag: str) -> ResourceKind:
    """Look up the adapter for a kind tag such as ``deployment`` or ``Deployment``."""
    try:
        return RESOURCE_KINDS[tag.lower()]
    except KeyError:
        raise UnsupportedKind(f"unsupported resource kind {tag!r}") from None
