"""High-level workload get / list operations against a cluster."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from workload_inventory.config.settings import settings
from workload_inventory.core.k8s_client import K8sClient
from workload_inventory.core.normalizer import to_workload
from workload_inventory.core.resource_kinds import RESOURCE_KINDS, get_kind
from workload_inventory.exceptions import NotFoundError, TransportError, UnsupportedKind
from workload_inventory.models import ResourceID
from workload_inventory.models.workload import PodController, Workload

logger = logging.getLogger(__name__)


class Cluster:
    """Read-only view of the workloads running in a cluster."""

    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def get_workload(self, resource_id: ResourceID | str) -> Workload:
        """Fetch and normalize a single workload.

        Raises UnsupportedKind, NotFoundError or TransportError.
        """
        if isinstance(resource_id, str):
            resource_id = ResourceID.parse(resource_id)
        kind = get_kind(resource_id.kind)
        pc = kind.get_pod_controller(self.k8s, resource_id.namespace, resource_id.name)
        return to_workload(pc, resource_id)

    def some_workloads(self, resource_ids: Iterable[ResourceID]) -> list[Workload]:
        """Fetch the given workloads, skipping unsupported or missing ones.

        A transport failure for one id is logged as a warning and does not
        stop the others from being fetched.
        """
        workloads: list[Workload] = []
        for rid in resource_ids:
            try:
                workloads.append(self.get_workload(rid))
            except (UnsupportedKind, NotFoundError) as e:
                logger.debug("Skipping %s: %s", rid, e)
            except TransportError as e:
                logger.warning("Cannot fetch %s: %s", rid, e)
        return workloads

    def all_workloads(
        self,
        namespace: str | None = None,
        kinds: Iterable[str] | None = None,
    ) -> list[Workload]:
        """List every workload, in one namespace or across all of them.

        Kinds whose API is not served by the cluster are skipped, as are
        cluster add-ons. A kind that cannot be listed in a namespace, for
        instance because access is forbidden, is logged as a warning and
        the remaining kinds are still listed. Failing to list namespaces
        raises TransportError.
        """
        adapters = [get_kind(k) for k in kinds] if kinds else list(RESOURCE_KINDS.values())
        namespaces = [namespace] if namespace else self.k8s.list_namespaces()

        workloads: list[Workload] = []
        for ns in namespaces:
            for adapter in adapters:
                try:
                    controllers = adapter.get_pod_controllers(self.k8s, ns)
                except NotFoundError:
                    logger.debug("Kind %s is not served in namespace %s", adapter.kind, ns)
                    continue
                except TransportError as e:
                    logger.warning("Cannot list %s in namespace %s: %s", adapter.kind, ns, e)
                    continue
                for pc in controllers:
                    if _is_addon(pc):
                        continue
                    workloads.append(to_workload(pc))

        workloads.sort(key=lambda w: w.id)
        return workloads


def _is_addon(pc: PodController) -> bool:
    return pc.labels.get(settings.addon_label) == "true"


def image_inventory(workloads: Iterable[Workload]) -> dict[str, list[ResourceID]]:
    """Map each running image to the workloads that run it."""
    inventory: dict[str, list[ResourceID]] = defaultdict(list)
    for w in workloads:
        for ref in w.images:
            if w.id not in inventory[str(ref)]:
                inventory[str(ref)].append(w.id)
    return dict(sorted(inventory.items()))
