"""Turn pod controllers into the normalized workload view."""

from __future__ import annotations

import logging

from workload_inventory.core.chart_values import containers_from_values
from workload_inventory.exceptions import ImageRefError
from workload_inventory.models import ResourceID
from workload_inventory.models.image import ImageRef
from workload_inventory.models.pod import PodTemplate
from workload_inventory.models.workload import (
    Container,
    ContainersOrExcuse,
    PodController,
    Workload,
)

logger = logging.getLogger(__name__)


def project_pod_template(template: PodTemplate) -> ContainersOrExcuse:
    """Parse every container image of a pod template.

    All or nothing: the first image that fails to parse discards the
    containers collected so far and its error becomes the excuse.
    """
    containers: list[Container] = []
    for spec in template.containers:
        try:
            ref = ImageRef.parse(spec.image)
        except ImageRefError as e:
            return ContainersOrExcuse(excuse=str(e))
        containers.append(Container(name=spec.name, image=ref))
    return ContainersOrExcuse(containers=containers)


def project_chart_values(pc: PodController) -> ContainersOrExcuse:
    """Find the containers of a chart release in its values."""
    try:
        found = containers_from_values(pc.values, pc.chart_path, pc.name)
    except ImageRefError as e:
        logger.debug("Cannot read images of %s/%s: %s", pc.namespace, pc.name, e)
        return ContainersOrExcuse(excuse=str(e))
    # Sub-chart blocks that declare no image are not containers
    return ContainersOrExcuse(containers=[c for c in found if c.image])


def to_workload(pc: PodController, resource_id: ResourceID | None = None) -> Workload:
    """Build the normalized view of ``pc``, keyed by ``resource_id`` if given."""
    if pc.pod_template is not None:
        containers = project_pod_template(pc.pod_template)
    else:
        containers = project_chart_values(pc)
    return Workload(
        id=resource_id or pc.resource_id(),
        status=pc.status,
        containers=containers,
        labels=pc.labels,
        annotations=pc.annotations,
    )
