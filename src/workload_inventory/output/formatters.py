"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json

import yaml
from rich.console import Console

from workload_inventory.models import ResourceID
from workload_inventory.models.workload import Workload

console = Console()


def output_workloads(workloads: list[Workload], fmt: str, title: str = "Workloads") -> None:
    if fmt == "json":
        data = [w.to_dict() for w in workloads]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [w.to_dict() for w in workloads]
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        from workload_inventory.output.tables import workload_list_table
        console.print(workload_list_table(workloads, title=title))


def output_workload(workload: Workload, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(workload.to_dict(), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(workload.to_dict(), default_flow_style=False, sort_keys=False))
    else:
        from workload_inventory.output.tables import workload_list_table
        console.print(workload_list_table([workload], title=str(workload.id)))


def output_images(inventory: dict[str, list[ResourceID]], fmt: str) -> None:
    data = {image: [str(i) for i in ids] for image, ids in inventory.items()}
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False))
    else:
        from workload_inventory.output.tables import image_inventory_table
        console.print(image_inventory_table(inventory))
