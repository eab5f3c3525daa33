"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from workload_inventory.models import ResourceID
from workload_inventory.models.workload import Workload
from workload_inventory.output.themes import styled_excuse, styled_status


def workload_list_table(workloads: list[Workload], title: str = "Workloads") -> Table:
    table = Table(title=title, expand=True, show_lines=False)
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Container", style="magenta")
    table.add_column("Image")

    for w in workloads:
        status = styled_status(w.status)
        if w.containers.excuse:
            table.add_row(
                w.id.namespace, w.id.kind, w.id.name, status, "", styled_excuse(escape(w.containers.excuse)),
            )
            continue
        if not w.containers.containers:
            table.add_row(w.id.namespace, w.id.kind, w.id.name, status, "-", "-")
            continue
        # One row per container; identity columns only on the first
        for i, c in enumerate(w.containers.containers):
            if i == 0:
                table.add_row(w.id.namespace, w.id.kind, w.id.name, status, c.name, str(c.image))
            else:
                table.add_row("", "", "", "", c.name, str(c.image))
    return table


def image_inventory_table(inventory: dict[str, list[ResourceID]]) -> Table:
    table = Table(title="Images", expand=True)
    table.add_column("Image", style="bold")
    table.add_column("Workloads", style="cyan")
    for image, ids in inventory.items():
        table.add_row(image, "\n".join(str(i) for i in ids))
    return table
