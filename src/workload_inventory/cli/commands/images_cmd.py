"""winv images - Show which workloads run which images."""

from __future__ import annotations

from typing import Optional

import typer

from workload_inventory.cli.options import ContextOption, NamespaceOption, OutputOption
from workload_inventory.core.cluster import Cluster, image_inventory
from workload_inventory.core.k8s_client import K8sClient
from workload_inventory.exceptions import WorkloadInventoryError
from workload_inventory.output.formatters import output_images

app = typer.Typer()


@app.callback(invoke_without_command=True)
def images(
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
) -> None:
    """List every running image and the workloads that use it."""
    cluster = Cluster(K8sClient(context=context))
    try:
        workloads = cluster.all_workloads(namespace=namespace)
    except WorkloadInventoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    output_images(image_inventory(workloads), output)
