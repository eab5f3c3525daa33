"""winv get <resource-id> - Show one workload."""

from __future__ import annotations

from typing import Optional

import typer

from workload_inventory.cli.options import ContextOption, OutputOption
from workload_inventory.core.cluster import Cluster
from workload_inventory.core.k8s_client import K8sClient
from workload_inventory.exceptions import NotFoundError, WorkloadInventoryError
from workload_inventory.output.formatters import output_workload

app = typer.Typer()


@app.callback(invoke_without_command=True)
def get(
    resource_id: str = typer.Argument(help="Resource id, e.g. default:deployment/web"),
    output: str = OutputOption,
    context: Optional[str] = ContextOption,
) -> None:
    """Show the status and images of a single workload."""
    cluster = Cluster(K8sClient(context=context))
    try:
        workload = cluster.get_workload(resource_id)
    except NotFoundError:
        typer.echo(f"Workload '{resource_id}' not found.", err=True)
        raise typer.Exit(code=1)
    except WorkloadInventoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    output_workload(workload, output)
