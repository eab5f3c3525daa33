"""winv list - List workloads."""

from __future__ import annotations

from typing import List, Optional

import typer

from workload_inventory.cli.options import ContextOption, NamespaceOption, OutputOption
from workload_inventory.core.cluster import Cluster
from workload_inventory.core.k8s_client import K8sClient
from workload_inventory.exceptions import WorkloadInventoryError
from workload_inventory.output.formatters import output_workloads

app = typer.Typer()


@app.callback(invoke_without_command=True)
def list_workloads(
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    kind: Optional[List[str]] = typer.Option(
        None, "--kind", "-k", help="Only these kinds: deployment, daemonset, statefulset, cronjob, fluxhelmrelease",
    ),
) -> None:
    """List workloads with their status and images."""
    cluster = Cluster(K8sClient(context=context))
    try:
        workloads = cluster.all_workloads(namespace=namespace, kinds=kind or None)
    except WorkloadInventoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    output_workloads(workloads, output)
