"""winv inspect <file> - Normalize workloads from a local manifest."""

from __future__ import annotations

from pathlib import Path

import typer
import yaml

from workload_inventory.cli.options import OutputOption
from workload_inventory.output.formatters import output_workloads
from workload_inventory.utils.manifest_parser import load_workloads

app = typer.Typer()


@app.callback(invoke_without_command=True)
def inspect(
    path: Path = typer.Argument(help="YAML manifest file, may hold several documents"),
    output: str = OutputOption,
    namespace: str = typer.Option("default", "--namespace", "-n", help="Namespace for documents that set none"),
) -> None:
    """Show the status and images of the workloads declared in a file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=1)
    try:
        workloads = load_workloads(text, default_namespace=namespace)
    except yaml.YAMLError as e:
        typer.echo(f"Invalid YAML in {path}: {e}", err=True)
        raise typer.Exit(code=1)
    output_workloads(workloads, output, title=str(path))
