"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from workload_inventory.config.settings import settings

app = typer.Typer(
    name="winv",
    help="Workload Inventory - Readiness and running images of cluster workloads.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from workload_inventory.cli.commands.list_cmd import app as list_app
    from workload_inventory.cli.commands.get_cmd import app as get_app
    from workload_inventory.cli.commands.images_cmd import app as images_app
    from workload_inventory.cli.commands.inspect_cmd import app as inspect_app

    app.add_typer(list_app, name="list", help="List workloads")
    app.add_typer(get_app, name="get", help="Show one workload")
    app.add_typer(images_app, name="images", help="Show which workloads run which images")
    app.add_typer(inspect_app, name="inspect", help="Normalize workloads from a manifest file")


_register_commands()


def main() -> None:
    app()
