"""Status color map."""

from workload_inventory.models import STATUS_READY, STATUS_UPDATING

STATUS_COLORS: dict[str, str] = {
    STATUS_READY: "green",
    STATUS_UPDATING: "yellow",
}

# Anything else is a rollout in progress, e.g. "1 out of 3 updated"
PROGRESS_COLOR = "cyan"


def styled_status(status: str) -> str:
    color = STATUS_COLORS.get(status, PROGRESS_COLOR)
    return f"[{color}]{status}[/{color}]"


def styled_excuse(excuse: str) -> str:
    return f"[red]{excuse}[/red]"
