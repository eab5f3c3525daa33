"""Rollout status of replicated workloads."""

from __future__ import annotations

from workload_inventory.models import STATUS_READY, STATUS_UPDATING


def rollout_status(
    generation: int,
    observed_generation: int,
    updated: int,
    desired: int,
) -> str:
    """Classify a workload from its generation and replica counters.

    Returns ``"updating"`` while the controller has not yet observed the
    latest definition, ``"ready"`` once every desired replica is updated,
    and ``"<updated> out of <desired> updated"`` in between.
    """
    if observed_generation < generation:
        return STATUS_UPDATING
    if updated == desired:
        return STATUS_READY
    return "%d out of %d updated" % (updated, desired)
