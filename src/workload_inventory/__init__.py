"""Workload Inventory - readiness and image inventory of cluster workloads."""

__version__ = "0.1.0"
