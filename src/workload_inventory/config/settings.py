"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _default_request_timeout() -> int:
    """Seconds to wait on a single API call.

    Reads WINV_REQUEST_TIMEOUT; invalid values fall back to 30.
    """
    raw = os.environ.get("WINV_REQUEST_TIMEOUT", "")
    try:
        return int(raw) if raw else 30
    except ValueError:
        return 30


def _default_log_level() -> str:
    return os.environ.get("WINV_LOG_LEVEL", "WARNING").upper()


@dataclass
class Settings:
    request_timeout: int = field(default_factory=_default_request_timeout)
    log_level: str = field(default_factory=_default_log_level)
    default_output: str = "table"
    flux_helm_group: str = "helm.integrations.flux.weave.works"
    flux_helm_version: str = "v1alpha"
    flux_helm_plural: str = "fluxhelmreleases"
    # Workloads labelled "<addon_label>=true" belong to the cluster itself
    addon_label: str = "kubernetes.io/cluster-service"

    @property
    def flux_helm_api_version(self) -> str:
        return f"{self.flux_helm_group}/{self.flux_helm_version}"


# Global singleton
settings = Settings()
