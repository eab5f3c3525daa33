"""Kubernetes API wrapper."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import urllib3
from kubernetes import client, config
from kubernetes.client import ApiException

from workload_inventory.config.settings import settings
from workload_inventory.exceptions import NotFoundError, TransportError

logger = logging.getLogger(__name__)


@contextmanager
def api_errors(what: str) -> Iterator[None]:
    """Translate client failures into NotFoundError / TransportError."""
    try:
        yield
    except ApiException as e:
        if e.status == 404:
            raise NotFoundError(f"{what}: not found") from e
        raise TransportError(f"{what}: {e.status} {e.reason}") from e
    except urllib3.exceptions.HTTPError as e:
        raise TransportError(f"{what}: {e}") from e


class K8sClient:
    """Thin wrapper around the Kubernetes Python client.

    Every read returns the object as a plain dict in the API's JSON shape.
    """

    def __init__(self, context: str | None = None):
        self.context = context
        self._core_v1: client.CoreV1Api | None = None
        self._apps_v1: client.AppsV1Api | None = None
        self._batch_v1: client.BatchV1Api | None = None
        self._custom: client.CustomObjectsApi | None = None
        self._api_client: client.ApiClient | None = None

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException:
            logger.debug("No usable kubeconfig, trying in-cluster config")
            try:
                config.load_incluster_config()
            except config.ConfigException as e:
                raise TransportError(f"cannot configure Kubernetes client: {e}") from e
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def core_v1(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._core_v1 = client.CoreV1Api(api_client=self._load_config())
        return self._core_v1

    @property
    def apps_v1(self) -> client.AppsV1Api:
        if self._apps_v1 is None:
            self._apps_v1 = client.AppsV1Api(api_client=self._load_config())
        return self._apps_v1

    @property
    def batch_v1(self) -> client.BatchV1Api:
        if self._batch_v1 is None:
            self._batch_v1 = client.BatchV1Api(api_client=self._load_config())
        return self._batch_v1

    @property
    def custom(self) -> client.CustomObjectsApi:
        if self._custom is None:
            self._custom = client.CustomObjectsApi(api_client=self._load_config())
        return self._custom

    @property
    def active_context_name(self) -> str:
        if self.context:
            return self.context
        try:
            _, ctx = config.list_kube_config_contexts()
            return ctx.get("name", "unknown") if ctx else "unknown"
        except config.ConfigException:
            return "in-cluster"

    def _readers(self, kind: str) -> tuple[Callable[..., Any], Callable[..., Any]]:
        method_map = {
            "deployment": (
                self.apps_v1.read_namespaced_deployment,
                self.apps_v1.list_namespaced_deployment,
            ),
            "daemonset": (
                self.apps_v1.read_namespaced_daemon_set,
                self.apps_v1.list_namespaced_daemon_set,
            ),
            "statefulset": (
                self.apps_v1.read_namespaced_stateful_set,
                self.apps_v1.list_namespaced_stateful_set,
            ),
            "cronjob": (
                self.batch_v1.read_namespaced_cron_job,
                self.batch_v1.list_namespaced_cron_job,
            ),
        }
        methods = method_map.get(kind.lower())
        if methods is None:
            raise ValueError(f"no typed API for kind {kind!r}")
        return methods

    def _to_dict(self, obj: Any) -> dict:
        return self._load_config().sanitize_for_serialization(obj)

    def read_namespaced(self, kind: str, namespace: str, name: str) -> dict:
        """Get one typed workload (deployment, daemonset, statefulset, cronjob)."""
        read, _ = self._readers(kind)
        with api_errors(f"{kind} {namespace}/{name}"):
            result = read(name=name, namespace=namespace, _request_timeout=settings.request_timeout)
        return self._to_dict(result)

    def list_namespaced(self, kind: str, namespace: str) -> list[dict]:
        """List the typed workloads of one kind in a namespace."""
        _, list_ = self._readers(kind)
        with api_errors(f"{kind} in {namespace}"):
            result = list_(namespace=namespace, _request_timeout=settings.request_timeout)
        return [self._to_dict(item) for item in result.items]

    def read_custom_object(
        self,
        group: str,
        version: str,
        plural: str,
        namespace: str,
        name: str,
    ) -> dict:
        with api_errors(f"{plural}.{group} {namespace}/{name}"):
            return self.custom.get_namespaced_custom_object(
                group=group,
                version=version,
                namespace=namespace,
                plural=plural,
                name=name,
                _request_timeout=settings.request_timeout,
            )

    def list_custom_objects(
        self,
        group: str,
        version: str,
        plural: str,
        namespace: str,
    ) -> list[dict]:
        with api_errors(f"{plural}.{group} in {namespace}"):
            result = self.custom.list_namespaced_custom_object(
                group=group,
                version=version,
                namespace=namespace,
                plural=plural,
                _request_timeout=settings.request_timeout,
            )
        return result.get("items", [])

    def list_namespaces(self) -> list[str]:
        with api_errors("namespaces"):
            result = self.core_v1.list_namespace(_request_timeout=settings.request_timeout)
        return [ns.metadata.name for ns in result.items]
