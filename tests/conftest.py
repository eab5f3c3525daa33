"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest


def make_deployment(
    name="web",
    namespace="default",
    images=("nginx:1.21",),
    generation=2,
    observed_generation=2,
    replicas=3,
    updated_replicas=3,
    labels=None,
):
    """Build a Deployment as returned by the API, in its JSON shape."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {
            "name": name,
            "namespace": namespace,
            "generation": generation,
            "labels": labels or {"app": name},
        },
        "spec": {
            "replicas": replicas,
            "template": {
                "metadata": {"labels": {"app": name}},
                "spec": {
                    "containers": [
                        {"name": f"c{i}", "image": image} for i, image in enumerate(images)
                    ],
                },
            },
        },
        "status": {
            "observedGeneration": observed_generation,
            "updatedReplicas": updated_replicas,
        },
    }


def make_flux_helm_release(name="mariadb", namespace="default", values=None, chart_path="charts/mariadb"):
    return {
        "apiVersion": "helm.integrations.flux.weave.works/v1alpha",
        "kind": "FluxHelmRelease",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "chartGitPath": chart_path,
            "releaseName": name,
            "values": values if values is not None else {"image": "bitnami/mariadb", "tag": "10.1.32"},
        },
    }


@pytest.fixture
def deployment():
    return make_deployment()


@pytest.fixture
def flux_helm_release():
    return make_flux_helm_release()


@pytest.fixture
def mock_k8s():
    """A K8sClient stand-in with one namespace and no objects."""
    k8s = MagicMock()
    k8s.list_namespaces.return_value = ["default"]
    k8s.list_namespaced.return_value = []
    k8s.list_custom_objects.return_value = []
    return k8s
