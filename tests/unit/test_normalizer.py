"""Tests for building the normalized workload view."""

import pytest

from tests.conftest import make_deployment, make_flux_helm_release
from workload_inventory.core.normalizer import project_pod_template, to_workload
from workload_inventory.core.resource_kinds import DeploymentKind, FluxHelmReleaseKind
from workload_inventory.exceptions import MalformedImageReference
from workload_inventory.models import ResourceID
from workload_inventory.models.image import ImageRef
from workload_inventory.models.pod import PodTemplate
from workload_inventory.models.workload import Container


def _template(*images):
    return PodTemplate.from_dict({
        "spec": {"containers": [{"name": f"c{i}", "image": image} for i, image in enumerate(images)]},
    })


class TestProjectPodTemplate:
    """Tests for project_pod_template."""

    def test_all_images_parse(self):
        result = project_pod_template(_template("nginx:1.21", "quay.io/a/b"))
        assert result.ok
        assert result.excuse == ""
        assert result.containers == [
            Container(name="c0", image=ImageRef(image="nginx", tag="1.21")),
            Container(name="c1", image=ImageRef(domain="quay.io", image="a/b")),
        ]

    def test_one_bad_image_discards_everything(self):
        with pytest.raises(MalformedImageReference) as exc_info:
            ImageRef.parse("a:b:c")

        result = project_pod_template(_template("nginx:1.21", "a:b:c", "redis"))
        assert result.containers == []
        assert result.excuse == str(exc_info.value)
        assert not result.ok

    def test_no_containers(self):
        result = project_pod_template(PodTemplate())
        assert result.containers == []
        assert result.ok


class TestToWorkload:
    """Tests for to_workload."""

    def test_typed_kind(self):
        pc = DeploymentKind().make_pod_controller(make_deployment(images=("nginx:1.21", "envoy:1")))
        workload = to_workload(pc)
        assert workload.id == ResourceID("default", "deployment", "web")
        assert workload.status == "ready"
        assert [str(i) for i in workload.images] == ["nginx:1.21", "envoy:1"]

    def test_excuse_keeps_identity_and_status(self):
        pc = DeploymentKind().make_pod_controller(make_deployment(images=("nginx", ""), replicas=2, updated_replicas=1))
        workload = to_workload(pc)
        assert workload.id.name == "web"
        assert workload.status == "1 out of 2 updated"
        assert workload.containers.containers == []
        assert workload.containers.excuse == "blank image name"

    def test_explicit_resource_id(self):
        pc = DeploymentKind().make_pod_controller(make_deployment())
        rid = ResourceID("other", "deployment", "alias")
        assert to_workload(pc, rid).id is rid

    def test_chart_release_top_level_image(self):
        pc = FluxHelmReleaseKind().make_pod_controller(make_flux_helm_release())
        workload = to_workload(pc)
        assert workload.status == "ready"
        assert workload.containers.containers == [
            Container(name="charts/mariadb", image=ImageRef(image="bitnami/mariadb", tag="10.1.32")),
        ]

    def test_chart_release_drops_blocks_without_image(self):
        values = {
            "controller": {"image": {"repository": "nginx", "tag": "1"}},
            "resources": {"limits": {"cpu": "1"}},
        }
        pc = FluxHelmReleaseKind().make_pod_controller(make_flux_helm_release(name="ingress", values=values))
        workload = to_workload(pc)
        assert workload.containers.containers == [
            Container(name="ingress", image=ImageRef(image="nginx", tag="1")),
        ]

    def test_chart_release_image_mapping_with_extra_settings(self):
        values = {
            "image": {
                "registry": "docker.io",
                "repository": "bitnami/mariadb",
                "tag": "10.1.32",
                "pullPolicy": "IfNotPresent",
                "debug": False,
            },
        }
        pc = FluxHelmReleaseKind().make_pod_controller(make_flux_helm_release(values=values))
        workload = to_workload(pc)
        assert workload.containers.excuse == ""
        assert [str(i) for i in workload.images] == ["docker.io/bitnami/mariadb:10.1.32"]

    def test_chart_release_bad_values_become_excuse(self):
        pc = FluxHelmReleaseKind().make_pod_controller(make_flux_helm_release(values={"image": {}}))
        workload = to_workload(pc)
        assert workload.containers.containers == []
        assert "repository" in workload.containers.excuse

    def test_to_dict(self):
        workload = to_workload(DeploymentKind().make_pod_controller(make_deployment()))
        assert workload.to_dict() == {
            "id": "default:deployment/web",
            "namespace": "default",
            "kind": "deployment",
            "name": "web",
            "status": "ready",
            "containers": [{"name": "c0", "image": "nginx:1.21"}],
        }
