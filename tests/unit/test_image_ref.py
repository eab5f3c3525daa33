"""Tests for image reference parsing."""

import pytest

from workload_inventory.exceptions import BlankImageReference, ImageRefError, MalformedImageReference
from workload_inventory.models.image import ImageRef


class TestImageRefParse:
    """Tests for ImageRef.parse."""

    def test_library_image(self):
        assert ImageRef.parse("nginx") == ImageRef(domain="", image="nginx", tag="")

    def test_library_image_with_tag(self):
        assert ImageRef.parse("nginx:1.21") == ImageRef(image="nginx", tag="1.21")

    def test_user_image_has_no_domain(self):
        ref = ImageRef.parse("bitnami/mariadb:10.1.32")
        assert ref.domain == ""
        assert ref.image == "bitnami/mariadb"
        assert ref.tag == "10.1.32"

    def test_two_elements_with_host_domain(self):
        ref = ImageRef.parse("quay.io/nginx")
        assert ref.domain == "quay.io"
        assert ref.image == "nginx"

    def test_localhost_with_port(self):
        ref = ImageRef.parse("localhost:5000/app:dev")
        assert ref == ImageRef(domain="localhost:5000", image="app", tag="dev")

    def test_three_elements_first_is_domain(self):
        ref = ImageRef.parse("quay.io/a/b:1")
        assert ref == ImageRef(domain="quay.io", image="a/b", tag="1")

    def test_blank(self):
        with pytest.raises(BlankImageReference):
            ImageRef.parse("")

    @pytest.mark.parametrize("value", ["a:b:c", "/nginx", "nginx/", "nginx:", ":1.0"])
    def test_malformed(self, value):
        with pytest.raises(MalformedImageReference) as exc_info:
            ImageRef.parse(value)
        assert value in str(exc_info.value)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            ImageRef.parse("a:b:c")
        assert issubclass(BlankImageReference, ImageRefError)


class TestImageRef:
    """Tests for ImageRef behaviour."""

    def test_str_full(self):
        assert str(ImageRef(domain="docker.io", image="bitnami/mariadb", tag="10.1.32")) == (
            "docker.io/bitnami/mariadb:10.1.32"
        )

    def test_str_without_tag_or_domain(self):
        assert str(ImageRef(image="nginx")) == "nginx"

    def test_zero_reference_is_falsy(self):
        assert not ImageRef()
        assert ImageRef(image="nginx")

    def test_equality_needs_all_fields(self):
        assert ImageRef(image="nginx") != ImageRef(image="nginx", tag="latest")
