"""Locate container images inside Helm chart values.

Chart values have no schema, so images are found by convention:

    image: nginx                      # top level, optionally with tag/imageTag
    tag: "1.21"

    image:                            # top level, as a mapping
      registry: docker.io             # optional
      repository: bitnami/mariadb
      tag: 10.1.32                    # optional

    controller:                       # nested, one block per sub-chart
      name: nginx-ingress             # optional container name
      image:
        repository: quay.io/kubernetes-ingress-controller/nginx-ingress-controller
        tag: "0.12.0"

A top-level ``image`` makes the chart a single-container chart and every
other key is ignored. Without one, each top-level mapping is treated as a
sub-chart block that may declare an image of its own.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from workload_inventory.exceptions import MalformedImageReference
from workload_inventory.models.image import ImageRef
from workload_inventory.models.workload import Container

_SCALAR_TYPES = (str, int, float)


def containers_from_values(
    values: Mapping[str, Any] | None,
    chart_path: str,
    release_name: str,
) -> list[Container]:
    """Return the containers declared by a chart's values.

    The top-level container is named after ``chart_path``; nested ones use
    their block's ``name`` or fall back to ``release_name``. Nested blocks
    without an image are returned with an empty ``ImageRef``.

    A nested block is never named after its key: ``controller: {image: ...}``
    in release ``ingress`` yields a container named ``ingress``.

    Raises ``ImageRefError`` when a declared image cannot be decoded.
    """
    if not values:
        return []

    if "image" in values:
        ref = decode_image(values, values["image"])
        return [Container(name=chart_path, image=ref)]

    containers: list[Container] = []
    for value in values.values():
        found = find_nested_image(value, release_name)
        if found is not None:
            containers.append(found)
    return containers


def find_nested_image(value: Any, default_name: str) -> Container | None:
    """Look for an image inside one sub-chart block.

    Returns None when ``value`` is not a mapping and so cannot be a block.
    """
    if not isinstance(value, Mapping):
        return None

    name = default_name
    candidate = value.get("name")
    if isinstance(candidate, str):
        name = candidate

    if "image" not in value:
        return Container(name=name, image=ImageRef())
    return Container(name=name, image=decode_nested_image(value, value["image"]))


def decode_image(values: Mapping[str, Any], image: Any) -> ImageRef:
    """Decode a top-level ``image`` value; unsupported shapes are an error."""
    if isinstance(image, str):
        return decode_image_string(values, image)
    if isinstance(image, Mapping):
        return decode_image_map(image)
    raise MalformedImageReference(
        f"unsupported image value of type {type(image).__name__}"
    )


def decode_nested_image(values: Mapping[str, Any], image: Any) -> ImageRef:
    """Decode an ``image`` value found in a sub-chart block.

    Values that are neither a string nor a mapping yield an empty reference
    rather than an error.
    """
    if isinstance(image, str):
        return decode_image_string(values, image)
    if isinstance(image, Mapping):
        return decode_image_map(image)
    return ImageRef()


def decode_image_string(values: Mapping[str, Any], image: str) -> ImageRef:
    """Parse ``image``, appending a sibling ``imageTag`` or ``tag`` if present."""
    if "imageTag" in values:
        image = f"{image}:{_as_str(values['imageTag'])}"
    elif "tag" in values:
        image = f"{image}:{_as_str(values['tag'])}"
    return ImageRef.parse(image)


def decode_image_map(image: Mapping[str, Any]) -> ImageRef:
    """Decode a ``{registry, repository, tag}`` mapping.

    Other keys, such as ``pullPolicy`` or ``debug``, are ignored. With both
    registry and tag present the reference is built directly, otherwise the
    pieces are joined and parsed.
    """
    repository = _get(image, "repository")
    if repository is None:
        raise MalformedImageReference("image mapping has no repository")

    registry = _get(image, "registry")
    tag = _get(image, "tag")

    if registry is None:
        if tag is not None:
            return ImageRef.parse(f"{repository}:{tag}")
        return ImageRef.parse(repository)
    if tag is None:
        return ImageRef.parse(f"{registry}/{repository}")
    return ImageRef(domain=registry, image=repository, tag=tag)


def _get(image: Mapping[str, Any], key: str) -> str | None:
    # Null and empty entries count as missing
    value = image.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, _SCALAR_TYPES) or isinstance(value, bool):
        raise MalformedImageReference(
            f"image mapping has a non-scalar {key!r} of type {type(value).__name__}"
        )
    return _as_str(value)


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else str(value)
