"""Exceptions raised by the workload inventory.

Public API:
    WorkloadInventoryError: Base exception for everything raised here
    ClusterError: The Kubernetes API call failed
    NotFoundError: The requested object (or its API) does not exist
    TransportError: Any other API or connection failure
    ImageRefError: An image reference could not be decoded
    BlankImageReference: The image reference is an empty string
    MalformedImageReference: The image reference is not well formed
    InvalidResourceID: A resource id string could not be parsed
    UnsupportedKind: No adapter is registered for a workload kind
"""


class WorkloadInventoryError(Exception):
    """Base exception for all workload inventory errors."""

    pass


class ClusterError(WorkloadInventoryError):
    """A call against the Kubernetes API failed."""

    pass


class NotFoundError(ClusterError):
    """The object, or the API serving its kind, was not found."""

    pass


class TransportError(ClusterError):
    """The API call failed for a reason other than a missing object."""

    pass


class ImageRefError(WorkloadInventoryError, ValueError):
    """An image reference could not be parsed or decoded."""

    pass


class BlankImageReference(ImageRefError):
    """The image reference is empty."""

    pass


class MalformedImageReference(ImageRefError):
    """The image reference has an unexpected shape."""

    pass


class InvalidResourceID(WorkloadInventoryError, ValueError):
    """A resource id is not of the form ``namespace:kind/name``."""

    pass


class UnsupportedKind(WorkloadInventoryError):
    """No resource kind adapter is registered for the given kind."""

    pass


__all__ = [
    "WorkloadInventoryError",
    "ClusterError",
    "NotFoundError",
    "TransportError",
    "ImageRefError",
    "BlankImageReference",
    "MalformedImageReference",
    "InvalidResourceID",
    "UnsupportedKind",
]
