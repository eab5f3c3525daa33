"""Container image reference model."""

from __future__ import annotations

import re
from dataclasses import dataclass

from workload_inventory.exceptions import BlankImageReference, MalformedImageReference

# A registry host: has a dot or a port, or is localhost.
_DOMAIN_RE = re.compile(r"^(localhost|[^/]*[.:][^/]*)$")


@dataclass(frozen=True)
class ImageRef:
    """A parsed image reference.

    ``tag`` is left empty when the reference carries none; resolving a
    default tag is up to whoever pulls the image.
    """

    domain: str = ""
    image: str = ""
    tag: str = ""

    def __bool__(self) -> bool:
        return bool(self.domain or self.image or self.tag)

    def __str__(self) -> str:
        name = f"{self.domain}/{self.image}" if self.domain else self.image
        if self.tag:
            return f"{name}:{self.tag}"
        return name

    @classmethod
    def parse(cls, s: str) -> ImageRef:
        """Parse ``[domain/]image[:tag]``."""
        if not s:
            raise BlankImageReference("blank image name")
        if s.startswith("/") or s.endswith("/"):
            raise MalformedImageReference(f"parsing {s!r}: malformed image reference")

        domain = ""
        elements = s.split("/")
        if len(elements) == 1:
            image = s
        elif len(elements) == 2:
            if _DOMAIN_RE.match(elements[0]):
                domain, image = elements
            else:
                image = s
        else:
            domain = elements[0]
            image = "/".join(elements[1:])

        tag = ""
        parts = image.split(":")
        if len(parts) == 2:
            if not parts[0] or not parts[1]:
                raise MalformedImageReference(f"parsing {s!r}: malformed image reference")
            image, tag = parts
        elif len(parts) > 2:
            raise MalformedImageReference(f"parsing {s!r}: malformed image reference")

        return cls(domain=domain, image=image, tag=tag)
