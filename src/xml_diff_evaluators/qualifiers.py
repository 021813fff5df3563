"""Stock ElementQualifier implementations.

Qualifiers decide which element of a control node list is compared with
which element of the matching test node list.  They work on
``xml.etree.ElementTree.Element``-compatible objects, whose ``tag`` uses
Clark notation (``{namespace-uri}local-name``) for namespaced elements.

All qualifiers here are immutable and stateless; one instance can be shared
across any number of comparisons.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

__all__ = [
    "ElementNameAndAttributeQualifier",
    "ElementNameAndTextQualifier",
    "ElementNameQualifier",
    "qualify_all",
    "qualify_none",
]


def qualify_all(control: Any, test: Any) -> bool:
    """Treat every pair of elements as comparable."""
    return True


def qualify_none(control: Any, test: Any) -> bool:
    """Treat no pair of elements as comparable."""
    return False


def _qualified_name(tag: Any) -> tuple[str, str]:
    """Split a Clark-notation tag into ``(namespace_uri, local_name)``.

    Non-string tags (comments and processing instructions carry factory
    functions as their tag) are returned as their ``repr`` with no namespace.
    """
    if not isinstance(tag, str):
        return "", repr(tag)
    if tag.startswith("{"):
        uri, sep, local = tag[1:].partition("}")
        if sep:
            return uri, local
    return "", tag


def _direct_text(element: Any) -> str:
    """Text directly inside ``element``: its text plus the tails of children."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts).strip()


@dataclass(frozen=True, slots=True)
class ElementNameQualifier:
    """Elements qualify when namespace URI and local name are equal.

    Namespace prefixes play no role; ``<a:x xmlns:a="u"/>`` and
    ``<b:x xmlns:b="u"/>`` qualify for comparison.
    """

    def __call__(self, control: Any, test: Any) -> bool:
        return _qualified_name(control.tag) == _qualified_name(test.tag)


@dataclass(frozen=True, slots=True)
class ElementNameAndAttributeQualifier:
    """Elements qualify when names and selected attribute values are equal.

    Attributes:
        attribute_names: Attribute names (Clark notation for namespaced
            attributes) that must be present with the same value on both
            elements, or absent from both.  When empty, the complete
            attribute sets of both elements must be equal.
    """

    attribute_names: Sequence[str] = ()

    def __post_init__(self) -> None:
        if isinstance(self.attribute_names, str):
            msg = (
                "attribute_names must be a sequence of names, "
                f"got the string {self.attribute_names!r}"
            )
            raise TypeError(msg)
        # Freeze the caller's sequence so the qualifier stays hashable
        object.__setattr__(self, "attribute_names", tuple(self.attribute_names))

    def __call__(self, control: Any, test: Any) -> bool:
        if _qualified_name(control.tag) != _qualified_name(test.tag):
            return False
        if not self.attribute_names:
            return dict(control.attrib) == dict(test.attrib)
        return all(
            control.get(name) == test.get(name) for name in self.attribute_names
        )


@dataclass(frozen=True, slots=True)
class ElementNameAndTextQualifier:
    """Elements qualify when names and direct text content are equal.

    Direct text is the element's own text plus the tails of its children,
    with surrounding whitespace stripped.  Text nested inside child
    elements is ignored.
    """

    def __call__(self, control: Any, test: Any) -> bool:
        if _qualified_name(control.tag) != _qualified_name(test.tag):
            return False
        return _direct_text(control) == _direct_text(test)
