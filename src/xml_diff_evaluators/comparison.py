"""Outcome, ComparisonType, Detail and Comparison: the difference data model.

A ``Comparison`` describes one point where the control and test documents were
compared.  The traversal engine builds it, computes an initial ``Outcome`` and
hands both to a difference evaluator, which returns the final ``Outcome``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = ["Comparison", "ComparisonType", "Detail", "Outcome"]


class Outcome(StrEnum):
    """Severity of a single difference, in increasing order.

    - EQUAL     -> "equal"     : no difference at all
    - SIMILAR   -> "similar"   : a difference that keeps the documents equivalent
    - DIFFERENT -> "different" : a real difference
    """

    EQUAL = auto()
    SIMILAR = auto()
    DIFFERENT = auto()


_DESCRIPTIONS: dict[str, str] = {
    "attr_value_explicitly_specified": "attribute value explicitly specified",
    "has_doctype_declaration": "presence of doctype declaration",
    "doctype_name": "doctype name",
    "doctype_public_id": "doctype public identifier",
    "doctype_system_id": "doctype system identifier",
    "schema_location": "schema location",
    "no_namespace_schema_location": "no namespace schema location",
    "node_type": "node type",
    "namespace_prefix": "namespace prefix",
    "namespace_uri": "namespace URI",
    "text_value": "text value",
    "processing_instruction_target": "processing instruction target",
    "processing_instruction_data": "processing instruction data",
    "element_tag_name": "element tag name",
    "element_num_attributes": "number of attributes",
    "attr_value": "attribute value",
    "child_nodelist_length": "number of child nodes",
    "child_nodelist_sequence": "sequence of child nodes",
    "child_lookup": "child node",
    "attr_name_lookup": "attribute name",
    "xml_version": "XML version",
    "xml_standalone": "XML standalone",
    "xml_encoding": "XML encoding",
}


class ComparisonType(StrEnum):
    """The kind of structural property a ``Comparison`` looks at.

    Values are the lowercased member names.  The traversal engine may emit
    values outside this enumeration; evaluators pass those through untouched.
    """

    ATTR_VALUE_EXPLICITLY_SPECIFIED = auto()
    HAS_DOCTYPE_DECLARATION = auto()
    DOCTYPE_NAME = auto()
    DOCTYPE_PUBLIC_ID = auto()
    DOCTYPE_SYSTEM_ID = auto()
    SCHEMA_LOCATION = auto()
    NO_NAMESPACE_SCHEMA_LOCATION = auto()
    NODE_TYPE = auto()
    NAMESPACE_PREFIX = auto()
    NAMESPACE_URI = auto()
    TEXT_VALUE = auto()
    PROCESSING_INSTRUCTION_TARGET = auto()
    PROCESSING_INSTRUCTION_DATA = auto()
    ELEMENT_TAG_NAME = auto()
    ELEMENT_NUM_ATTRIBUTES = auto()
    ATTR_VALUE = auto()
    CHILD_NODELIST_LENGTH = auto()
    CHILD_NODELIST_SEQUENCE = auto()
    CHILD_LOOKUP = auto()
    ATTR_NAME_LOOKUP = auto()
    XML_VERSION = auto()
    XML_STANDALONE = auto()
    XML_ENCODING = auto()

    @property
    def description(self) -> str:
        """Human-readable name of the compared property."""
        return _DESCRIPTIONS[self.value]


@dataclass(frozen=True, slots=True)
class Detail:
    """One side (control or test) of a ``Comparison``.

    Attributes:
        locator: Opaque reference to the compared node or attribute.
        value:   Payload whose type depends on the comparison type, e.g. a
                 ``NodeKind`` code for NODE_TYPE or a string for
                 DOCTYPE_SYSTEM_ID.
        xpath:   Optional XPath of the compared node, for reporting.
    """

    locator: Any
    value: Any
    xpath: str | None = None


@dataclass(frozen=True, slots=True)
class Comparison:
    """A single discovered point of difference between control and test.

    Attributes:
        type:    What was compared (usually a ``ComparisonType``).
        control: Detail from the control document.
        test:    Detail from the test document.
    """

    type: ComparisonType
    control: Detail
    test: Detail
