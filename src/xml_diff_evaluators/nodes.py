"""NodeKind IntEnum for DOM node-type codes.

The traversal engine reports the kind of a node as the integer code defined by
the W3C DOM (the same values as ``xml.dom.Node.*_NODE``).  Because ``NodeKind``
is an ``IntEnum``, raw codes coming from a DOM implementation compare equal to
the matching member without any conversion.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = ["NodeKind"]


class NodeKind(IntEnum):
    """W3C DOM node-type codes.

    - ELEMENT                -> 1
    - ATTRIBUTE              -> 2
    - TEXT                   -> 3
    - CDATA_SECTION          -> 4
    - ENTITY_REFERENCE       -> 5
    - ENTITY                 -> 6
    - PROCESSING_INSTRUCTION -> 7
    - COMMENT                -> 8
    - DOCUMENT               -> 9
    - DOCUMENT_TYPE          -> 10
    - DOCUMENT_FRAGMENT      -> 11
    - NOTATION               -> 12
    """

    ELEMENT = 1
    ATTRIBUTE = 2
    TEXT = 3
    CDATA_SECTION = 4
    ENTITY_REFERENCE = 5
    ENTITY = 6
    PROCESSING_INSTRUCTION = 7
    COMMENT = 8
    DOCUMENT = 9
    DOCUMENT_TYPE = 10
    DOCUMENT_FRAGMENT = 11
    NOTATION = 12
