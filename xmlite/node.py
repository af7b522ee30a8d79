"""Document tree nodes and their attributes."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from .errors import ArgumentError
from .xmlstring import XmlString

# Record sizes of one node and one attribute slot in the tree's storage
# layout; reserved slots count towards the tree's memory size.
NODE_RECORD_SIZE = 104
ATTRIBUTE_RECORD_SIZE = 64


def _reserved_slots(count: int) -> int:
    """Slots reserved for count items when storage doubles as it fills."""
    if count == 0:
        return 0
    return 1 << (count - 1).bit_length()


class NodeType(enum.Enum):
    """What a node holds."""

    EMPTY = enum.auto()
    MIXED = enum.auto()
    TEXT = enum.auto()
    COMMENT = enum.auto()


@dataclass
class Attribute:
    """A name and value pair on an element."""

    name: XmlString = field(default_factory=XmlString)
    value: XmlString = field(default_factory=XmlString)


@dataclass
class Entity:
    """A named replacement text."""

    name: XmlString = field(default_factory=XmlString)
    text: XmlString = field(default_factory=XmlString)


@dataclass(eq=False, repr=False)
class Node:
    """One node of a document tree.

    Elements are EMPTY until they get a first child, then MIXED. TEXT nodes
    keep their characters in text, COMMENT nodes in comment.
    """

    type: NodeType = NodeType.EMPTY
    name: XmlString = field(default_factory=XmlString)
    parent: Node | None = None
    attributes: list[Attribute] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    text: XmlString = field(default_factory=XmlString)
    comment: XmlString = field(default_factory=XmlString)

    def append_child(self) -> Node:
        """Add a new EMPTY child at the end and return it.

        Only elements can take children; an EMPTY element becomes MIXED.
        """
        if self.type is NodeType.EMPTY:
            self.type = NodeType.MIXED
            self.children = []
        elif self.type is not NodeType.MIXED:
            raise ArgumentError(f"a {self.type.name} node cannot have children")
        child = Node(parent=self)
        self.children.append(child)
        return child

    def iter(self) -> Iterator[Node]:
        """Yield this node and all its descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def tree_memory_size(self) -> int:
        """Bytes reserved by the subtree below and including this node.

        Counts reserved child and attribute slots and the capacity of every
        string; the record of this node itself is not included.
        """
        total = 0
        for node in self.iter():
            if node.type is NodeType.TEXT:
                total += node.text.capacity
            elif node.type is NodeType.COMMENT:
                total += node.comment.capacity
            else:
                if node.type is NodeType.MIXED:
                    total += _reserved_slots(len(node.children)) * NODE_RECORD_SIZE
                total += node.name.capacity
                total += _reserved_slots(len(node.attributes)) * ATTRIBUTE_RECORD_SIZE
                for attribute in node.attributes:
                    total += attribute.name.capacity + attribute.value.capacity
        return total

    def __repr__(self) -> str:
        if self.type is NodeType.TEXT:
            return f"Node(TEXT, {str(self.text)!r})"
        if self.type is NodeType.COMMENT:
            return f"Node(COMMENT, {str(self.comment)!r})"
        return f"Node({self.type.name}, {str(self.name)!r}, children={len(self.children)})"