"""
Element Nodes

Minimal element-node model handed to the renderer factory. Whatever parser
builds the document tree only needs to produce objects exposing a ``name``;
ElementNode is the concrete carrier used by the processor and the tests.
"""

from typing import Any, Dict, List, Optional


class ElementNode:
    """
    Represents one element of a parsed SVG document.
    """

    def __init__(self,
                 name: str,
                 attributes: Dict[str, str] = None,
                 children: List['ElementNode'] = None):
        """
        Initialize an element node.

        Args:
            name: Local name of the element (e.g. "circle")
            attributes: Attribute values keyed by attribute name
            children: Child element nodes
        """
        self.name = name
        self.attributes = dict(attributes or {})
        self.children: List['ElementNode'] = []
        self.parent: Optional['ElementNode'] = None
        for child in children or []:
            self.add_child(child)

    def add_child(self, child: 'ElementNode') -> 'ElementNode':
        """Append a child node and link it back to this node."""
        self.children.append(child)
        child.parent = self
        return child

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the node (and its subtree) to a dictionary."""
        result = self._shallow_dict()
        pending = [(self, result)]
        while pending:
            node, data = pending.pop()
            for child in node.children:
                child_data = child._shallow_dict()
                data["children"].append(child_data)
                pending.append((child, child_data))
        return result

    def _shallow_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attributes": dict(self.attributes),
            "children": []
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ElementNode':
        """Create a node (and its subtree) from a dictionary."""
        root = cls(name=data["name"], attributes=data.get("attributes", {}))
        pending = [(root, data)]
        while pending:
            node, node_data = pending.pop()
            for child_data in node_data.get("children", []):
                child = node.add_child(cls(name=child_data["name"], attributes=child_data.get("attributes", {})))
                pending.append((child, child_data))
        return root

    def __repr__(self) -> str:
        return f"ElementNode(name={self.name!r}, children={len(self.children)})"
