"""
Base Renderers

Defines the renderer capability set shared by every SVG node renderer and
the two base classes concrete renderers derive from. Renderers produced by
the factory start out detached: no parent, no attributes, no children.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class ISvgNodeRenderer(ABC):
    """
    Interface for objects that render one SVG element.

    The factory relies only on ``parent`` being settable; the remaining
    members are what the tree walker uses to populate the renderer.
    """

    @property
    @abstractmethod
    def parent(self) -> Optional['ISvgNodeRenderer']:
        pass

    @parent.setter
    @abstractmethod
    def parent(self, parent: Optional['ISvgNodeRenderer']) -> None:
        pass

    @abstractmethod
    def set_attributes(self, attributes: Dict[str, str]) -> None:
        pass

    @abstractmethod
    def get_attribute(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_attribute(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def create_deep_copy(self) -> 'ISvgNodeRenderer':
        pass


class AbstractSvgNodeRenderer(ISvgNodeRenderer):
    """
    Common state for leaf renderers: a parent back-reference and the
    element's attribute map.
    """

    # Tag this renderer type is normally registered under. Informational only.
    TAG_NAME: str = ""

    def __init__(self):
        self._parent: Optional[ISvgNodeRenderer] = None
        self._attributes: Dict[str, str] = {}

    @property
    def parent(self) -> Optional[ISvgNodeRenderer]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional[ISvgNodeRenderer]) -> None:
        self._parent = parent

    @property
    def attributes(self) -> Dict[str, str]:
        return self._attributes

    def set_attributes(self, attributes: Dict[str, str]) -> None:
        self._attributes = dict(attributes or {})

    def get_attribute(self, key: str) -> Optional[str]:
        return self._attributes.get(key)

    def set_attribute(self, key: str, value: str) -> None:
        self._attributes[key] = value

    def create_deep_copy(self) -> 'AbstractSvgNodeRenderer':
        """
        Create a detached copy of this renderer.

        The copy has the same type and a copy of the attributes but no
        parent, so it can be attached elsewhere in a renderer tree.
        """
        return self._copy_without_children()

    def _copy_without_children(self) -> 'AbstractSvgNodeRenderer':
        duplicate = self.__class__()
        duplicate.set_attributes(copy.deepcopy(self._attributes))
        return duplicate

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(attributes={self._attributes!r})"


class AbstractBranchSvgNodeRenderer(AbstractSvgNodeRenderer):
    """
    Base for renderers that may contain child renderers (svg, g, defs, ...).
    """

    def __init__(self):
        super().__init__()
        self._children: List[ISvgNodeRenderer] = []

    @property
    def children(self) -> List[ISvgNodeRenderer]:
        """Child renderers in document order. Returns a copy."""
        return list(self._children)

    def add_child(self, child: ISvgNodeRenderer) -> None:
        """
        Append a child renderer.

        Does not touch the child's parent reference; callers link both
        directions explicitly.
        """
        if child is None:
            logger.debug(f"Ignoring None child for {self.__class__.__name__}")
            return
        self._children.append(child)

    def create_deep_copy(self) -> 'AbstractBranchSvgNodeRenderer':
        """Copy this renderer and its whole subtree. Nested branches are copied without recursion."""
        duplicate = self._copy_without_children()
        pending = [(self, duplicate)]
        while pending:
            source, target = pending.pop()
            for child in source._children:
                if isinstance(child, AbstractBranchSvgNodeRenderer):
                    child_copy = child._copy_without_children()
                    pending.append((child, child_copy))
                else:
                    child_copy = child.create_deep_copy()
                child_copy.parent = target
                target.add_child(child_copy)
        return duplicate
