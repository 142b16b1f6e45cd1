"""
Renderer Factory

Resolves SVG element nodes to freshly constructed renderers using a
registry copied from a mapper at construction time.
"""

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, FrozenSet, List, Mapping, Optional

from .mapper import DefaultSvgNodeRendererMapper, ISvgNodeRendererMapper, RendererConstructor
from ..exceptions import RendererInstantiationError, TagParameterNullError, UnmappedTagError
from ..renderers import ISvgNodeRenderer

logger = logging.getLogger(__name__)


class ISvgNodeRendererFactory(ABC):
    """
    Interface for factories that turn element nodes into renderers.
    """

    @abstractmethod
    def create_svg_node_renderer_for_tag(self, tag: Any,
                                         parent: Optional[ISvgNodeRenderer] = None) -> ISvgNodeRenderer:
        """
        Create a renderer for the given element node.

        Args:
            tag: Element node; only its ``name`` is used
            parent: Renderer to set as the new renderer's parent, if any

        Returns:
            A new renderer instance
        """
        pass

    @abstractmethod
    def is_tag_ignored(self, tag: Any) -> bool:
        """Check whether the element node's tag should be skipped."""
        pass


class DefaultSvgNodeRendererFactory(ISvgNodeRendererFactory):
    """
    Default factory backed by a mapper's tag-to-constructor associations.

    The registry and the ignored set are copied from the mapper when the
    factory is created and are never modified afterwards, so one factory
    can be shared between threads.
    """

    def __init__(self, mapper: Optional[ISvgNodeRendererMapper] = None):
        """
        Initialize the factory.

        Args:
            mapper: Source of the mapping and ignored tags. Falls back to
                DefaultSvgNodeRendererMapper when None.
        """
        if mapper is None:
            mapper = DefaultSvgNodeRendererMapper()

        self._renderer_map: Mapping[str, RendererConstructor] = MappingProxyType(dict(mapper.get_mapping()))
        self._ignored_tags: FrozenSet[str] = frozenset(mapper.get_ignored_tags())

        logger.debug(f"{self.__class__.__name__} created from {mapper.__class__.__name__}: "
                     f"{len(self._renderer_map)} mapped tags, {len(self._ignored_tags)} ignored tags")

    def create_svg_node_renderer_for_tag(self, tag: Any,
                                         parent: Optional[ISvgNodeRenderer] = None) -> ISvgNodeRenderer:
        """
        Create a new renderer for ``tag``.

        The ignored set is not consulted here; call ``is_tag_ignored`` first
        if skipping is wanted.

        Raises:
            TagParameterNullError: If ``tag`` is None
            UnmappedTagError: If no constructor is registered for the tag name
            RendererInstantiationError: If the registered constructor fails
        """
        if tag is None:
            raise TagParameterNullError()

        tag_name = tag.name
        constructor = self._renderer_map.get(tag_name)
        if constructor is None:
            raise UnmappedTagError(tag_name)

        try:
            result = constructor()
        except Exception as e:
            logger.error(f"{self.__class__.__module__}.{self.__class__.__name__}: "
                         f"failed to instantiate renderer for tag '{tag_name}': {e}", exc_info=True)
            raise RendererInstantiationError(tag_name, e) from e

        if parent is not None:
            result.parent = parent

        return result

    def is_tag_ignored(self, tag: Any) -> bool:
        return tag.name in self._ignored_tags

    def mapped_tags(self) -> List[str]:
        """Sorted list of tag names with a registered constructor."""
        return sorted(self._renderer_map.keys())

    def ignored_tags(self) -> FrozenSet[str]:
        return self._ignored_tags

    def get_constructor(self, tag_name: str) -> Optional[RendererConstructor]:
        """Look up the registered constructor for a tag name without invoking it."""
        return self._renderer_map.get(tag_name)
