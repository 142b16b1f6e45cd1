"""
SVG Processor

Walks a parsed element-node tree and builds the matching renderer tree
using a renderer factory. The factory only sets the child-to-parent link;
attaching children to their branch parents happens here.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .constants import Attributes
from .exceptions import UnmappedTagError
from .factories import DefaultSvgNodeRendererFactory, ISvgNodeRendererFactory
from .renderers import AbstractBranchSvgNodeRenderer, ISvgNodeRenderer

logger = logging.getLogger(__name__)


class ProcessorResult:
    """
    Outcome of processing one document tree.
    """

    def __init__(self,
                 root_renderer: Optional[ISvgNodeRenderer],
                 named_objects: Dict[str, ISvgNodeRenderer] = None):
        """
        Initialize a processor result.

        Args:
            root_renderer: Renderer built for the root node, None if the root was skipped
            named_objects: Renderers keyed by the element's ``id`` attribute
        """
        self.root_renderer = root_renderer
        self.named_objects = named_objects or {}

    def get_named_object(self, element_id: str) -> Optional[ISvgNodeRenderer]:
        return self.named_objects.get(element_id)


class DefaultSvgProcessor:
    """
    Builds renderer trees from element-node trees.
    """

    def __init__(self, factory: Optional[ISvgNodeRendererFactory] = None, skip_unmapped: bool = False):
        """
        Initialize the processor.

        Args:
            factory: Renderer factory to use; a DefaultSvgNodeRendererFactory if None
            skip_unmapped: Log and skip subtrees whose tag has no renderer instead of raising
        """
        self.factory = factory if factory is not None else DefaultSvgNodeRendererFactory()
        self.skip_unmapped = skip_unmapped

    def process(self, root: Any) -> ProcessorResult:
        """
        Build the renderer tree for ``root``.

        Nodes are visited depth-first in document order using an explicit
        stack, so nesting depth is not bounded by the interpreter's
        recursion limit.

        Raises:
            SvgProcessingError: Propagated from the factory (unmapped tags
                only when skip_unmapped is False)
        """
        named_objects: Dict[str, ISvgNodeRenderer] = {}
        root_renderer: Optional[ISvgNodeRenderer] = None

        pending: List[Tuple[Any, Optional[ISvgNodeRenderer]]] = [(root, None)]
        while pending:
            node, parent = pending.pop()
            renderer = self._create_renderer(node, parent, named_objects)
            if parent is None:
                root_renderer = renderer

            if isinstance(renderer, AbstractBranchSvgNodeRenderer):
                children = list(getattr(node, "children", None) or [])
                pending.extend((child, renderer) for child in reversed(children))

        logger.debug(f"Processed tree rooted at '{root.name}': {len(named_objects)} named objects")
        return ProcessorResult(root_renderer, named_objects)

    def _create_renderer(self, node: Any, parent: Optional[ISvgNodeRenderer],
                         named_objects: Dict[str, ISvgNodeRenderer]) -> Optional[ISvgNodeRenderer]:
        """Create and attach the renderer for one node. None means the subtree is skipped."""
        if self.factory.is_tag_ignored(node):
            logger.debug(f"Skipping ignored tag '{node.name}'")
            return None

        try:
            renderer = self.factory.create_svg_node_renderer_for_tag(node, parent)
        except UnmappedTagError as e:
            if not self.skip_unmapped:
                raise
            logger.warning(f"{e}; skipping subtree")
            return None

        attributes = getattr(node, "attributes", None) or {}
        renderer.set_attributes(attributes)

        element_id = attributes.get(Attributes.ID)
        if element_id:
            if element_id in named_objects:
                logger.warning(f"Duplicate id '{element_id}'; keeping the first occurrence")
            else:
                named_objects[element_id] = renderer

        if isinstance(parent, AbstractBranchSvgNodeRenderer):
            parent.add_child(renderer)

        return renderer
