"""
Container Renderers

Branch renderers for structural SVG elements. Elements such as defs,
clipPath, marker, pattern and symbol are never drawn where they appear;
they only hold children that other elements reference.
"""

from .base import AbstractBranchSvgNodeRenderer
from ..constants import Tags


class SvgTagSvgNodeRenderer(AbstractBranchSvgNodeRenderer):
    """Root (or nested) <svg> viewport."""

    TAG_NAME = Tags.SVG


class GroupSvgNodeRenderer(AbstractBranchSvgNodeRenderer):
    TAG_NAME = Tags.G


class NoDrawOperationSvgNodeRenderer(AbstractBranchSvgNodeRenderer):
    """Base for containers whose children are only drawn by reference."""


class DefsSvgNodeRenderer(NoDrawOperationSvgNodeRenderer):
    TAG_NAME = Tags.DEFS


class ClipPathSvgNodeRenderer(NoDrawOperationSvgNodeRenderer):
    TAG_NAME = Tags.CLIP_PATH


class LinearGradientSvgNodeRenderer(NoDrawOperationSvgNodeRenderer):
    TAG_NAME = Tags.LINEAR_GRADIENT


class MarkerSvgNodeRenderer(NoDrawOperationSvgNodeRenderer):
    TAG_NAME = Tags.MARKER


class PatternSvgNodeRenderer(NoDrawOperationSvgNodeRenderer):
    TAG_NAME = Tags.PATTERN


class SymbolSvgNodeRenderer(NoDrawOperationSvgNodeRenderer):
    TAG_NAME = Tags.SYMBOL
