"""
Shape Renderers
Leaf renderers for basic shapes, paths, images and text.
"""

from .base import AbstractBranchSvgNodeRenderer, AbstractSvgNodeRenderer
from ..constants import Tags


class CircleSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.CIRCLE


class EllipseSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.ELLIPSE


class LineSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.LINE


class PathSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.PATH


class PolylineSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.POLYLINE


class PolygonSvgNodeRenderer(PolylineSvgNodeRenderer):
    """A polyline whose last point connects back to its first."""

    TAG_NAME = Tags.POLYGON


class RectangleSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.RECT


class ImageSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.IMAGE


class UseSvgNodeRenderer(AbstractSvgNodeRenderer):
    """References another element by its href; resolution happens at draw time."""

    TAG_NAME = Tags.USE


class TextSvgNodeRenderer(AbstractBranchSvgNodeRenderer):
    """Text container. Holds tspan children."""

    TAG_NAME = Tags.TEXT


class TextSpanSvgNodeRenderer(AbstractSvgNodeRenderer):
    TAG_NAME = Tags.TSPAN
