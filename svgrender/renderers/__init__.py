"""
SVG Node Renderers

Renderer capability set and the built-in renderer types registered by the
default mapper.
"""

from .base import (
    ISvgNodeRenderer,
    AbstractSvgNodeRenderer,
    AbstractBranchSvgNodeRenderer
)

from .shapes import (
    CircleSvgNodeRenderer,
    EllipseSvgNodeRenderer,
    LineSvgNodeRenderer,
    PathSvgNodeRenderer,
    PolylineSvgNodeRenderer,
    PolygonSvgNodeRenderer,
    RectangleSvgNodeRenderer,
    ImageSvgNodeRenderer,
    UseSvgNodeRenderer,
    TextSvgNodeRenderer,
    TextSpanSvgNodeRenderer
)

from .containers import (
    SvgTagSvgNodeRenderer,
    GroupSvgNodeRenderer,
    NoDrawOperationSvgNodeRenderer,
    DefsSvgNodeRenderer,
    ClipPathSvgNodeRenderer,
    LinearGradientSvgNodeRenderer,
    MarkerSvgNodeRenderer,
    PatternSvgNodeRenderer,
    SymbolSvgNodeRenderer
)

__all__ = [
    # Base
    'ISvgNodeRenderer',
    'AbstractSvgNodeRenderer',
    'AbstractBranchSvgNodeRenderer',

    # Shapes
    'CircleSvgNodeRenderer',
    'EllipseSvgNodeRenderer',
    'LineSvgNodeRenderer',
    'PathSvgNodeRenderer',
    'PolylineSvgNodeRenderer',
    'PolygonSvgNodeRenderer',
    'RectangleSvgNodeRenderer',
    'ImageSvgNodeRenderer',
    'UseSvgNodeRenderer',
    'TextSvgNodeRenderer',
    'TextSpanSvgNodeRenderer',

    # Containers
    'SvgTagSvgNodeRenderer',
    'GroupSvgNodeRenderer',
    'NoDrawOperationSvgNodeRenderer',
    'DefsSvgNodeRenderer',
    'ClipPathSvgNodeRenderer',
    'LinearGradientSvgNodeRenderer',
    'MarkerSvgNodeRenderer',
    'PatternSvgNodeRenderer',
    'SymbolSvgNodeRenderer'
]
