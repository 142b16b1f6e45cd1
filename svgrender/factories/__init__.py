"""
Renderer Factories

Mappers supply tag-to-renderer associations; factories turn element nodes
into renderer instances using them.
"""

from .mapper import (
    ISvgNodeRendererMapper,
    DefaultSvgNodeRendererMapper,
    YamlSvgNodeRendererMapper,
    RendererConstructor,
    resolve_renderer_reference
)

from .factory import (
    ISvgNodeRendererFactory,
    DefaultSvgNodeRendererFactory
)

__all__ = [
    'ISvgNodeRendererMapper',
    'DefaultSvgNodeRendererMapper',
    'YamlSvgNodeRendererMapper',
    'RendererConstructor',
    'resolve_renderer_reference',
    'ISvgNodeRendererFactory',
    'DefaultSvgNodeRendererFactory'
]
