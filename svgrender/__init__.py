"""
svgrender

Tag-to-renderer dispatch registry for SVG documents. Given an element node
met while walking a parsed document, the factory resolves and instantiates
the renderer responsible for drawing it, or reports that the tag is to be
skipped. Mappers make the association pluggable.
"""

from .exceptions import (
    SvgLogMessageConstant,
    SvgProcessingError,
    TagParameterNullError,
    UnmappedTagError,
    RendererInstantiationError,
    MappingConfigurationError
)

from .nodes import ElementNode

from .factories import (
    ISvgNodeRendererMapper,
    DefaultSvgNodeRendererMapper,
    YamlSvgNodeRendererMapper,
    ISvgNodeRendererFactory,
    DefaultSvgNodeRendererFactory
)

from .processor import DefaultSvgProcessor, ProcessorResult

__all__ = [
    # Errors
    'SvgLogMessageConstant',
    'SvgProcessingError',
    'TagParameterNullError',
    'UnmappedTagError',
    'RendererInstantiationError',
    'MappingConfigurationError',

    # Nodes
    'ElementNode',

    # Factories
    'ISvgNodeRendererMapper',
    'DefaultSvgNodeRendererMapper',
    'YamlSvgNodeRendererMapper',
    'ISvgNodeRendererFactory',
    'DefaultSvgNodeRendererFactory',

    # Processing
    'DefaultSvgProcessor',
    'ProcessorResult'
]
