"""
SVG Processing Errors
Exception hierarchy raised while resolving renderers for SVG tags.
"""

from typing import Any, Optional, Tuple


class SvgLogMessageConstant:
    """Message templates used by the renderer registry. Params are positional: {0}, {1}, ..."""

    TAG_PARAMETER_NULL = "Tag parameter must not be null"
    UNMAPPED_TAG = "Could not find implementation for tag {0}"
    COULD_NOT_INSTANTIATE = "Could not instantiate Renderer for tag {0}"
    CONFIGURATION_ERROR = "Invalid renderer mapping configuration: {0}"


class SvgProcessingError(Exception):
    """
    Base error for failures while turning SVG element nodes into renderers.

    The message is kept as a template plus parameters so callers can
    inspect the offending values without parsing the text.
    """

    kind: str = "processing-error"

    def __init__(self, message_template: str, *message_params: Any, cause: Optional[BaseException] = None):
        """
        Initialize the error.

        Args:
            message_template: Message with positional placeholders ({0}, {1}, ...)
            *message_params: Values substituted into the template
            cause: Optional underlying exception
        """
        super().__init__(message_template)
        self.message_template = message_template
        self.message_params: Tuple[Any, ...] = tuple(message_params)
        self.cause = cause

    def set_message_params(self, *params: Any) -> 'SvgProcessingError':
        """Replace the message parameters. Returns self for chaining."""
        self.message_params = tuple(params)
        return self

    @property
    def message(self) -> str:
        if not self.message_params:
            return self.message_template
        return self.message_template.format(*self.message_params)

    def __str__(self) -> str:
        return self.message


class TagParameterNullError(SvgProcessingError):
    """Raised when no tag was handed to the factory."""

    kind = "null-tag-parameter"

    def __init__(self):
        super().__init__(SvgLogMessageConstant.TAG_PARAMETER_NULL)


class UnmappedTagError(SvgProcessingError):
    """Raised when a tag name has no registered renderer constructor."""

    kind = "unmapped-tag"

    def __init__(self, tag_name: str):
        super().__init__(SvgLogMessageConstant.UNMAPPED_TAG, tag_name)
        self.tag_name = tag_name


class RendererInstantiationError(SvgProcessingError):
    """Raised when a registered constructor fails to produce a renderer."""

    kind = "instantiation-failed"

    def __init__(self, tag_name: str, cause: BaseException):
        super().__init__(SvgLogMessageConstant.COULD_NOT_INSTANTIATE, tag_name, cause=cause)
        self.tag_name = tag_name


class MappingConfigurationError(SvgProcessingError):
    """Raised when a mapping file cannot be loaded or resolved."""

    kind = "configuration-error"

    def __init__(self, detail: str, cause: Optional[BaseException] = None):
        super().__init__(SvgLogMessageConstant.CONFIGURATION_ERROR, detail, cause=cause)
