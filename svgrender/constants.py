"""
SVG Constants
Tag and attribute names used across the renderer registry.
"""


class Tags:
    """Local names of SVG elements."""

    # Mapped (drawable or structural) elements
    CIRCLE = "circle"
    CLIP_PATH = "clipPath"
    DEFS = "defs"
    ELLIPSE = "ellipse"
    G = "g"
    IMAGE = "image"
    LINE = "line"
    LINEAR_GRADIENT = "linearGradient"
    MARKER = "marker"
    PATH = "path"
    PATTERN = "pattern"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    RECT = "rect"
    SVG = "svg"
    SYMBOL = "symbol"
    TEXT = "text"
    TSPAN = "tspan"
    USE = "use"

    # Non-visual or unsupported elements
    A = "a"
    ALT_GLYPH = "altGlyph"
    ALT_GLYPH_DEF = "altGlyphDef"
    ALT_GLYPH_ITEM = "altGlyphItem"
    ANIMATE = "animate"
    ANIMATE_COLOR = "animateColor"
    ANIMATE_MOTION = "animateMotion"
    ANIMATE_TRANSFORM = "animateTransform"
    COLOR_PROFILE = "color-profile"
    CURSOR = "cursor"
    DESC = "desc"
    FE_BLEND = "feBlend"
    FE_COLOR_MATRIX = "feColorMatrix"
    FE_COMPONENT_TRANSFER = "feComponentTransfer"
    FE_COMPOSITE = "feComposite"
    FE_CONVOLVE_MATRIX = "feConvolveMatrix"
    FE_DIFFUSE_LIGHTING = "feDiffuseLighting"
    FE_DISPLACEMENT_MAP = "feDisplacementMap"
    FE_DISTANT_LIGHT = "feDistantLight"
    FE_FLOOD = "feFlood"
    FE_FUNC_A = "feFuncA"
    FE_FUNC_B = "feFuncB"
    FE_FUNC_G = "feFuncG"
    FE_FUNC_R = "feFuncR"
    FE_GAUSSIAN_BLUR = "feGaussianBlur"
    FE_IMAGE = "feImage"
    FE_MERGE = "feMerge"
    FE_MERGE_NODE = "feMergeNode"
    FE_MORPHOLOGY = "feMorphology"
    FE_OFFSET = "feOffset"
    FE_POINT_LIGHT = "fePointLight"
    FE_SPECULAR_LIGHTING = "feSpecularLighting"
    FE_SPOT_LIGHT = "feSpotLight"
    FE_TILE = "feTile"
    FE_TURBULENCE = "feTurbulence"
    FILTER = "filter"
    FONT = "font"
    FONT_FACE = "font-face"
    GLYPH = "glyph"
    GLYPH_REF = "glyphRef"
    HKERN = "hkern"
    MASK = "mask"
    METADATA = "metadata"
    MISSING_GLYPH = "missing-glyph"
    RADIAL_GRADIENT = "radialGradient"
    SCRIPT = "script"
    SET = "set"
    STYLE = "style"
    SWITCH = "switch"
    TITLE = "title"
    VIEW = "view"
    VKERN = "vkern"


class Attributes:
    """Attribute names the registry and processor look at."""

    ID = "id"
