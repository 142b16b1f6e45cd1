"""
Renderer Mappers

A mapper supplies the association between SVG tag names and renderer
constructors, plus the tag names that should be skipped outright. The
factory reads a mapper once, when it is constructed.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Collection, Dict, List, Optional, Set, Union

import yaml

from ..constants import Tags
from ..exceptions import MappingConfigurationError
from ..renderers import (
    ISvgNodeRenderer,
    CircleSvgNodeRenderer,
    ClipPathSvgNodeRenderer,
    DefsSvgNodeRenderer,
    EllipseSvgNodeRenderer,
    GroupSvgNodeRenderer,
    ImageSvgNodeRenderer,
    LineSvgNodeRenderer,
    LinearGradientSvgNodeRenderer,
    MarkerSvgNodeRenderer,
    PathSvgNodeRenderer,
    PatternSvgNodeRenderer,
    PolygonSvgNodeRenderer,
    PolylineSvgNodeRenderer,
    RectangleSvgNodeRenderer,
    SvgTagSvgNodeRenderer,
    SymbolSvgNodeRenderer,
    TextSpanSvgNodeRenderer,
    TextSvgNodeRenderer,
    UseSvgNodeRenderer
)

logger = logging.getLogger(__name__)

# Zero-argument callable producing a new renderer (a renderer class or a closure)
RendererConstructor = Callable[[], ISvgNodeRenderer]


class ISvgNodeRendererMapper(ABC):
    """
    Source of tag-to-renderer associations.

    Implementations must be side-effect free; the factory copies what they
    return, so returning internal collections is allowed but not required.
    """

    @abstractmethod
    def get_mapping(self) -> Dict[str, RendererConstructor]:
        """Return the mapping from tag name to renderer constructor."""
        pass

    @abstractmethod
    def get_ignored_tags(self) -> Collection[str]:
        """Return the tag names for which no renderer should be created."""
        pass


class DefaultSvgNodeRendererMapper(ISvgNodeRendererMapper):
    """The built-in mapping used when no other mapper is supplied."""

    def get_mapping(self) -> Dict[str, RendererConstructor]:
        return {
            Tags.CIRCLE: CircleSvgNodeRenderer,
            Tags.CLIP_PATH: ClipPathSvgNodeRenderer,
            Tags.DEFS: DefsSvgNodeRenderer,
            Tags.ELLIPSE: EllipseSvgNodeRenderer,
            Tags.G: GroupSvgNodeRenderer,
            Tags.IMAGE: ImageSvgNodeRenderer,
            Tags.LINE: LineSvgNodeRenderer,
            Tags.LINEAR_GRADIENT: LinearGradientSvgNodeRenderer,
            Tags.MARKER: MarkerSvgNodeRenderer,
            Tags.PATH: PathSvgNodeRenderer,
            Tags.PATTERN: PatternSvgNodeRenderer,
            Tags.POLYGON: PolygonSvgNodeRenderer,
            Tags.POLYLINE: PolylineSvgNodeRenderer,
            Tags.RECT: RectangleSvgNodeRenderer,
            Tags.SVG: SvgTagSvgNodeRenderer,
            Tags.SYMBOL: SymbolSvgNodeRenderer,
            Tags.TEXT: TextSvgNodeRenderer,
            Tags.TSPAN: TextSpanSvgNodeRenderer,
            Tags.USE: UseSvgNodeRenderer,
        }

    def get_ignored_tags(self) -> Collection[str]:
        return {
            Tags.A,
            Tags.ALT_GLYPH,
            Tags.ALT_GLYPH_DEF,
            Tags.ALT_GLYPH_ITEM,
            Tags.ANIMATE,
            Tags.ANIMATE_COLOR,
            Tags.ANIMATE_MOTION,
            Tags.ANIMATE_TRANSFORM,
            Tags.COLOR_PROFILE,
            Tags.CURSOR,
            Tags.DESC,
            Tags.FE_BLEND,
            Tags.FE_COLOR_MATRIX,
            Tags.FE_COMPONENT_TRANSFER,
            Tags.FE_COMPOSITE,
            Tags.FE_CONVOLVE_MATRIX,
            Tags.FE_DIFFUSE_LIGHTING,
            Tags.FE_DISPLACEMENT_MAP,
            Tags.FE_DISTANT_LIGHT,
            Tags.FE_FLOOD,
            Tags.FE_FUNC_A,
            Tags.FE_FUNC_B,
            Tags.FE_FUNC_G,
            Tags.FE_FUNC_R,
            Tags.FE_GAUSSIAN_BLUR,
            Tags.FE_IMAGE,
            Tags.FE_MERGE,
            Tags.FE_MERGE_NODE,
            Tags.FE_MORPHOLOGY,
            Tags.FE_OFFSET,
            Tags.FE_POINT_LIGHT,
            Tags.FE_SPECULAR_LIGHTING,
            Tags.FE_SPOT_LIGHT,
            Tags.FE_TILE,
            Tags.FE_TURBULENCE,
            Tags.FILTER,
            Tags.FONT,
            Tags.FONT_FACE,
            Tags.GLYPH,
            Tags.GLYPH_REF,
            Tags.HKERN,
            Tags.MASK,
            Tags.METADATA,
            Tags.MISSING_GLYPH,
            Tags.RADIAL_GRADIENT,
            Tags.SCRIPT,
            Tags.SET,
            Tags.STYLE,
            Tags.SWITCH,
            Tags.TITLE,
            Tags.VIEW,
            Tags.VKERN,
        }


def resolve_renderer_reference(reference: str) -> RendererConstructor:
    """
    Import a renderer constructor from a dotted reference.

    Accepts "package.module:ClassName" or "package.module.ClassName".

    Raises:
        MappingConfigurationError: If the module or attribute cannot be
            found, or the attribute is not callable.
    """
    if not isinstance(reference, str) or not reference.strip():
        raise MappingConfigurationError(f"renderer reference must be a non-empty string, got {reference!r}")

    reference = reference.strip()
    if ":" in reference:
        module_name, _, attr_name = reference.partition(":")
    else:
        module_name, _, attr_name = reference.rpartition(".")

    if not module_name or not attr_name:
        raise MappingConfigurationError(f"malformed renderer reference {reference!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise MappingConfigurationError(f"cannot import module {module_name!r} for {reference!r}", cause=e) from e

    constructor = getattr(module, attr_name, None)
    if constructor is None:
        raise MappingConfigurationError(f"module {module_name!r} has no attribute {attr_name!r}")
    if not callable(constructor):
        raise MappingConfigurationError(f"{reference!r} is not callable")
    return constructor


class YamlSvgNodeRendererMapper(ISvgNodeRendererMapper):
    """
    Mapper loaded from a YAML document.

    Expected layout::

        extends_default: true        # optional, default false
        mapping:
          circle: mypkg.renderers:FancyCircleRenderer
        ignored:
          - title
          - desc

    References are resolved when the mapper is created, so a broken file
    fails before any factory is built from it. With ``extends_default`` the
    file's entries are layered over the default mapper's; a tag mapped in
    the file is dropped from the inherited ignored set.
    """

    def __init__(self, source: Union[str, Path, Dict]):
        """
        Initialize the mapper.

        Args:
            source: Path to a YAML file, or an already-parsed document
        """
        self.source = source
        self._mapping: Dict[str, RendererConstructor] = {}
        self._ignored: Set[str] = set()
        self._load(self._read_document(source))

    @staticmethod
    def _read_document(source: Union[str, Path, Dict]) -> Dict:
        if isinstance(source, dict):
            return source

        config_path = Path(source)
        if not config_path.is_file():
            raise MappingConfigurationError(f"mapping file not found: {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MappingConfigurationError(f"cannot parse {config_path}: {e}", cause=e) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise MappingConfigurationError(f"{config_path} must contain a mapping at the top level")
        return document

    def _load(self, document: Dict) -> None:
        mapping_section = document.get("mapping") or {}
        ignored_section: Optional[List[str]] = document.get("ignored") or []

        if not isinstance(mapping_section, dict):
            raise MappingConfigurationError("'mapping' must be a dictionary of tag -> reference")
        if not isinstance(ignored_section, list):
            raise MappingConfigurationError("'ignored' must be a list of tag names")

        if document.get("extends_default", False):
            default_mapper = DefaultSvgNodeRendererMapper()
            self._mapping.update(default_mapper.get_mapping())
            self._ignored.update(default_mapper.get_ignored_tags())

        for tag_name, reference in mapping_section.items():
            self._check_tag_name(tag_name, "mapping")
            self._mapping[tag_name] = resolve_renderer_reference(reference)
            self._ignored.discard(tag_name)

        for tag_name in ignored_section:
            self._check_tag_name(tag_name, "ignored")
            self._ignored.add(tag_name)

        logger.debug(f"Loaded renderer mapping: {len(self._mapping)} mapped tags, {len(self._ignored)} ignored tags")

    @staticmethod
    def _check_tag_name(tag_name: Any, section: str) -> None:
        # YAML turns bare on/off/yes/no/null/numbers into non-string scalars
        if not isinstance(tag_name, str) or not tag_name:
            raise MappingConfigurationError(f"tag names in '{section}' must be non-empty strings, got {tag_name!r}")

    def get_mapping(self) -> Dict[str, RendererConstructor]:
        return dict(self._mapping)

    def get_ignored_tags(self) -> Collection[str]:
        return set(self._ignored)
