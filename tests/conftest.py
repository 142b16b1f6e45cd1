"""
Shared fixtures for the renderer registry tests.
"""

import pytest

from svgrender.factories import DefaultSvgNodeRendererFactory, ISvgNodeRendererMapper
from svgrender.nodes import ElementNode
from svgrender.renderers import CircleSvgNodeRenderer, GroupSvgNodeRenderer


class StaticMapper(ISvgNodeRendererMapper):
    """Mapper returning the collections it was built with, without copying."""

    def __init__(self, mapping, ignored):
        self.mapping = mapping
        self.ignored = ignored

    def get_mapping(self):
        return self.mapping

    def get_ignored_tags(self):
        return self.ignored


@pytest.fixture
def make_mapper():
    """Fixture returning a builder for StaticMapper instances."""
    return StaticMapper


@pytest.fixture
def default_factory():
    """Factory built from the default mapper."""
    return DefaultSvgNodeRendererFactory()


@pytest.fixture
def circle_only_mapper():
    """Mapper with {"circle" -> CircleSvgNodeRenderer} and {"title"} ignored."""
    return StaticMapper({"circle": CircleSvgNodeRenderer}, {"title"})


@pytest.fixture
def circle_only_factory(circle_only_mapper):
    return DefaultSvgNodeRendererFactory(circle_only_mapper)


@pytest.fixture
def parent_renderer():
    """A branch renderer usable as a parent."""
    return GroupSvgNodeRenderer()


@pytest.fixture
def sample_document():
    """
    Fixture that provides a small SVG document tree:

        svg
        ├── title            (ignored)
        ├── g#group
        │   ├── circle#c1
        │   └── rect
        └── text
            └── tspan
    """
    return ElementNode.from_dict({
        "name": "svg",
        "attributes": {"width": "100", "height": "100"},
        "children": [
            {"name": "title", "children": []},
            {
                "name": "g",
                "attributes": {"id": "group"},
                "children": [
                    {"name": "circle", "attributes": {"id": "c1", "r": "5"}},
                    {"name": "rect", "attributes": {"width": "10", "height": "20"}}
                ]
            },
            {
                "name": "text",
                "children": [{"name": "tspan"}]
            }
        ]
    })
