"""
Tests for DefaultSvgNodeRendererFactory.
"""

import logging
import threading

import pytest
from unittest.mock import MagicMock

from svgrender.exceptions import (
    RendererInstantiationError,
    SvgProcessingError,
    TagParameterNullError,
    UnmappedTagError
)
from svgrender.factories import DefaultSvgNodeRendererFactory, DefaultSvgNodeRendererMapper
from svgrender.nodes import ElementNode
from svgrender.renderers import (
    CircleSvgNodeRenderer,
    GroupSvgNodeRenderer,
    ISvgNodeRenderer,
    RectangleSvgNodeRenderer
)

DEFAULT_MAPPING = DefaultSvgNodeRendererMapper().get_mapping()
DEFAULT_IGNORED = DefaultSvgNodeRendererMapper().get_ignored_tags()


class TestDefaultMapping:
    """Behaviour of a factory built from the default mapper."""

    @pytest.mark.parametrize("tag_name", sorted(DEFAULT_MAPPING))
    def test_every_mapped_tag_creates_expected_type(self, default_factory, tag_name):
        renderer = default_factory.create_svg_node_renderer_for_tag(ElementNode(tag_name), None)

        assert renderer is not None
        assert type(renderer) is DEFAULT_MAPPING[tag_name]
        assert isinstance(renderer, ISvgNodeRenderer)

    @pytest.mark.parametrize("tag_name", sorted(DEFAULT_IGNORED))
    def test_every_ignored_tag_is_ignored(self, default_factory, tag_name):
        assert default_factory.is_tag_ignored(ElementNode(tag_name)) is True

    @pytest.mark.parametrize("tag_name", sorted(DEFAULT_MAPPING))
    def test_mapped_tags_are_not_ignored(self, default_factory, tag_name):
        assert default_factory.is_tag_ignored(ElementNode(tag_name)) is False

    def test_default_mapping_and_ignored_set_are_disjoint(self):
        assert not set(DEFAULT_MAPPING) & set(DEFAULT_IGNORED)

    def test_none_mapper_falls_back_to_default(self):
        factory = DefaultSvgNodeRendererFactory(None)

        assert factory.mapped_tags() == sorted(DEFAULT_MAPPING)
        assert factory.ignored_tags() == frozenset(DEFAULT_IGNORED)


class TestCreateRenderer:
    """Tests for create_svg_node_renderer_for_tag."""

    def test_scenario_circle(self, circle_only_factory):
        renderer = circle_only_factory.create_svg_node_renderer_for_tag(ElementNode("circle"), None)

        assert isinstance(renderer, CircleSvgNodeRenderer)
        assert renderer.parent is None

    def test_scenario_title_is_ignored(self, circle_only_factory):
        assert circle_only_factory.is_tag_ignored(ElementNode("title")) is True

    def test_scenario_unknown_tag(self, circle_only_factory):
        with pytest.raises(UnmappedTagError) as exc_info:
            circle_only_factory.create_svg_node_renderer_for_tag(ElementNode("unknown"), None)

        assert exc_info.value.tag_name == "unknown"
        assert exc_info.value.kind == "unmapped-tag"
        assert "unknown" in str(exc_info.value)

    @pytest.mark.parametrize("parent", [None, GroupSvgNodeRenderer(), MagicMock()])
    def test_null_tag_fails_regardless_of_parent(self, default_factory, parent):
        with pytest.raises(TagParameterNullError) as exc_info:
            default_factory.create_svg_node_renderer_for_tag(None, parent)

        assert exc_info.value.kind == "null-tag-parameter"
        assert str(exc_info.value) == "Tag parameter must not be null"

    def test_null_tag_fails_before_lookup(self, make_mapper):
        mapping = MagicMock()
        factory = DefaultSvgNodeRendererFactory(make_mapper({}, set()))
        factory._renderer_map = mapping

        with pytest.raises(TagParameterNullError):
            factory.create_svg_node_renderer_for_tag(None)

        mapping.get.assert_not_called()

    @pytest.mark.parametrize("tag_name", ["unknown", "Circle", "CIRCLE", "circle ", ""])
    def test_lookup_is_exact_and_case_sensitive(self, default_factory, tag_name):
        with pytest.raises(UnmappedTagError) as exc_info:
            default_factory.create_svg_node_renderer_for_tag(ElementNode(tag_name))

        assert exc_info.value.tag_name == tag_name

    def test_ignored_tag_is_not_consulted_on_create(self, default_factory):
        # 'title' is ignored but unmapped: create still reports it as unmapped
        with pytest.raises(UnmappedTagError):
            default_factory.create_svg_node_renderer_for_tag(ElementNode("title"))

    def test_tag_in_both_mapping_and_ignored(self, make_mapper):
        factory = DefaultSvgNodeRendererFactory(make_mapper({"circle": CircleSvgNodeRenderer}, {"circle"}))
        node = ElementNode("circle")

        assert factory.is_tag_ignored(node) is True
        assert isinstance(factory.create_svg_node_renderer_for_tag(node), CircleSvgNodeRenderer)

    def test_parent_is_linked(self, default_factory, parent_renderer):
        renderer = default_factory.create_svg_node_renderer_for_tag(ElementNode("rect"), parent_renderer)

        assert renderer.parent is parent_renderer

    def test_parent_does_not_gain_child(self, default_factory, parent_renderer):
        default_factory.create_svg_node_renderer_for_tag(ElementNode("rect"), parent_renderer)

        assert parent_renderer.children == []

    def test_parent_omitted_leaves_parent_unset(self, default_factory):
        renderer = default_factory.create_svg_node_renderer_for_tag(ElementNode("rect"))

        assert renderer.parent is None

    def test_fresh_instance_per_call(self, default_factory):
        node = ElementNode("rect")

        first = default_factory.create_svg_node_renderer_for_tag(node)
        second = default_factory.create_svg_node_renderer_for_tag(node)

        assert isinstance(first, RectangleSvgNodeRenderer)
        assert isinstance(second, RectangleSvgNodeRenderer)
        assert first is not second

    def test_any_object_with_name_is_accepted(self, default_factory):
        tag = MagicMock()
        tag.name = "circle"

        assert isinstance(default_factory.create_svg_node_renderer_for_tag(tag), CircleSvgNodeRenderer)

    def test_closure_constructor(self, make_mapper):
        created = []

        def make_circle():
            renderer = CircleSvgNodeRenderer()
            renderer.set_attribute("r", "1")
            created.append(renderer)
            return renderer

        factory = DefaultSvgNodeRendererFactory(make_mapper({"dot": make_circle}, set()))
        renderer = factory.create_svg_node_renderer_for_tag(ElementNode("dot"))

        assert created == [renderer]
        assert renderer.get_attribute("r") == "1"


class TestInstantiationFailure:
    """Constructor failures are logged and wrapped."""

    def test_constructor_exception_is_wrapped(self, make_mapper):
        cause = RuntimeError("boom")
        constructor = MagicMock(side_effect=cause)
        factory = DefaultSvgNodeRendererFactory(make_mapper({"broken": constructor}, set()))

        with pytest.raises(RendererInstantiationError) as exc_info:
            factory.create_svg_node_renderer_for_tag(ElementNode("broken"), GroupSvgNodeRenderer())

        error = exc_info.value
        assert error.kind == "instantiation-failed"
        assert error.tag_name == "broken"
        assert error.cause is cause
        assert error.__cause__ is cause
        assert isinstance(error, SvgProcessingError)
        assert str(error) == "Could not instantiate Renderer for tag broken"
        constructor.assert_called_once_with()

    def test_constructor_requiring_arguments_fails(self, make_mapper):
        class NeedsArgs(CircleSvgNodeRenderer):
            def __init__(self, radius):
                super().__init__()
                self.radius = radius

        factory = DefaultSvgNodeRendererFactory(make_mapper({"c": NeedsArgs}, set()))

        with pytest.raises(RendererInstantiationError) as exc_info:
            factory.create_svg_node_renderer_for_tag(ElementNode("c"))

        assert isinstance(exc_info.value.cause, TypeError)

    def test_abstract_renderer_cannot_be_instantiated(self, make_mapper):
        factory = DefaultSvgNodeRendererFactory(make_mapper({"x": ISvgNodeRenderer}, set()))

        with pytest.raises(RendererInstantiationError):
            factory.create_svg_node_renderer_for_tag(ElementNode("x"))

    def test_failure_is_logged_once_at_error_level(self, make_mapper, caplog):
        factory = DefaultSvgNodeRendererFactory(make_mapper({"broken": MagicMock(side_effect=ValueError("bad"))}, set()))

        with caplog.at_level(logging.ERROR, logger="svgrender.factories.factory"):
            with pytest.raises(RendererInstantiationError):
                factory.create_svg_node_renderer_for_tag(ElementNode("broken"))

        records = [r for r in caplog.records if r.name == "svgrender.factories.factory"]
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        assert "DefaultSvgNodeRendererFactory" in records[0].getMessage()
        assert "bad" in records[0].getMessage()
        assert records[0].exc_info is not None

    def test_unmapped_and_null_paths_do_not_log_errors(self, default_factory, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(UnmappedTagError):
                default_factory.create_svg_node_renderer_for_tag(ElementNode("nope"))
            with pytest.raises(TagParameterNullError):
                default_factory.create_svg_node_renderer_for_tag(None)

        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


class TestRegistryIsolation:
    """The factory copies the mapper's collections."""

    def test_custom_mapper_overrides_default(self, circle_only_factory):
        # 'rect' exists only in the default mapping
        with pytest.raises(UnmappedTagError) as exc_info:
            circle_only_factory.create_svg_node_renderer_for_tag(ElementNode("rect"))

        assert exc_info.value.tag_name == "rect"
        assert circle_only_factory.is_tag_ignored(ElementNode("desc")) is False

    def test_later_mapper_mutation_has_no_effect(self, circle_only_mapper):
        factory = DefaultSvgNodeRendererFactory(circle_only_mapper)

        circle_only_mapper.mapping["rect"] = RectangleSvgNodeRenderer
        del circle_only_mapper.mapping["circle"]
        circle_only_mapper.ignored.add("desc")
        circle_only_mapper.ignored.discard("title")

        assert isinstance(factory.create_svg_node_renderer_for_tag(ElementNode("circle")), CircleSvgNodeRenderer)
        with pytest.raises(UnmappedTagError):
            factory.create_svg_node_renderer_for_tag(ElementNode("rect"))
        assert factory.is_tag_ignored(ElementNode("title")) is True
        assert factory.is_tag_ignored(ElementNode("desc")) is False

    def test_mapper_read_only_once(self, make_mapper):
        mapper = MagicMock(wraps=make_mapper({"circle": CircleSvgNodeRenderer}, {"title"}))
        factory = DefaultSvgNodeRendererFactory(mapper)

        factory.create_svg_node_renderer_for_tag(ElementNode("circle"))
        factory.is_tag_ignored(ElementNode("title"))

        mapper.get_mapping.assert_called_once_with()
        mapper.get_ignored_tags.assert_called_once_with()

    def test_create_does_not_mutate_registry(self, default_factory):
        before = default_factory.mapped_tags()

        default_factory.create_svg_node_renderer_for_tag(ElementNode("g"))
        with pytest.raises(UnmappedTagError):
            default_factory.create_svg_node_renderer_for_tag(ElementNode("nope"))

        assert default_factory.mapped_tags() == before

    def test_registry_is_read_only(self, default_factory):
        with pytest.raises(TypeError):
            default_factory._renderer_map["rect"] = CircleSvgNodeRenderer
        assert isinstance(default_factory.ignored_tags(), frozenset)

    def test_get_constructor(self, default_factory):
        assert default_factory.get_constructor("circle") is CircleSvgNodeRenderer
        assert default_factory.get_constructor("nope") is None

    def test_concurrent_creation(self, default_factory):
        results = []
        errors = []

        def worker():
            try:
                for _ in range(50):
                    results.append(default_factory.create_svg_node_renderer_for_tag(ElementNode("circle")))
            except Exception as e:  # pragma: no cover - surfaced by the assertion below
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(results) == 200
        assert len({id(r) for r in results}) == 200


class TestIsTagIgnored:

    def test_none_tag_has_no_guard(self, default_factory):
        with pytest.raises(AttributeError):
            default_factory.is_tag_ignored(None)

    def test_is_idempotent(self, circle_only_factory):
        node = ElementNode("title")
        assert [circle_only_factory.is_tag_ignored(node) for _ in range(3)] == [True, True, True]
