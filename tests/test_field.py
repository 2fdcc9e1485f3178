"""Tests for Field construction, click mapping and shape binding."""

import pytest

from roundsquare.field import Field
from roundsquare.models import Point
from roundsquare.shapes import Round, Square
from roundsquare.surface import ClickEvent, Node


class TestConstruction:
    def test_requires_exactly_one_element(self, document):
        with pytest.raises(ValueError):
            Field([])
        with pytest.raises(ValueError):
            Field([Node(), Node()])

    def test_rejects_non_node(self):
        with pytest.raises(TypeError):
            Field(["not a node"])

    def test_snapshots_geometry(self, field):
        assert (field.width, field.height) == (500, 500)
        assert field.z_index == 3
        assert field.offset == Point(10, 10)
        assert field.shapes == []
        assert field.click_callback is None

    def test_offset_not_remeasured(self, field):
        field.element.css({"left": 90})
        assert field.offset == Point(10, 10)


class TestClicks:
    def test_click_maps_to_field_point(self, document, field):
        points = []
        field.click_callback = points.append
        document.dispatch_click(110, 210)
        assert points == [Point(100, 200)]

    def test_no_callback_is_noop(self, field):
        field.handle_click(ClickEvent(50, 50))
        assert field.shapes == []


class TestBindFigure:
    def test_bind_appends_and_stacks(self, field):
        first, second = Square(), Round()
        field.bind_figure(first)
        field.bind_figure(second)
        assert field.shapes == [first, second]
        assert field.z_index == 5
        assert first.node.z_index == 4
        assert second.node.z_index == 5
        assert field.element.children == [first.node, second.node]

    def test_bind_does_not_render(self, field):
        sq = Square(center=Point(1, 1), size=20, color="#000000")
        field.bind_figure(sq)
        assert "background_color" not in sq.node.style
        assert not sq.node.classes

    @pytest.mark.parametrize("bad", [None, "square", Node(), object()])
    def test_rejects_non_shapes_without_mutation(self, field, bad):
        with pytest.raises(TypeError):
            field.bind_figure(bad)
        assert field.shapes == []
        assert field.z_index == 3
        assert field.element.children == []

    def test_rejects_bound_shape_without_mutation(self, field):
        sq = Square()
        field.bind_figure(sq)
        with pytest.raises(ValueError):
            field.bind_figure(sq)
        assert field.shapes == [sq]
        assert field.z_index == 4

    def test_removed_shape_leaves_field(self, field):
        removed = []
        field.remove_callback = removed.append
        sq = Square(center=Point(50, 50), size=40, color="#000000")
        field.bind_figure(sq)
        sq.remove()
        assert field.shapes == []
        assert removed == [sq]
        assert field.element.children == []

    def test_shape_click_skips_field_callback(self, document, field):
        points = []
        field.click_callback = points.append
        sq = Square(center=Point(100, 200), size=40, color="#000000")
        field.bind_figure(sq)
        sq.render()

        document.dispatch_click(110, 210)
        assert points == []
        assert field.shapes == []

        # the spot is free again, so the next click reaches the field
        document.dispatch_click(110, 210)
        assert points == [Point(100, 200)]
