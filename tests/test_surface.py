"""Tests for the visual tree: layout, hit testing and click bubbling."""

from roundsquare.models import Point
from roundsquare.surface import Node


def make_tree():
    root = Node(style={"width": 400, "height": 400})
    panel = Node(classes=["panel"], style={"left": 20, "top": 30, "width": 200, "height": 200})
    root.append(panel)
    return root, panel


class TestLayout:
    def test_offset_sums_ancestors(self):
        root, panel = make_tree()
        child = Node(style={"left": 5, "top": 7, "width": 10, "height": 10})
        panel.append(child)
        assert child.offset() == Point(25, 37)
        assert tuple(child.rect()) == (25, 37, 10, 10)

    def test_find_by_class(self):
        root, panel = make_tree()
        inner = Node(classes=["panel", "inner"])
        panel.append(inner)
        assert root.find("panel") == [panel, inner]
        assert root.find("inner") == [inner]
        assert root.find("missing") == []

    def test_append_moves_node(self):
        root, panel = make_tree()
        node = Node()
        root.append(node)
        panel.append(node)
        assert node.parent is panel
        assert node not in root.children

    def test_add_class_once(self):
        node = Node()
        node.add_class("a")
        node.add_class("a")
        assert node.classes == ["a"]


class TestHitTest:
    def test_topmost_child_wins(self):
        root, panel = make_tree()
        low = Node(style={"left": 0, "top": 0, "width": 50, "height": 50, "z_index": 1})
        high = Node(style={"left": 10, "top": 10, "width": 50, "height": 50, "z_index": 2})
        panel.append(high)
        panel.append(low)
        assert root.hit_test(40, 50) is high
        assert root.hit_test(22, 32) is low
        assert root.hit_test(150, 150) is panel
        assert root.hit_test(390, 390) is root
        assert root.hit_test(500, 500) is None

    def test_later_sibling_wins_on_equal_z(self):
        root, panel = make_tree()
        first = Node(style={"width": 50, "height": 50})
        second = Node(style={"width": 50, "height": 50})
        panel.append(first)
        panel.append(second)
        assert root.hit_test(30, 40) is second

    def test_rounded_corners(self):
        circle = Node(style={"width": 100, "height": 100, "border_radius": 50})
        assert circle.contains_point(50, 50)
        assert circle.contains_point(0, 50)
        assert not circle.contains_point(3, 3)
        square = Node(style={"width": 100, "height": 100})
        assert square.contains_point(3, 3)


class TestDispatch:
    def test_bubbles_to_root(self):
        root, panel = make_tree()
        seen = []
        panel.on("click", lambda e: seen.append("panel"))
        root.on("click", lambda e: seen.append("root"))
        event = root.dispatch_click(50, 50)
        assert seen == ["panel", "root"]
        assert event.target is panel
        assert (event.page_x, event.page_y) == (50, 50)

    def test_stop_propagation(self):
        root, panel = make_tree()
        seen = []
        panel.on("click", lambda e: e.stop_propagation())
        root.on("click", lambda e: seen.append("root"))
        root.dispatch_click(50, 50)
        assert seen == []

    def test_miss_returns_none(self):
        root, _ = make_tree()
        assert root.dispatch_click(-5, -5) is None

    def test_remove_notifies_once(self):
        root, panel = make_tree()
        removed = []
        panel.on("remove", removed.append)
        panel.remove()
        panel.remove()
        assert removed == [panel]
        assert root.children == []
