"""The interactive field: click-to-point mapping and shape binding."""

from __future__ import annotations

from typing import Callable, Iterable

from .models import Point
from .shapes import Shape
from .surface import ClickEvent, Node


class Field:
    """
    Owns one surface element, turns clicks on it into field-local Points, and
    stacks bound shapes on top of each other.

    Height, width, z-index and page offset are measured once at construction;
    later layout changes of the element are not picked up.
    """

    def __init__(self, candidates: Iterable[Node]) -> None:
        candidates = list(candidates)
        if len(candidates) != 1:
            raise ValueError(f"Every Field can work with only one surface element, got {len(candidates)}")
        element = candidates[0]
        if not isinstance(element, Node):
            raise TypeError("Field element must be a surface Node")

        self.element = element
        self.height = element.height
        self.width = element.width
        self.z_index = element.z_index
        self.offset = element.offset()
        self.shapes: list[Shape] = []
        self.click_callback: Callable[[Point], None] | None = None
        self.remove_callback: Callable[[Shape], None] | None = None

        self.element.on("click", self.handle_click)

    def handle_click(self, event: ClickEvent) -> None:
        """Call ``click_callback`` with the field-local point of the click."""
        click_point = self.get_point_from_event(event)
        if self.click_callback is not None:
            self.click_callback(click_point)

    def get_point_from_event(self, event: ClickEvent) -> Point:
        return Point(event.page_x - self.offset.x, event.page_y - self.offset.y)

    def bind_figure(self, shape: Shape) -> None:
        """
        Give ``shape`` a new node one level above everything bound so far.

        The shape is not rendered here; call ``shape.render()`` afterwards.

        Raises
        ------
        TypeError
            If ``shape`` is not a Shape. The field is left untouched.
        ValueError
            If ``shape`` is already bound. The field is left untouched.
        """
        if not isinstance(shape, Shape):
            raise TypeError("Param must be instance of Shape")
        if shape.is_bound:
            raise ValueError(f"{type(shape).__name__} is already bound to a node")

        self.z_index += 1
        node = Node(style={"z_index": self.z_index})
        shape.bind_node(node)
        node.on("remove", lambda _node: self._forget(shape))

        self.element.append(node)
        self.shapes.append(shape)

    def _forget(self, shape: Shape) -> None:
        if shape in self.shapes:
            self.shapes.remove(shape)
            if self.remove_callback is not None:
                self.remove_callback(shape)
