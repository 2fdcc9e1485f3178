"""Retained visual tree that the field and its shapes live in.

Nodes carry a style mapping and class tags much like page elements do. The
renderer turns them into pygame draw calls, and ``dispatch_click`` routes a
mouse click to the topmost node under the cursor, then bubbles it towards the
root until a handler stops it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import pygame

from .models import Point


@dataclass
class ClickEvent:
    """
    A left click delivered to the visual tree.

    Attributes
    ----------
    page_x, page_y : int
        Window coordinates of the click.
    target : Node | None
        Deepest node under the click.
    propagation_stopped : bool
        Set by ``stop_propagation``; ancestors are not notified afterwards.
    """
    page_x: int
    page_y: int
    target: Node | None = None
    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class Node:
    """
    One visual element: style attributes, class tags, children and listeners.

    Position keys (``left``, ``top``) are relative to the parent node, so
    ``offset()`` walks the ancestors to find the page position.
    """

    def __init__(self, classes: list[str] | None = None, style: dict[str, Any] | None = None) -> None:
        self.classes: list[str] = list(classes or [])
        self.style: dict[str, Any] = dict(style or {})
        self.parent: Node | None = None
        self.children: list[Node] = []
        self._listeners: dict[str, list[Callable[[Any], None]]] = {}

    def __repr__(self) -> str:
        return f"Node(classes={self.classes!r}, style={self.style!r})"

    # ------------------------------- Tree ---------------------------------------

    def append(self, child: Node) -> None:
        """Attach ``child`` as the last child, detaching it from any old parent."""
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)

    def remove(self) -> None:
        """
        Detach this node from its parent and notify ``remove`` listeners.

        Removing a node that is already detached does nothing, so a second
        click racing the first one cannot remove anything twice.
        """
        if self.parent is None:
            return
        self.parent.children.remove(self)
        self.parent = None
        self._emit("remove", self)

    def find(self, class_name: str) -> list[Node]:
        """Return all descendants carrying ``class_name``, in document order."""
        found = []
        for child in self.children:
            if child.has_class(class_name):
                found.append(child)
            found.extend(child.find(class_name))
        return found

    def stacked_children(self) -> list[Node]:
        """Children from bottom to top: by z-index, later siblings above earlier."""
        return sorted(self.children, key=lambda node: node.z_index)

    # ------------------------------- Style --------------------------------------

    def add_class(self, class_name: str) -> None:
        if class_name not in self.classes:
            self.classes.append(class_name)

    def has_class(self, class_name: str) -> bool:
        return class_name in self.classes

    def css(self, attributes: dict[str, Any]) -> None:
        """Merge ``attributes`` into the node's style."""
        self.style.update(attributes)

    @property
    def width(self) -> int:
        return int(self.style.get("width", 0))

    @property
    def height(self) -> int:
        return int(self.style.get("height", 0))

    @property
    def z_index(self) -> int:
        return int(self.style.get("z_index", 0))

    def offset(self) -> Point:
        """Page position of the node's top-left corner."""
        x = y = 0
        node: Node | None = self
        while node is not None:
            x += node.style.get("left", 0)
            y += node.style.get("top", 0)
            node = node.parent
        return Point(x, y)

    def rect(self) -> pygame.Rect:
        origin = self.offset()
        return pygame.Rect(origin.x, origin.y, self.width, self.height)

    # ------------------------------- Events -------------------------------------

    def on(self, event_name: str, handler: Callable[[Any], None]) -> None:
        """Register ``handler`` for ``click`` (gets a ClickEvent) or ``remove`` (gets the node)."""
        self._listeners.setdefault(event_name, []).append(handler)

    def _emit(self, event_name: str, payload: Any) -> None:
        for handler in list(self._listeners.get(event_name, [])):
            handler(payload)

    def contains_point(self, x: int, y: int) -> bool:
        """Hit test against the node's box, honouring rounded corners."""
        rect = self.rect()
        if not rect.collidepoint(x, y):
            return False
        radius = min(int(self.style.get("border_radius", 0)), rect.width / 2, rect.height / 2)
        if radius <= 0:
            return True
        # distance to the inner rectangle whose corners are the arc centers
        nearest_x = min(max(x, rect.left + radius), rect.right - radius)
        nearest_y = min(max(y, rect.top + radius), rect.bottom - radius)
        return math.hypot(x - nearest_x, y - nearest_y) <= radius

    def hit_test(self, x: int, y: int) -> Node | None:
        """Return the deepest, topmost node under (x, y), or None."""
        for child in reversed(self.stacked_children()):
            hit = child.hit_test(x, y)
            if hit is not None:
                return hit
        return self if self.contains_point(x, y) else None

    def dispatch_click(self, page_x: int, page_y: int) -> ClickEvent | None:
        """
        Deliver a click to the node under the cursor and bubble it upwards.

        Parameters
        ----------
        page_x, page_y : int
            Window coordinates of the click.

        Returns
        -------
        ClickEvent | None
            The delivered event, or None when nothing was under the cursor.
        """
        target = self.hit_test(page_x, page_y)
        if target is None:
            return None
        event = ClickEvent(page_x, page_y, target)
        node: Node | None = target
        while node is not None and not event.propagation_stopped:
            parent = node.parent
            node._emit("click", event)
            node = parent
        return event
