"""Shape entities: random parameters, style computation, binding and rendering.

A shape is created empty, randomized once, bound to a node by the field, and
rendered by writing its style attributes onto that node. Clicking the node
removes it, and the click never reaches the field underneath.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from .constants import (
    RANDOM_CENTER_MIN, RANDOM_CENTER_MAX,
    SQUARE_CLASS, SQUARE_MIN_SIZE, SQUARE_MAX_SIZE,
    ROUND_CLASS, ROUND_MIN_SIZE, ROUND_MAX_SIZE,
)
from .models import Point, round_half_up
from .randomizer import RandomGenerator
from .surface import ClickEvent, Node

SHAPE_PARAMS = ("center", "size", "color")
HEX_COLOR = re.compile(r"#([0-9a-fA-F]{1,6})")


def normalize_color(color: Any) -> str:
    """Return ``color`` as lowercase ``#rrggbb``; short forms are zero-padded (``#abc`` -> ``#000abc``)."""
    match = HEX_COLOR.fullmatch(color) if isinstance(color, str) else None
    if match is None:
        raise ValueError(f"color must be '#' followed by 1-6 hex digits, got {color!r}")
    return f"#{int(match.group(1), 16):06x}"


class NotBoundError(RuntimeError):
    """Raised when a shape is rendered before it was bound to a node."""


class Shape(ABC):
    """
    Common state and behaviour for Square and Round.

    Attributes
    ----------
    center : Point | None
        Center of the shape inside its field.
    size : int | None
        Edge length for squares, diameter for rounds.
    color : str | None
        ``#rrggbb`` background color.
    node : Node | None
        The surface node the shape is bound to, if any.
    """

    min_size = 0
    max_size = 0

    def __init__(self, center: Point | None = None, size: int | None = None, color: str | None = None) -> None:
        if center is not None and not isinstance(center, Point):
            raise TypeError("The center param must be instance of Point")
        self.center = center
        self.size = size
        self.color = normalize_color(color) if color is not None else None
        self.node: Node | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(center={self.center!r}, size={self.size!r}, color={self.color!r})"

    @abstractmethod
    def get_style_class(self) -> str:
        """Return the class tag applied to the bound node."""

    @property
    def is_bound(self) -> bool:
        return self.node is not None

    # ------------------------------- Parameters ---------------------------------

    def set_random_params(self, overrides: dict[str, Any] | None = None,
                          generator: RandomGenerator | None = None) -> None:
        """
        Randomize center, color and size, then apply ``overrides`` on top.

        Parameters
        ----------
        overrides : dict, optional
            Any of ``center``, ``size``, ``color``; given values win over the
            random ones.
        generator : RandomGenerator, optional
            Source of randomness; a fresh one is used when omitted.
        """
        overrides = dict(overrides or {})
        unknown = set(overrides) - set(SHAPE_PARAMS)
        if unknown:
            raise TypeError(f"Unknown shape params: {', '.join(sorted(unknown))}")

        generator = generator or RandomGenerator()
        params = {
            "center": Point(generator.rand_int(RANDOM_CENTER_MIN, RANDOM_CENTER_MAX),
                            generator.rand_int(RANDOM_CENTER_MIN, RANDOM_CENTER_MAX)),
            "color": generator.random_color(),
            "size": generator.rand_int(self.min_size, self.max_size),
        }
        params.update(overrides)

        if not isinstance(params["center"], Point):
            raise TypeError("The center param must be instance of Point")
        if not self.min_size <= params["size"] <= self.max_size:
            raise ValueError(
                f"{type(self).__name__} size must be within [{self.min_size}, {self.max_size}], got {params['size']}"
            )
        color = normalize_color(params["color"])
        self.center = params["center"]
        self.color = color
        self.size = params["size"]

    def compute_style(self) -> dict[str, Any]:
        """Return background color, box size and top-left position for the node."""
        if self.center is None or self.size is None or self.color is None:
            raise ValueError(f"{type(self).__name__} has no parameters yet, call set_random_params first")
        half = round_half_up(self.size / 2)
        return {
            "background_color": self.color,
            "width": self.size,
            "height": self.size,
            "top": self.center.y - half,
            "left": self.center.x - half,
        }

    # ------------------------------- Surface ------------------------------------

    def bind_node(self, node: Node) -> None:
        """
        Attach the shape to ``node`` and make a click on it remove the shape.

        Raises
        ------
        TypeError
            If ``node`` is not a surface Node.
        ValueError
            If the shape is already bound.
        """
        if not isinstance(node, Node):
            raise TypeError("node must be a surface Node")
        if self.node is not None:
            raise ValueError(f"{type(self).__name__} is already bound to a node")
        self.node = node
        node.on("click", self.handle_click)
        node.on("remove", self._handle_removed)

    def handle_click(self, event: ClickEvent) -> None:
        event.stop_propagation()
        self.remove()

    def remove(self) -> None:
        """Remove the bound node from the field; does nothing when unbound."""
        if self.node is not None:
            self.node.remove()

    def _handle_removed(self, node: Node) -> None:
        if node is self.node:
            self.node = None

    def render(self) -> None:
        """Write class tag and style attributes onto the bound node."""
        if self.node is None:
            raise NotBoundError(f"{type(self).__name__} must be bound to a Field before rendering")
        style = {"position": "absolute"}
        style.update(self.compute_style())
        self.node.add_class(self.get_style_class())
        self.node.css(style)


class Square(Shape):
    min_size = SQUARE_MIN_SIZE
    max_size = SQUARE_MAX_SIZE

    def get_style_class(self) -> str:
        return SQUARE_CLASS


class Round(Shape):
    """A circle: a square box with fully rounded corners."""

    min_size = ROUND_MIN_SIZE
    max_size = ROUND_MAX_SIZE

    def get_style_class(self) -> str:
        return ROUND_CLASS

    def compute_style(self) -> dict[str, Any]:
        style = super().compute_style()
        style["border_radius"] = round_half_up(self.size / 2)
        return style
