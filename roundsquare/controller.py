"""Click-to-shape interaction for a field."""

from __future__ import annotations

from .field import Field
from .logger import ShapeLogger
from .models import Point
from .randomizer import RandomGenerator
from .shapes import Round, Shape, Square


class InteractionController:
    """
    Spawns a random Square or Round wherever the field is clicked.

    Notes
    - The kind is a 50/50 pick from ``rand_int(0, 1)``.
    - Size and color are random; the center is the click point.
    - Binding always happens before rendering.
    """

    def __init__(self, generator: RandomGenerator | None = None, logger: ShapeLogger | None = None) -> None:
        self.generator = generator or RandomGenerator()
        self.logger = logger

    def attach(self, field: Field) -> None:
        """Route the field's clicks (and shape removals) through this controller."""
        field.click_callback = lambda click_point: self.spawn_shape(field, click_point)
        field.remove_callback = self.handle_removed

    def spawn_shape(self, field: Field, click_point: Point) -> Shape:
        shape_class = Square if self.generator.rand_int(0, 1) == 0 else Round

        shape = shape_class()
        shape.set_random_params({"center": click_point}, generator=self.generator)
        field.bind_figure(shape)
        shape.render()

        if self.logger is not None:
            self.logger.log_spawn(shape)
        return shape

    def handle_removed(self, shape: Shape) -> None:
        if self.logger is not None:
            self.logger.log_remove(shape)
