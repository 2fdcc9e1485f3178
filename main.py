"""Round/Square entry point"""

from __future__ import annotations

import pygame

from roundsquare.constants import (
    WIDTH, HEIGHT, FPS, BG_COLOR, FONT_NAME, FONT_SIZE_MEDIUM, LOG_FILE,
    FIELD_CLASS, FIELD_LEFT, FIELD_TOP, FIELD_WIDTH, FIELD_HEIGHT, FIELD_COLOR, FIELD_Z_INDEX,
)
from roundsquare.controller import InteractionController
from roundsquare.field import Field
from roundsquare.logger import ShapeLogger
from roundsquare.randomizer import RandomGenerator
from roundsquare.renderer import Renderer
from roundsquare.shapes import Round, Square
from roundsquare.surface import Node
from roundsquare.ui import HUD


def build_document() -> Node:
    """Page root holding the single field element."""
    document = Node(classes=["document"], style={"width": WIDTH, "height": HEIGHT})
    document.append(Node(classes=[FIELD_CLASS], style={
        "left": FIELD_LEFT,
        "top": FIELD_TOP,
        "width": FIELD_WIDTH,
        "height": FIELD_HEIGHT,
        "background_color": FIELD_COLOR,
        "z_index": FIELD_Z_INDEX,
    }))
    return document


class App:
    """
    Main application: initializes pygame, wires field, controller, renderer
    and logger together, and runs the event loop.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize subsystems and build the field."""
        pygame.init()
        pygame.display.set_caption("Round/Square")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.logger = ShapeLogger(LOG_FILE)

        self.document = build_document()
        self.field = Field(self.document.find(FIELD_CLASS))
        self.controller = InteractionController(RandomGenerator(seed), self.logger)
        self.controller.attach(self.field)

        self.renderer = Renderer(self.screen)
        self.hud = HUD(self.font)
        self.show_hints = True
        self.show_fps = False

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main loop: process events, render; exits on quit request."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_h:
                        self.show_hints = not self.show_hints
                    elif event.key == pygame.K_f:
                        self.show_fps = not self.show_fps
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.document.dispatch_click(*event.pos)

            self.draw(self.clock.get_fps())

            # Cap frame rate
            self.clock.tick(FPS)

        pygame.quit()

    # --------------------------------- Rendering ------------------------------------

    def draw(self, fps: float) -> None:
        """Compose the frame: background -> field and shapes -> HUD."""
        self.screen.fill(BG_COLOR)
        self.renderer.draw(self.document)

        shapes = self.field.shapes
        squares = sum(1 for shape in shapes if isinstance(shape, Square))
        rounds = sum(1 for shape in shapes if isinstance(shape, Round))
        self.hud.draw(self.screen, len(shapes), squares, rounds, self.field.z_index,
                      self.show_hints, self.show_fps, fps)

        pygame.display.flip()


if __name__ == "__main__":
    App().run()
