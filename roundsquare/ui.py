"""HUD drawn over the field"""

import pygame

from .constants import (
    HUD_PADDING, TEXT_COLOR, HINT_COLOR,
    FONT_NAME, FONT_SIZE_SMALL
)

HINT_TEXT = "[LMB] field: add shape | [LMB] shape: remove | [H] hints | [F] fps | [ESC] quit"


class HUD:
    """Heads-Up Display: shape stats on the right, hint line centered on top."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, shape_count: int, squares: int, rounds: int,
             top_layer: int, show_hints: bool = True, show_fps: bool = False,
             fps: float = 0.0) -> None:
        """Render shape counts, the top stacking layer and optional hints/fps."""
        current_width = surf.get_width()

        if show_hints:
            hint = self.small_font.render(HINT_TEXT, True, HINT_COLOR)
            hint_rect = hint.get_rect(center=(current_width // 2, HUD_PADDING + hint.get_height() // 2))
            surf.blit(hint, hint_rect)

        stats = [
            f"Shapes: {shape_count}",
            f"Squares: {squares}  Rounds: {rounds}",
            f"Top layer: {top_layer}",
        ]
        # Left aligned under the hint line
        y = HUD_PADDING + self.small_font.get_height() + 6
        x = HUD_PADDING
        line = "   ".join(stats)
        text_surf = self.font.render(line, True, TEXT_COLOR)
        surf.blit(text_surf, (x, y))

        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (current_width - fps_text.get_width() - HUD_PADDING, y))
