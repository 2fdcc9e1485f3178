"""Draws the visual tree onto a pygame surface."""

from __future__ import annotations

import pygame

from .surface import Node


class Renderer:
    """
    Paints nodes depth-first, each node's children in stacking order, so a
    shape bound later is drawn over the ones bound before it.
    """

    def __init__(self, surf: pygame.Surface) -> None:
        self.surf = surf

    def draw(self, root: Node) -> None:
        self.draw_node(root)
        for child in root.stacked_children():
            self.draw(child)

    def draw_node(self, node: Node) -> None:
        """Fill the node's box with its background color, rounding corners if asked."""
        color = node.style.get("background_color")
        rect = node.rect()
        if not color or rect.width <= 0 or rect.height <= 0:
            return
        radius = int(node.style.get("border_radius", 0))
        pygame.draw.rect(self.surf, pygame.Color(color), rect, border_radius=radius)
