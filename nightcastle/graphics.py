"""Drawing onto a pygame surface: clearing, sprite blits with tint, alpha and flip."""

from __future__ import annotations

from typing import Optional

import pygame

CLEAR_COLOR = (100, 50, 10)


class Graphics:
    """Draws texture regions onto a target surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.color = (255, 255, 255)

    def set_color(self, r, g, b) -> None:
        """Set the tint multiplied into every later draw."""
        self.color = (int(r), int(g), int(b))

    def begin_frame(self) -> None:
        """Start a frame by clearing the target."""
        self.surface.fill(CLEAR_COLOR)

    def fill(self, color) -> None:
        self.surface.fill(color)

    def draw(
        self,
        x,
        y,
        texture: Optional[pygame.Surface],
        left,
        top,
        right,
        bottom,
        alpha=255,
        flip=False,
    ) -> None:
        """Blit the texture rectangle [left, right) x [top, bottom) at (x, y).

        A flipped draw mirrors the region horizontally about its own centre,
        so it occupies the same screen area.
        """
        if texture is None:
            return
        region = pygame.Rect(left, top, right - left, bottom - top)
        region = region.clip(texture.get_rect())
        if region.width <= 0 or region.height <= 0:
            return
        image = texture.subsurface(region).copy()
        if flip:
            image = pygame.transform.flip(image, True, False)
        if self.color != (255, 255, 255):
            image.fill(self.color, special_flags=pygame.BLEND_RGB_MULT)
        if alpha < 255:
            image.set_alpha(max(0, int(alpha)))
        self.surface.blit(image, (round(x), round(y)))

    def present(self) -> None:
        """Show the frame when drawing to the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()