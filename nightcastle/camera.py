"""A side-scrolling camera that follows a target horizontally between two limits."""

from __future__ import annotations

from typing import Optional

from .config import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from .objects import GameObject

DEFAULT_LEFT_BLOCK = 0.0
DEFAULT_RIGHT_BLOCK = 5600.0


class Camera(GameObject):
    """Viewport into the world; scrolls with its target unless locked."""

    def __init__(self, x=0.0, y=0.0, width=VIEWPORT_WIDTH, height=VIEWPORT_HEIGHT):
        super().__init__(x, y, width, height)
        self.locked = False
        self.left_corner_block = DEFAULT_LEFT_BLOCK
        self.right_corner_block = DEFAULT_RIGHT_BLOCK
        self.set_corner_block(DEFAULT_LEFT_BLOCK, DEFAULT_RIGHT_BLOCK)

    def lock(self) -> None:
        self.locked = True

    def unlock(self) -> None:
        self.locked = False

    def set_corner_block(self, left, right) -> None:
        """Set the world x-range the camera may show."""
        self.left_corner_block = float(left)
        self.right_corner_block = float(right)

    def update(self, dt, target: Optional[GameObject] = None) -> None:
        """Follow the target's horizontal movement once it passes the camera centre."""
        self.dt = dt
        if self.locked:
            return
        if target is not None and (
            (target.x + target.dx < self.x_center() and target.dx < 0)
            or (target.x + target.dx > self.x_center() and target.dx > 0)
        ):
            self.dx = target.dx
        else:
            self.dx = 0.0
        if self.x + self.dx < self.left_corner_block and self.dx < 0:
            self.x = self.left_corner_block
            self.dx = 0.0
        if self.right() + self.dx > self.right_corner_block and self.dx > 0:
            self.x = self.right_corner_block - self.width
            self.dx = 0.0
        self.x += self.dx