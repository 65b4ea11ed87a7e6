"""Base classes for everything that lives in the game world."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass
class RenderView:
    """What a render call needs: where to draw, the sprites, and the camera offset."""

    graphics: Any
    sprites: Any
    camera_x: float = 0.0
    camera_y: float = 0.0


class GameObject:
    """A positioned, sized object that moves by velocity over elapsed time."""

    def __init__(self, x=0.0, y=0.0, width=0.0, height=0.0):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.gy = 0.0
        self.id = 0
        self.tag = 0
        self.type = 0
        self.direction = 0
        self.dx = 0.0
        self.dy = 0.0
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = 0
        self.dt = 0
        self.flip = False

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.width

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.height

    def x_center(self) -> float:
        return self.x + self.width / 2

    def y_center(self) -> float:
        return self.y + self.height / 2

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (left, top, right, bottom)."""
        return (self.left(), self.top(), self.right(), self.bottom())

    def update(self, dt, co_objects: Optional[Sequence["GameObject"]] = None) -> None:
        """Record the frame time and compute this frame's displacement."""
        self.dt = dt
        self.dx = self.vx * dt
        self.dy = self.vy * dt

    def update_location(self) -> None:
        """Apply the displacement computed by the last update."""
        self.x += self.dx
        self.y += self.dy

    def render(self, view: RenderView) -> None:
        """Draw the object; objects without a visual draw nothing."""
        return None


class Character(GameObject):
    """A game object that can run and be stopped."""

    def stop_run(self) -> None:
        """Stop horizontal movement."""
        self.vx = 0.0
        self.dx = 0.0