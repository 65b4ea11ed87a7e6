"""The player character."""

from __future__ import annotations

from typing import Optional, Sequence

from .objects import Character, GameObject, RenderView

SIMON_SPRITE_ID = 0
START_X = 200.0
START_Y = 100.0
SIMON_WIDTH = 32.0
SIMON_HEIGHT = 60.0


class Simon(Character):
    """The hero; for now he stands still at his starting position."""

    def __init__(self):
        super().__init__(START_X, START_Y, SIMON_WIDTH, SIMON_HEIGHT)

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Simon holds his position: no displacement is produced."""
        self.dt = dt

    def render(self, view: RenderView) -> None:
        sprite = view.sprites.get(SIMON_SPRITE_ID)
        if sprite is None:
            return
        sprite.draw(view.graphics, self.x - view.camera_x, self.y - view.camera_y)

    def stop_run(self) -> None:
        """Simon has no running motion to stop; his speed is left as it is."""
        self.dx = 0.0

    def walk(self) -> None:
        """Walking produces no motion yet; the displacement stays zero."""
        self.dx = 0.0