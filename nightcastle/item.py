"""Pick-up items dropped into the world."""

from __future__ import annotations

import time
from typing import Optional, Sequence

from .config import ITEM_GRAVITY
from .enums import ObjectId, ObjectState, TeamType
from .objects import GameObject, RenderView

_RANDOM_ITEMS = (
    ObjectId.ITEM_SMALLHEART,
    ObjectId.ITEM_BIGHEART,
    ObjectId.ITEM_MONEYBAG,
    ObjectId.ITEM_MORNINGSTAR,
    ObjectId.ITEM_DAGGER,
    ObjectId.ITEM_AXE,
    ObjectId.ITEM_BOOMERANG,
    ObjectId.ITEM_FIREBOMB,
    ObjectId.ITEM_PORKCHOP,
    ObjectId.ITEM_STOPWATCH,
)

SPAWN_X = 300.0
SPAWN_Y = 0.0
DISAPPEAR_AFTER_MS = 2000


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def random_item_id(ticks) -> ObjectId:
    """Choose an item kind from a tick count; the eleventh slot gives a small heart."""
    slot = int(ticks) % 11
    if slot < len(_RANDOM_ITEMS):
        return _RANDOM_ITEMS[slot]
    return ObjectId.ITEM_SMALLHEART


class Item(GameObject):
    """An item that falls under its own gravity."""

    def __init__(self, item_id=None, gravity=ITEM_GRAVITY, ticks=None):
        super().__init__()
        if ticks is None:
            ticks = _now_ms()
        self.state = ObjectState.ALIVE
        self.type = TeamType.ITEM
        self.id = random_item_id(ticks) if item_id is None else item_id
        self.gy = ITEM_GRAVITY
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.time_start_disappear = ticks
        self.time_during_disappear = DISAPPEAR_AFTER_MS
        self.enable_disappear = False
        self.gy = float(gravity)

    @property
    def state(self):
        return self._state

    @state.setter
    def state(self, value):
        self._state = value
        if value == ObjectState.DIE:
            self.x = SPAWN_X
            self.y = SPAWN_Y

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Compute this frame's displacement, then accelerate downwards."""
        super().update(dt, co_objects)
        self.vy += self.gy * dt

    def bounding_box(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def render(self, view: RenderView) -> None:
        sprite = view.sprites.get(self.id)
        if sprite is None:
            return
        sprite.draw(view.graphics, self.x - view.camera_x, self.y - view.camera_y, 255)