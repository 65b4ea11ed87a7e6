"""Solid ground blocks, some of which break and drop an item."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .config import ID_GROUND, ID_GROUND2, ID_GROUND3, ID_GROUND_INTRO, TILE_SIZE
from .enums import ObjectId, ObjectState, TeamType
from .item import Item
from .objects import GameObject, RenderView

BLOCK_SIZE = 32


def ground_sprite_id(ground_num) -> int:
    """Sprite id for a ground style number."""
    if ground_num == 0:
        return ID_GROUND_INTRO
    if ground_num == 1:
        return ID_GROUND
    if ground_num == 2:
        return ID_GROUND2
    return ID_GROUND3


class Ground(GameObject):
    """A ground block; breakable blocks die when burnt and may spawn an item."""

    def __init__(
        self,
        ground_num=1,
        breakable=False,
        stair_flag=False,
        item_id=None,
        spawn: Optional[Callable[[Item], object]] = None,
    ):
        super().__init__(0.0, 0.0, BLOCK_SIZE, BLOCK_SIZE)
        self.id = ObjectId.GROUND
        self.type = TeamType.GROUND
        self.state = ObjectState.ALIVE
        self.breakable = breakable
        self.stair_flag = stair_flag
        self.item_id = item_id
        self.spawn = spawn
        self.hidden = False
        self.sprite_id: Optional[int] = ground_sprite_id(ground_num)

    @property
    def has_item(self) -> bool:
        return self.item_id is not None

    @classmethod
    def area(cls, x, y, width, height, hidden=False) -> "Ground":
        """An invisible-or-plain ground region of a given size."""
        ground = cls()
        ground.x, ground.y = float(x), float(y)
        ground.width, ground.height = float(width), float(height)
        ground.hidden = hidden
        ground.sprite_id = None
        return ground

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Collision box: always one tile from the top-left corner."""
        return (self.x, self.y, self.x + TILE_SIZE, self.y + TILE_SIZE)

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """A burnt breakable block drops its item, if any, and dies."""
        if not self.breakable or self.state != ObjectState.BURN:
            return
        if self.has_item:
            item = Item(self.item_id)
            item.x = self.x + 0.9
            item.y = self.y + self.height / 2
            if self.spawn is not None:
                self.spawn(item)
        self.state = ObjectState.DIE

    def render(self, view: RenderView) -> None:
        if self.hidden or self.stair_flag or self.sprite_id is None:
            return
        sprite = view.sprites.get(self.sprite_id)
        if sprite is None:
            return
        sprite.draw(view.graphics, self.x - view.camera_x, self.y - view.camera_y)