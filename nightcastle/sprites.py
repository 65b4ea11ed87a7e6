"""Textures loaded from image files and sprites cut from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame


class TextureError(Exception):
    """Raised when a texture image cannot be loaded."""


@dataclass(frozen=True)
class Sprite:
    """A rectangle [left, right) x [top, bottom) of a texture."""

    sprite_id: int
    left: int
    top: int
    right: int
    bottom: int
    texture: Optional[pygame.Surface] = None

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def draw(self, graphics, x, y, alpha=255, flip=False) -> None:
        """Draw the sprite at screen position (x, y)."""
        graphics.draw(
            x, y, self.texture, self.left, self.top, self.right, self.bottom, alpha, flip
        )


class SpriteSheet:
    """Sprites by id."""

    def __init__(self):
        self._sprites: dict[int, Sprite] = {}

    def add(self, sprite_id, left, top, right, bottom, texture) -> Sprite:
        """Register a sprite, replacing any with the same id."""
        sprite = Sprite(sprite_id, left, top, right, bottom, texture)
        self._sprites[sprite_id] = sprite
        return sprite

    def get(self, sprite_id) -> Optional[Sprite]:
        """Return the sprite with this id, or None if there is none."""
        return self._sprites.get(sprite_id)

    def __contains__(self, sprite_id) -> bool:
        return sprite_id in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)


class TextureStore:
    """Textures by id, loaded from image files with a transparent colour key."""

    def __init__(self):
        self._textures: dict[int, pygame.Surface] = {}

    def add(self, texture_id, path, transparent_color) -> pygame.Surface:
        """Load an image and key out the transparent colour."""
        try:
            texture = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"cannot load texture {texture_id} from {path}: {exc}") from exc
        texture.set_colorkey(transparent_color)
        self._textures[texture_id] = texture
        return texture

    def get(self, texture_id) -> Optional[pygame.Surface]:
        """Return the texture with this id, or None if it was never loaded."""
        return self._textures.get(texture_id)