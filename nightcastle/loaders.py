"""Reading sprite tables and object layouts, and loading the game's resources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional

from .config import (
    INTRO_BACKGROUND_FILEPATH,
    INTRO_BACKGROUND_ID,
    INTRO_TILESHEET_INFO_FILEPATH,
    MENU_BACKGROUND_FILEPATH,
    MENU_BACKGROUND_ID,
    SIMON_DATA_FILEPATH,
)
from .ground import Ground
from .sprites import TextureError

SIMON_TEXTURE_ID = 1
INTRO_TILESHEET_TEXTURE_ID = 2
SIMON_TEXTURE_FILEPATH = "gamedata/Resources/simonTEX.png"
INTRO_TILESHEET_FILEPATH = "gamedata/Resources/Map/intro/intro_tilesheet.png"
DIRECTED_KIND_MIN = 30

_TEXTURES = (
    (SIMON_TEXTURE_ID, SIMON_TEXTURE_FILEPATH, (255, 0, 255)),
    (MENU_BACKGROUND_ID, MENU_BACKGROUND_FILEPATH, (1, 1, 1)),
    (INTRO_BACKGROUND_ID, INTRO_BACKGROUND_FILEPATH, (1, 1, 1)),
    (INTRO_TILESHEET_TEXTURE_ID, INTRO_TILESHEET_FILEPATH, (1, 1, 1)),
)


class ResourceError(Exception):
    """Raised when a resource data file cannot be read."""


@dataclass(frozen=True)
class ObjectRecord:
    """One entry of an object layout file."""

    kind: int
    x: float
    y: float
    direction: int = -1


def _take(tokens: Iterator[str], convert: Callable[[str], object]):
    try:
        return convert(next(tokens))
    except (StopIteration, ValueError):
        return None


def parse_sprite_records(text: str) -> list[tuple[int, int, int, int, int]]:
    """Parse "id left top right bottom" records until the data runs out or stops being numeric."""
    records = []
    values: list[int] = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
        if len(values) == 5:
            records.append(tuple(values))
            values = []
    return records


def parse_object_records(text: str) -> list[ObjectRecord]:
    """Parse "kind x y" records; kinds from 30 up carry a trailing direction."""
    tokens = iter(text.split())
    records = []
    while True:
        kind, x, y = _take(tokens, int), _take(tokens, float), _take(tokens, float)
        if kind is None or x is None or y is None:
            break
        if kind < DIRECTED_KIND_MIN:
            records.append(ObjectRecord(kind, x, y))
            continue
        direction = _take(tokens, int)
        if direction is None:
            records.append(ObjectRecord(kind, x, y))
            break
        records.append(ObjectRecord(kind, x, y, direction))
    return records


def _read(path, what: str) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise ResourceError(f"failed to read {what} data from {path}: {exc}") from exc


def read_sprite_file(path, sprites, texture, offset=0) -> int:
    """Add every sprite listed in the file, ids shifted by offset; return how many."""
    records = parse_sprite_records(_read(path, "sprite"))
    for sprite_id, left, top, right, bottom in records:
        sprites.add(sprite_id + offset, left, top, right, bottom, texture)
    return len(records)


def read_objects(path, grid) -> list[Ground]:
    """Place a ground block in the grid for every object listed in the file."""
    placed = []
    for record in parse_object_records(_read(path, "object")):
        ground = Ground(spawn=grid.add_object)
        ground.x, ground.y = record.x, record.y
        grid.add_object(ground)
        placed.append(ground)
    return placed


class ResourceLoader:
    """Loads the game's textures and sprite tables from a data directory."""

    def __init__(self, textures, sprites, base_dir=None):
        self.textures = textures
        self.sprites = sprites
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def _path(self, relative) -> Path:
        return self.base_dir / relative

    def init_resources(self) -> list[int]:
        """Load textures and sprites; return the ids of textures that were missing."""
        missing = self.load_textures()
        self.load_sprites()
        return missing

    def load_textures(self) -> list[int]:
        """Load every texture that exists; return the ids of those that could not be loaded."""
        missing = []
        for texture_id, relative, key in _TEXTURES:
            try:
                self.textures.add(texture_id, self._path(relative), key)
            except TextureError:
                missing.append(texture_id)
        return missing

    def load_sprites(self) -> None:
        """Register the background sprites and read the sprite tables."""
        self.sprites.add(
            MENU_BACKGROUND_ID, 0, 0, 552, 384, self.textures.get(MENU_BACKGROUND_ID)
        )
        self.sprites.add(
            INTRO_BACKGROUND_ID, 0, 0, 1536, 384, self.textures.get(INTRO_BACKGROUND_ID)
        )
        read_sprite_file(
            self._path(SIMON_DATA_FILEPATH),
            self.sprites,
            self.textures.get(SIMON_TEXTURE_ID),
        )
        read_sprite_file(
            self._path(INTRO_TILESHEET_INFO_FILEPATH),
            self.sprites,
            self.textures.get(INTRO_TILESHEET_TEXTURE_ID),
        )

    def load_objects(self, path, grid) -> list[Ground]:
        """Read an object layout, relative to the data directory, into the grid."""
        return read_objects(self._path(path), grid)