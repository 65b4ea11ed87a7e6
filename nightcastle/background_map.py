"""Tile maps drawn behind the scene."""

from __future__ import annotations

from pathlib import Path

from .config import TILE_SIZE
from .objects import GameObject, RenderView


def parse_tile_matrix(text: str) -> list[list[int]]:
    """Parse "rows columns" followed by rows*columns sprite ids."""
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("tile map is missing its row and column counts")
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"tile map holds a non-integer value: {exc}") from exc
    rows, columns = values[0], values[1]
    if rows < 0 or columns < 0:
        raise ValueError("tile map dimensions must not be negative")
    cells = values[2:]
    if len(cells) < rows * columns:
        raise ValueError(
            f"tile map declares {rows}x{columns} tiles but holds {len(cells)}"
        )
    return [cells[r * columns:(r + 1) * columns] for r in range(rows)]


class BackgroundMap(GameObject):
    """A grid of sprite ids drawn as tiles from the map's origin."""

    def __init__(self, tile_size=TILE_SIZE):
        super().__init__()
        self.tile_size = tile_size
        self.offset = 0
        self.matrix: list[list[int]] = []

    @property
    def rows(self) -> int:
        return len(self.matrix)

    @property
    def columns(self) -> int:
        return len(self.matrix[0]) if self.matrix else 0

    def load(self, path, offset=0) -> None:
        """Read the tile matrix from a file; sprite ids are shifted by offset."""
        self.offset = offset
        self.matrix = parse_tile_matrix(Path(path).read_text())

    def render(self, view: RenderView) -> None:
        for i, row in enumerate(self.matrix):
            for j, tile in enumerate(row):
                sprite = view.sprites.get(tile + self.offset)
                if sprite is None:
                    continue
                sprite.draw(
                    view.graphics,
                    self.x + j * self.tile_size - view.camera_x,
                    self.y + i * self.tile_size - view.camera_y,
                )