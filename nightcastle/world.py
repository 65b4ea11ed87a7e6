"""The game world: resources, camera, player and scenes tied together."""

from __future__ import annotations

from pathlib import Path

from .camera import Camera
from .config import BACKGROUND_COLOR
from .hud import VisualFigures
from .loaders import ResourceLoader
from .objects import RenderView
from .scenes import IntroScene, SceneManager
from .simon import Simon
from .sprites import SpriteSheet, TextureStore
from .state import GameState

INTRO_MAP_FILEPATH = "gamedata/Resources/Map/intro/IntroBGMap.txt"


class GameWorld:
    """Loads resources, starts the intro scene and runs one frame at a time."""

    def __init__(self, graphics, base_dir=None):
        self.graphics = graphics
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.textures = TextureStore()
        self.sprites = SpriteSheet()
        self.camera = Camera()
        self.game_state = GameState()
        self.simon = Simon()
        self.hud = VisualFigures()
        self.hud.is_stop_time = True
        self.missing_textures = ResourceLoader(
            self.textures, self.sprites, self.base_dir
        ).init_resources()
        self.scene_manager = SceneManager(self.game_state, graphics)
        self.scene_manager.change_scene(
            IntroScene(self.base_dir / INTRO_MAP_FILEPATH, self.camera)
        )

    def update(self, dt=0) -> None:
        self.scene_manager.update(dt)
        self.camera.update(dt, self.simon)

    def render(self) -> None:
        """Clear the frame, draw the current scene and present it."""
        self.graphics.begin_frame()
        self.graphics.fill(BACKGROUND_COLOR)
        view = RenderView(self.graphics, self.sprites, self.camera.x, self.camera.y)
        self.scene_manager.draw(view)
        self.graphics.present()