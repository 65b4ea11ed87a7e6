"""Scenes and the manager that runs the current one."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .background_map import BackgroundMap
from .config import LEFT_CAMERA_INTRO_BLOCK, MENU_BACKGROUND_ID, RIGHT_CAMERA_INTRO_BLOCK
from .grid import GridManager, ObjectManager
from .objects import GameObject, RenderView

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


class Scene(ABC):
    """One screen of the game: entered once, then updated and drawn each frame."""

    @abstractmethod
    def enter(self) -> None:
        """Prepare the scene when it becomes current."""

    @abstractmethod
    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Advance the scene by dt milliseconds."""

    @abstractmethod
    def draw(self, view: RenderView) -> None:
        """Draw the scene."""


class SceneManager:
    """Holds the current scene and the world's object containers."""

    def __init__(self, game_state, graphics):
        self.game_state = game_state
        self.graphics = graphics
        self.current: Optional[Scene] = None
        self.objects = ObjectManager()
        self.grid_manager = GridManager()

    def change_scene(self, scene: Scene) -> None:
        """Make the scene current and enter it."""
        self.current = scene
        scene.enter()

    def _halted(self) -> bool:
        return self.game_state.is_game_win or self.game_state.is_game_end

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Flash the tint while the cross is active; update the scene while play goes on."""
        if self.game_state.is_cross_activated:
            self.graphics.set_color(*(WHITE if _now_ms() % 2 == 0 else BLACK))
        if self._halted() or self.current is None:
            return
        self.current.update(dt, co_objects)

    def draw(self, view: RenderView) -> None:
        if self._halted() or self.current is None:
            return
        self.current.draw(view)


class IntroScene(Scene):
    """The opening walk: a tiled background with a bounded camera."""

    def __init__(self, map_path, camera):
        self.map_path = map_path
        self.camera = camera
        self.background: Optional[BackgroundMap] = None
        self.elapsed = 0

    def enter(self) -> None:
        """Load the background map and limit the camera to the intro area."""
        background = BackgroundMap()
        background.load(self.map_path)
        self.background = background
        self.camera.set_corner_block(LEFT_CAMERA_INTRO_BLOCK, RIGHT_CAMERA_INTRO_BLOCK)
        self.elapsed = 0

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Count the time spent in the intro; it holds no moving objects."""
        self.elapsed += dt

    def draw(self, view: RenderView) -> None:
        if self.background is not None:
            self.background.render(view)


class MenuScene(Scene):
    """The title screen."""

    def __init__(self, sprites, game_state):
        self.game_state = game_state
        self.background = sprites.get(MENU_BACKGROUND_ID)
        self.start_requested = False

    def enter(self) -> None:
        """Reset the start request when the menu is shown."""
        self.start_requested = False

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Note whether the game has been started; there is no scene to move on to."""
        self.start_requested = bool(self.game_state.is_start_game)

    def draw(self, view: RenderView) -> None:
        if self.background is not None:
            self.background.draw(view.graphics, 0, 0, 255)