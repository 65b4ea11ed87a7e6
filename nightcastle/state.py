"""Checkpoint and global game state."""

from __future__ import annotations

from dataclasses import dataclass, field

_REBORN_POINTS = {
    0: (100.0, 100.0),
    1: (3480.0, 76.0),
    2: (4176.0, 76.0),
}


@dataclass
class StageState:
    """Current stage number and where the player respawns."""

    state_number: int = 0
    x_reborn: float = 100.0
    y_reborn: float = 100.0

    def reborn_handle(self) -> None:
        """Advance to the next stage and move the respawn point if it is known."""
        self.state_number += 1
        point = _REBORN_POINTS.get(self.state_number)
        if point is not None:
            self.x_reborn, self.y_reborn = point


@dataclass
class GameState:
    """Flags that drive the scene manager and the game loop."""

    is_start_game: bool = False
    is_locking_keyboard: bool = False
    game_level: int = 0
    is_stop_watch: bool = False
    is_cross_activated: bool = False
    is_check_point: bool = False
    is_game_end: bool = False
    is_game_win: bool = False
    stage: StageState = field(default_factory=StageState)