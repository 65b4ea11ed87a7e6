"""The game window and its frame loop."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

import pygame

from .config import BACK_HEIGHT, BACK_WIDTH, MAX_FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH, TITLE
from .graphics import Graphics
from .loaders import ResourceError
from .world import GameWorld

TICKS_PER_FRAME = int(1000 / (MAX_FRAME_RATE * 1.2))


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


class GamePanel:
    """Opens the window, owns the world and drives it frame by frame."""

    def __init__(self, base_dir=None):
        pygame.display.init()
        try:
            self.window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(TITLE)
            self.back_buffer = pygame.Surface((BACK_WIDTH, BACK_HEIGHT))
            self.graphics = Graphics(self.back_buffer)
            self.world = GameWorld(self.graphics, base_dir)
        except BaseException:
            pygame.display.quit()
            raise

    def __enter__(self) -> "GamePanel":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        pygame.display.quit()

    def _present(self) -> None:
        pygame.transform.scale(self.back_buffer, self.window.get_size(), self.window)
        pygame.display.flip()

    def run(self, max_frames=None) -> int:
        """Run until the window is closed or max_frames frames are drawn; return the count."""
        frames = 0
        frame_start = _now_ms()
        while max_frames is None or frames < max_frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            now = _now_ms()
            dt = now - frame_start
            if dt >= TICKS_PER_FRAME:
                frame_start = now
                self.world.update(dt)
                self.world.render()
                self._present()
                frames += 1
            else:
                time.sleep((TICKS_PER_FRAME - dt) / 1000)
        return frames


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="nightcastle", description=TITLE)
    parser.add_argument("--base-dir", default=".", help="directory holding gamedata/")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    try:
        panel = GamePanel(args.base_dir)
    except (ResourceError, OSError) as exc:
        print(f"failed to initialize resources: {exc}", file=sys.stderr)
        return 1
    with panel:
        panel.run(args.frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())