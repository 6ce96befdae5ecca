"""A grid-based snake game: pure game state plus a pygame front end."""

from __future__ import annotations

import argparse
import enum
import random
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence

START = (10, 10)
INITIAL_DELAY = 0.2
SPEED_UP = 0.95
FRAME_RATE = 60
EAT_SOUND = "eat.wav"
GAME_OVER_SOUND = "gameover.wav"

_DIRECTIONS = {(0, -1), (0, 1), (-1, 0), (1, 0)}


@dataclass(frozen=True)
class Segment:
    """One cell of the grid, in cell coordinates."""

    x: int
    y: int


class Outcome(enum.Enum):
    """What a single step of the game did."""

    MOVED = "moved"
    ATE = "ate"
    CRASHED = "crashed"


class SnakeGame:
    """State and rules of the snake game, independent of any display."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: int = 800,
        height: int = 600,
        size: int = 20,
    ) -> None:
        if size < 1 or width < size or height < size:
            raise ValueError("the board must hold at least one cell")
        self.width = width
        self.height = height
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.snake: List[Segment] = []
        self.direction = (1, 0)
        self.food = Segment(0, 0)
        self.delay = INITIAL_DELAY
        self.game_over = False
        self.reset()

    @property
    def columns(self) -> int:
        return self.width // self.size

    @property
    def rows(self) -> int:
        return self.height // self.size

    @property
    def head(self) -> Segment:
        return self.snake[0]

    def _place_food(self) -> Segment:
        return Segment(self.rng.randrange(self.columns), self.rng.randrange(self.rows))

    def reset(self) -> None:
        """Start a new game: one segment heading right, fresh food, base speed."""
        self.snake = [Segment(*START)]
        self.direction = (1, 0)
        self.food = self._place_food()
        self.delay = INITIAL_DELAY
        self.game_over = False

    def turn(self, dx: int, dy: int) -> bool:
        """Steer the snake; reversing or turning after the game ended is ignored.

        Returns whether the direction changed.
        """
        if (dx, dy) not in _DIRECTIONS:
            raise ValueError(f"not a direction: {(dx, dy)!r}")
        if self.game_over:
            return False
        cur_dx, cur_dy = self.direction
        if dy != 0 and cur_dy != 0:
            return False
        if dx != 0 and cur_dx != 0:
            return False
        self.direction = (dx, dy)
        return True

    def update(self) -> Outcome:
        """Advance the snake one cell and report what happened."""
        dx, dy = self.direction
        head = Segment(self.head.x + dx, self.head.y + dy)
        off_board = not (0 <= head.x < self.columns and 0 <= head.y < self.rows)
        if off_board or head in self.snake:
            self.game_over = True
            return Outcome.CRASHED

        self.snake.insert(0, head)
        if head == self.food:
            self.food = self._place_food()
            self.delay *= SPEED_UP
            return Outcome.ATE
        self.snake.pop()
        return Outcome.MOVED


def _load_sound(pygame, path: str):
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError) as exc:
        print(f"Failed to load sound {path}: {exc}", file=sys.stderr)
        return None


def run(game: SnakeGame) -> None:
    """Open a window and play *game* until the window is closed."""
    import pygame

    pygame.init()
    try:
        try:
            pygame.mixer.init()
            sounds = {
                Outcome.ATE: _load_sound(pygame, EAT_SOUND),
                Outcome.CRASHED: _load_sound(pygame, GAME_OVER_SOUND),
            }
        except pygame.error as exc:
            print(f"Sound unavailable: {exc}", file=sys.stderr)
            sounds = {}

        window = pygame.display.set_mode((game.width, game.height))
        pygame.display.set_caption("Snake Game")
        frame_clock = pygame.time.Clock()
        steering = (
            (pygame.K_UP, (0, -1)),
            (pygame.K_DOWN, (0, 1)),
            (pygame.K_LEFT, (-1, 0)),
            (pygame.K_RIGHT, (1, 0)),
        )
        cell = game.size - 2
        last_step = time.monotonic()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break

            if not game.game_over:
                pressed = pygame.key.get_pressed()
                for key, (dx, dy) in steering:
                    if pressed[key]:
                        game.turn(dx, dy)

            now = time.monotonic()
            if now - last_step > game.delay:
                last_step = now
                sound = sounds.get(game.update())
                if sound is not None:
                    sound.play()

            window.fill((0, 0, 0))
            for segment in game.snake:
                rect = (segment.x * game.size, segment.y * game.size, cell, cell)
                pygame.draw.rect(window, (0, 255, 0), rect)
            food_rect = (game.food.x * game.size, game.food.y * game.size, cell, cell)
            pygame.draw.rect(window, (255, 0, 0), food_rect)
            pygame.display.flip()
            frame_clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in a window."""
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    run(SnakeGame(rng=random.Random(args.seed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())