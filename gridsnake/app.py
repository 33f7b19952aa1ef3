"""Window, drawing and timing for the snake game."""

from __future__ import annotations

import argparse
import os
import random

from gridsnake.game import (
    ARENA_SIZE,
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    FOOD_SIZE,
    SNAKE_HEAD_SIZE,
    SNAKE_SEGMENT_SIZE,
    Position,
    SnakeGame,
    direction_from_keys,
    random_position,
)
from gridsnake.quit import CONTROL_LEFT, KEY_Q, default_quit_bindings

WINDOW_TITLE = "Snake!"
WINDOW_SIZE = (500, 500)
FOOD_SPAWN_PERIOD_MS = 1000
SNAKE_MOVEMENT_STEP_PERIOD_MS = 150


def _rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    return (round(r * 255), round(g * 255), round(b * 255))


BACKGROUND_COLOR = _rgb(0.04, 0.04, 0.04)
SNAKE_HEAD_COLOR = _rgb(0.7, 0.7, 0.7)
SNAKE_SEGMENT_COLOR = _rgb(0.3, 0.3, 0.3)
FOOD_COLOR = _rgb(1.0, 0.0, 1.0)


def _convert(pos: float, bound_window: float, bound_game: float) -> float:
    tile_size = bound_window / bound_game
    return pos / bound_game * bound_window - bound_window / 2 + tile_size / 2


def tile_center(
    position: Position, window_width: float, window_height: float
) -> tuple[float, float]:
    """Centre of a tile relative to the window centre, y pointing up."""
    return (
        _convert(position.x, window_width, ARENA_SIZE),
        _convert(position.y, window_height, ARENA_SIZE),
    )


def tile_extent(
    size: float, window_width: float, window_height: float
) -> tuple[float, float]:
    """Width and height of a sprite that covers ``size`` of a tile."""
    return (
        size / ARENA_SIZE * window_width,
        size / ARENA_SIZE * window_height,
    )


def tile_rect(
    position: Position, size: float, window_width: float, window_height: float
) -> tuple[float, float, float, float]:
    """Screen rectangle ``(left, top, width, height)`` for a sprite on a tile."""
    cx, cy = tile_center(position, window_width, window_height)
    width, height = tile_extent(size, window_width, window_height)
    screen_x = window_width / 2 + cx
    screen_y = window_height / 2 - cy
    return (screen_x - width / 2, screen_y - height / 2, width, height)


class _RepeatingTimer:
    def __init__(self, period_ms: int) -> None:
        self.period_ms = period_ms
        self.elapsed_ms = 0

    def tick(self, delta_ms: int) -> bool:
        self.elapsed_ms += delta_ms
        if self.elapsed_ms >= self.period_ms:
            self.elapsed_ms %= self.period_ms
            return True
        return False


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    args = parser.parse_args(argv)

    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    key_names = {
        pygame.K_LEFT: ARROW_LEFT,
        pygame.K_RIGHT: ARROW_RIGHT,
        pygame.K_UP: ARROW_UP,
        pygame.K_DOWN: ARROW_DOWN,
        pygame.K_LCTRL: CONTROL_LEFT,
        pygame.K_q: KEY_Q,
    }

    rng = random.Random(args.seed)
    game = SnakeGame()
    quit_bindings = default_quit_bindings().add_key_binding(KEY_Q)
    food_timer = _RepeatingTimer(FOOD_SPAWN_PERIOD_MS)
    step_timer = _RepeatingTimer(SNAKE_MOVEMENT_STEP_PERIOD_MS)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            delta_ms = clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            state = pygame.key.get_pressed()
            pressed = {name for key, name in key_names.items() if state[key]}
            if quit_bindings.should_quit(pressed):
                break

            if food_timer.tick(delta_ms):
                game.spawn_food(random_position(rng))
            game.steer(direction_from_keys(pressed, game.direction))
            if step_timer.tick(delta_ms):
                game.step()

            width, height = screen.get_size()
            screen.fill(BACKGROUND_COLOR)
            sprites = [(pos, FOOD_SIZE, FOOD_COLOR) for pos in game.food]
            sprites += [
                (pos, SNAKE_SEGMENT_SIZE, SNAKE_SEGMENT_COLOR) for pos in game.segments[1:]
            ]
            sprites.append((game.head, SNAKE_HEAD_SIZE, SNAKE_HEAD_COLOR))
            for pos, size, color in sprites:
                left, top, w, h = tile_rect(pos, size, width, height)
                pygame.draw.rect(
                    screen, color, pygame.Rect(round(left), round(top), round(w), round(h))
                )
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0