"""Grid snake rules: movement with wrap-around, eating, growth and game over."""

from __future__ import annotations

import enum
import random
from collections.abc import Collection, Hashable
from dataclasses import dataclass, field

ARENA_SIZE = 10

SNAKE_HEAD_SIZE = 0.8
SNAKE_SEGMENT_SIZE = 0.64
FOOD_SIZE = 0.8

ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"

START_POSITION_X = 3
START_POSITION_Y = 3


class Direction(enum.Enum):
    """Heading of the snake; up increases y."""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


def warp_position(pos: int) -> int:
    """Wrap a coordinate that stepped one tile off the arena."""
    if pos < 0:
        return pos + ARENA_SIZE
    if pos >= ARENA_SIZE:
        return pos - ARENA_SIZE
    return pos


@dataclass(frozen=True)
class Position:
    """A tile on the arena grid."""

    x: int
    y: int

    def left(self) -> Position:
        return Position(warp_position(self.x - 1), self.y)

    def right(self) -> Position:
        return Position(warp_position(self.x + 1), self.y)

    def up(self) -> Position:
        return Position(self.x, warp_position(self.y + 1))

    def down(self) -> Position:
        return Position(self.x, warp_position(self.y - 1))

    def moved(self, direction: Direction) -> Position:
        """The neighbouring tile in ``direction``."""
        return {
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
            Direction.UP: self.up,
            Direction.DOWN: self.down,
        }[direction]()


def random_position(rng: random.Random) -> Position:
    """A uniformly chosen tile, drawn from ``rng.random()``."""
    return Position(int(rng.random() * ARENA_SIZE), int(rng.random() * ARENA_SIZE))


_KEY_PRIORITY = (
    (ARROW_LEFT, Direction.LEFT),
    (ARROW_DOWN, Direction.DOWN),
    (ARROW_UP, Direction.UP),
    (ARROW_RIGHT, Direction.RIGHT),
)


def direction_from_keys(
    pressed: Collection[Hashable], current: Direction
) -> Direction:
    """The direction asked for by held arrow keys, or ``current`` if none."""
    return next(
        (direction for key, direction in _KEY_PRIORITY if key in pressed), current
    )


class StepOutcome(enum.Enum):
    """What happened during one movement step."""

    MOVED = "moved"
    ATE = "ate"
    GAME_OVER = "game_over"


def _starting_segments() -> list[Position]:
    head = Position(START_POSITION_X, START_POSITION_Y)
    return [head, head.left()]


@dataclass
class SnakeGame:
    """State of one snake game; the head is ``segments[0]``."""

    segments: list[Position] = field(default_factory=_starting_segments)
    direction: Direction = Direction.RIGHT
    food: list[Position] = field(default_factory=list)
    last_tail_position: Position | None = None

    @property
    def head(self) -> Position:
        return self.segments[0]

    def reset(self) -> None:
        """Remove all food and place a fresh two-segment snake."""
        self.food.clear()
        self.segments = _starting_segments()
        self.direction = Direction.RIGHT

    def steer(self, direction: Direction) -> None:
        """Turn the snake unless that would reverse it onto itself."""
        if direction != self.direction.opposite():
            self.direction = direction

    def spawn_food(self, position: Position) -> None:
        """Drop a piece of food on ``position``."""
        self.food.append(position)

    def step(self) -> StepOutcome:
        """Advance the snake one tile, then resolve collisions and eating."""
        previous = list(self.segments)
        self.last_tail_position = previous[-1]
        new_head = previous[0].moved(self.direction)
        if new_head in previous:
            self.reset()
            return StepOutcome.GAME_OVER
        self.segments = [new_head, *previous[:-1]]

        remaining = [pos for pos in self.food if pos != new_head]
        eaten = len(remaining) != len(self.food)
        self.food = remaining
        if eaten:
            self.segments.append(self.last_tail_position)
            return StepOutcome.ATE
        return StepOutcome.MOVED