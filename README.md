# gridsnake

A small snake game played on a 10×10 grid whose edges wrap around. If you
leave the board on one side, you come back on the other.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window and reads the keyboard.

## Playing

```
gridsnake
```

A resizable 500×500 window titled "Snake!" opens. It shows a two-tile snake heading right.

- **Arrow keys** steer the snake. You cannot turn straight back on yourself.
  If several arrows are held, left wins over down, down over up, and up over right.
- The snake moves one tile every 150 ms.
- A piece of food (magenta) appears on a random tile once a second.
- If the head lands on food, the snake eats it and grows by one segment.
- If the head runs into the snake's own body, the round ends. The board is
  cleared and a fresh snake starts again at the same spot.
- **Q** quits, and so does **Left Ctrl + Q**. Closing the window also quits.

Pass `--seed N` to make food placement repeatable:

```
gridsnake --seed 42
```

## Using the pieces

The rules in `gridsnake.game` do not depend on pygame, so you can drive them directly:

```python
from gridsnake.game import SnakeGame, Direction, Position, StepOutcome

game = SnakeGame()              # head at (3, 3), one segment at (2, 3), heading right
game.spawn_food(Position(4, 3))
game.steer(Direction.RIGHT)
assert game.step() is StepOutcome.ATE
```

- `SnakeGame.step()` returns `StepOutcome.MOVED`, `StepOutcome.ATE` or
  `StepOutcome.GAME_OVER`. On game over the game has already been reset.
- `SnakeGame.steer()` ignores a turn straight back on the current direction.
- The module also provides:
  - `Position` with `left()`, `right()`, `up()`, `down()` and `moved(direction)`.
    All of them wrap at the arena edges, and up increases `y`.
  - `warp_position`
  - `random_position(rng)`
  - `direction_from_keys(pressed, current)`

`gridsnake.quit` holds the key bindings that end the game:

- `KeyBinding`
- `QuitBindings`, with a chainable `add_key_binding` and a `should_quit` method
- `default_quit_bindings()`, which returns bindings for Left Ctrl + Q

`gridsnake.app` holds the helpers that map grid tiles to the screen:

- `tile_center`
- `tile_extent`
- `tile_rect`
- `main`, the entry point for the window

## What it does not do

The game keeps no score and has no pause or menu. It does not save anything between runs.

## Running the tests

```
pip install .[test]
pytest
```