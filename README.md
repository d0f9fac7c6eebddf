# skyracer

A small arcade game for the terminal. Your ship (`^`) sits at the bottom of
the screen, meteors (`*`) fall from the top, and you shoot them (`|`) to
score points. If a meteor hits your ship, the game ends and your score is
appended to the ranking file.

## Installing

```
pip install .
```

The game draws with the standard `curses` module, so it needs a terminal
that `curses` supports, such as a Linux or macOS terminal. On platforms
where Python ships without `curses`, the game screen cannot be opened.

## Playing

```
skyracer
```

This opens a text menu:

- `0`: enter your player name (names longer than 99 characters are cut)
- `1`: start a game (you must enter a name first)
- `2`: show the saved scores
- `3`: quit
- `4`: switch player (forget the current name)

Any other input reports an invalid option. The menu also ends when its
input ends.

During a game:

- Left and right arrow keys move the ship, which stays inside the side
  borders.
- Space fires. Shots have a cooldown of 250 ms between them.
- Enter ends the game early. A game that ends this way is not saved.

The screen advances one frame every 50 ms. When the ship is hit, the score
is saved and a "game over" message waits for a key press.

Scores are added as lines of the form `name - N pontos` to
`assets/ranking.txt`, relative to the directory you start the game from.
The `assets` directory must already exist. If the file cannot be written,
the score is not saved. The score list shows the lines in the order they
were saved; it does not sort them.

## Using it as a library

The game logic is in plain functions, so you can drive it yourself:

```python
import random
from skyracer.entities import create_ship, update_meteors, add_shot, update_shots, resolve_hits

ship = create_ship(80, 24)
meteors = update_meteors([], 80, 24, random.Random(1))
shots = add_shot([], ship.x, ship.y - 1)
shots = update_shots(shots)
meteors, shots, hits = resolve_hits(meteors, shots)
```

- `skyracer.entities`: `Ship`, `Meteor`, `Shot`, `create_ship`,
  `Ship.move`, `update_meteors`, `ship_collides`, `add_shot`,
  `update_shots`, `resolve_hits` (at most one hit per call) and `draw`.
- `skyracer.ranking`: `save_score` appends a line and returns `False` if the
  file could not be opened; `read_scores` returns the saved lines and raises
  `OSError` if the file cannot be opened.
- `skyracer.timer`: `FrameTimer` for frame pacing with an injectable
  nanosecond clock, and `current_timestamp` in milliseconds.
- `skyracer.screen`: `Terminal`, a wrapper around a curses window;
  `open_terminal`, a context manager that sets curses up and restores the
  terminal; and `clear_console`.
- `skyracer.game`: `play` runs one game on a `Terminal` (or any object with
  the same methods) and returns a `GameResult` with `points`, `died` and
  `player_name`; `start_game` opens the terminal and calls `play`.
- `skyracer.menu`: `Menu`, with injectable input, output, ranking path and
  game runner, and `main`, the entry point of the `skyracer` command.

## Running the tests

```
pip install .[test]
pytest
```