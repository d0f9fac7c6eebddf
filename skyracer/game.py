"""The game loop: a ship dodging and shooting falling meteors."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .entities import (
    add_shot,
    create_ship,
    draw,
    resolve_hits,
    ship_collides,
    update_meteors,
    update_shots,
)
from .ranking import DEFAULT_RANKING_PATH, save_score
from .screen import open_terminal
from .timer import FrameTimer

FRAME_MS = 50
SHOT_INTERVAL_MS = 250
ENTER_KEY = 10
FIRE_KEY = ord(" ")
MAX_NAME_LENGTH = 99
NAME_PROMPT = "Digite seu nome para salvar no ranking:"
GAME_OVER_MESSAGE = "Fim de jogo! Pressione uma tecla..."

_NS_PER_MS = 1_000_000
_IDLE_SECONDS = 0.001


@dataclass(frozen=True)
class GameResult:
    """Outcome of one game: the score, whether the ship was hit, and the name used."""

    points: int
    died: bool
    player_name: str


def play(
    terminal,
    player_name: str = "",
    ranking_path: str | Path = DEFAULT_RANKING_PATH,
    rng: random.Random | None = None,
    clock: Callable[[], int] = time.monotonic_ns,
) -> GameResult:
    """Run the game on a terminal until Enter is pressed or the ship is hit.

    ``clock`` returns a monotonic time in nanoseconds. When the ship is hit
    the score is saved, asking for a name first if none was given.
    """
    rng = rng if rng is not None else random.Random()
    timer = FrameTimer(FRAME_MS, clock)
    ship = create_ship(terminal.width(), terminal.height())
    meteors = []
    shots = []
    points = 0
    died = False
    last_shot_ms: int | None = None
    key = 0

    while key != ENTER_KEY:
        busy = False
        if terminal.key_hit():
            busy = True
            key = terminal.read_key()
            if key == FIRE_KEY:
                now_ms = clock() // _NS_PER_MS
                if last_shot_ms is None or now_ms - last_shot_ms >= SHOT_INTERVAL_MS:
                    shots = add_shot(shots, ship.x, ship.y - 1)
                    last_shot_ms = now_ms
            else:
                ship.move(key, terminal.width())

        if timer.time_over():
            busy = True
            meteors = update_meteors(meteors, terminal.width(), terminal.height(), rng)
            shots = update_shots(shots)
            meteors, shots, hits = resolve_hits(meteors, shots)
            points += hits

            if ship_collides(ship, meteors):
                died = True
                break

            terminal.clear()
            draw(terminal, ship, meteors, shots, points)
            terminal.update()

        if not busy:
            time.sleep(_IDLE_SECONDS)

    if died:
        if not player_name:
            terminal.clear()
            terminal.put_string(2, 2, NAME_PROMPT)
            terminal.update()
            player_name = terminal.read_line(2, 3, MAX_NAME_LENGTH)
        save_score(player_name, points, ranking_path)

    terminal.clear()
    terminal.put_string(2, 2, GAME_OVER_MESSAGE)
    terminal.update()
    terminal.read_key()

    return GameResult(points=points, died=died, player_name=player_name)


def start_game(
    player_name: str = "", ranking_path: str | Path = DEFAULT_RANKING_PATH
) -> GameResult:
    """Open the terminal, play one game and restore the terminal."""
    with open_terminal() as terminal:
        return play(terminal, player_name, ranking_path)