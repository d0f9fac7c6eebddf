"""Ship, meteors and shots, and the rules that move them."""

from __future__ import annotations

import curses
import random
from dataclasses import dataclass

SPAWN_CHANCE_OUT_OF_TEN = 3


@dataclass
class Ship:
    x: int
    y: int

    def move(self, key: int, width: int) -> None:
        """Move one column for an arrow key, staying inside the borders."""
        if key == curses.KEY_LEFT and self.x > 1:
            self.x -= 1
        if key == curses.KEY_RIGHT and self.x < width - 2:
            self.x += 1


@dataclass
class Meteor:
    x: int
    y: int


@dataclass
class Shot:
    x: int
    y: int


def create_ship(width: int, height: int) -> Ship:
    """Place a ship centred near the bottom of the screen."""
    return Ship(width // 2, height - 2)


def update_meteors(
    meteors: list[Meteor], width: int, height: int, rng: random.Random | None = None
) -> list[Meteor]:
    """Maybe spawn a meteor at the top, fall one row, drop those off screen.

    Newly spawned meteors come first in the returned list.
    """
    rng = rng if rng is not None else random.Random()
    current = list(meteors)
    if rng.randrange(10) < SPAWN_CHANCE_OUT_OF_TEN:
        current.insert(0, Meteor(rng.randrange(width - 2) + 1, 1))
    for meteor in current:
        meteor.y += 1
    return [meteor for meteor in current if meteor.y <= height]


def ship_collides(ship: Ship, meteors: list[Meteor]) -> bool:
    return any(m.x == ship.x and m.y == ship.y for m in meteors)


def add_shot(shots: list[Shot], x: int, y: int) -> list[Shot]:
    """Return the shots with a new one placed first."""
    return [Shot(x, y), *shots]


def update_shots(shots: list[Shot]) -> list[Shot]:
    """Move every shot up a row and drop those that leave the screen."""
    for shot in shots:
        shot.y -= 1
    return [shot for shot in shots if shot.y >= 1]


def resolve_hits(
    meteors: list[Meteor], shots: list[Shot]
) -> tuple[list[Meteor], list[Shot], int]:
    """Remove the first shot/meteor pair sharing a cell.

    At most one hit is resolved per call; returns the remaining meteors,
    the remaining shots and the number of hits (0 or 1).
    """
    for shot_index, shot in enumerate(shots):
        for meteor_index, meteor in enumerate(meteors):
            if shot.x == meteor.x and shot.y == meteor.y:
                remaining_meteors = meteors[:meteor_index] + meteors[meteor_index + 1:]
                remaining_shots = shots[:shot_index] + shots[shot_index + 1:]
                return remaining_meteors, remaining_shots, 1
    return list(meteors), list(shots), 0


def draw(terminal, ship: Ship, meteors: list[Meteor], shots: list[Shot], points: int) -> None:
    """Draw the ship, meteors, shots and score on the terminal."""
    terminal.put_char(ship.x, ship.y, "^")
    for meteor in meteors:
        terminal.put_char(meteor.x, meteor.y, "*")
    for shot in shots:
        terminal.put_char(shot.x, shot.y, "|")
    terminal.put_string(2, 1, f"Pontos: {points}")