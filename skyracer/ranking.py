"""Persistence of player scores in a plain text ranking file."""

from __future__ import annotations

from pathlib import Path

DEFAULT_RANKING_PATH = Path("assets/ranking.txt")


def save_score(name: str, points: int, path: str | Path = DEFAULT_RANKING_PATH) -> bool:
    """Append a score line; return False if the file could not be opened."""
    try:
        with open(path, "a", encoding="utf-8") as handle:
            handle.write(f"{name} - {points} pontos\n")
    except OSError:
        return False
    return True


def read_scores(path: str | Path = DEFAULT_RANKING_PATH) -> list[str]:
    """Return the saved score lines, without line endings.

    Raises OSError if the ranking file cannot be opened.
    """
    with open(path, "r", encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]