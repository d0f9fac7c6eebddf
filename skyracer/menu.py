"""The text menu that starts games and shows the ranking."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, TextIO

from .game import GameResult, start_game
from .ranking import DEFAULT_RANKING_PATH, read_scores
from .screen import clear_console

MAX_NAME_LENGTH = 99

MENU_TEXT = (
    "╔════════════════════════════════════════════════════════════════════════════════╗\n"
    "║                               SKY RACER                                      ║\n"
    "║──────────────────────────────────────────────────────────────────────────────║\n"
    "║                               [0] Inserir Nome                               ║\n"
    "║                               [1] Iniciar Jogo                               ║\n"
    "║                               [2] Ver Pontuações                             ║\n"
    "║                               [3] Sair                                       ║\n"
    "║                               [4] Trocar Jogador                             ║\n"
    "╚════════════════════════════════════════════════════════════════════════════════╝\n"
)

SCORES_HEADER = (
    "╔════════════════════════════════════════════════════════╗\n"
    "║                    PONTUAÇÕES SALVAS                 ║\n"
    "╠════════════════════════════════════════════════════════╣\n"
)
SCORES_FOOTER = "╚════════════════════════════════════════════════════════╝\n"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_choice(text: str) -> int:
    """Read a leading integer the way atoi does; anything else counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class Menu:
    """Main menu: player name, starting games and the score list."""

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output: TextIO | None = None,
        ranking_path: str | Path = DEFAULT_RANKING_PATH,
        game_runner: Callable[[str, str | Path], GameResult] = start_game,
    ) -> None:
        self._input = input_func
        self.output = sys.stdout if output is None else output
        self.ranking_path = ranking_path
        self.game_runner = game_runner
        self.player_name = ""

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _wait_for_enter(self) -> None:
        self._input()

    def render(self) -> None:
        """Write the menu, the current player and the prompt."""
        self._write(MENU_TEXT)
        if self.player_name:
            self._write(f"\nJogador atual: {self.player_name}\n")
        else:
            self._write("\nJogador atual: [NÃO REGISTRADO]\n")
        self._write("\nEscolha uma opção: ")

    def enter_name(self) -> None:
        """Ask for the player's name unless one is already registered."""
        if self.player_name:
            self._write(f"\nNome já registrado: {self.player_name}\n")
            self._write("Pressione ENTER para continuar...")
            self._wait_for_enter()
            return
        self._write("\nDigite seu nome: ")
        self.player_name = self._input().rstrip("\n")[:MAX_NAME_LENGTH]

    def show_scores(self) -> None:
        """Write the saved scores in a box, or an error if there are none."""
        clear_console(self.output)
        try:
            lines = read_scores(self.ranking_path)
        except OSError:
            self._write("Erro ao abrir ranking.txt\n")
        else:
            self._write(SCORES_HEADER)
            for line in lines:
                self._write(f"║ {line:<54} ║\n")
            self._write(SCORES_FOOTER)
        self._write("\nPressione ENTER para voltar ao menu...")
        self._wait_for_enter()

    def handle(self, choice: int) -> bool:
        """Carry out one menu option; return False when the user quits."""
        if choice == 0:
            self.enter_name()
        elif choice == 1:
            if not self.player_name:
                self._write(
                    "\nVocê precisa inserir o nome antes de jogar!\n"
                    "Pressione ENTER para continuar..."
                )
                self._wait_for_enter()
            else:
                result = self.game_runner(self.player_name, self.ranking_path)
                if result is not None and result.player_name:
                    self.player_name = result.player_name
        elif choice == 2:
            self.show_scores()
        elif choice == 3:
            clear_console(self.output)
            self._write("Obrigado por jogar Sky Racer!\n")
            return False
        elif choice == 4:
            self.player_name = ""
            self._write("\nJogador atual removido. Pressione ENTER...\n")
            self._wait_for_enter()
        else:
            self._write("Opção inválida! Pressione ENTER...\n")
            self._wait_for_enter()
        return True

    def run(self) -> None:
        """Show the menu repeatedly until the user quits or input ends."""
        try:
            while True:
                clear_console(self.output)
                self.render()
                if not self.handle(_parse_choice(self._input())):
                    return
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the menu."""
    parser = argparse.ArgumentParser(prog="skyracer", description="Sky Racer arcade game.")
    parser.parse_args(argv)
    Menu().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())