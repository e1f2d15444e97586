"""The game loop: human and computer turns, pausing and the end-of-game export."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Callable
from enum import IntEnum
from pathlib import Path

from .board import PLAYER_MARKS, Board, Outcome, convert_position
from .plays import PlayHistory, format_play
from .savefile import export_plays, save_game

MAX_PLAYS = 9 * 9
COMPUTER_NAME = "Computer"
DEFAULT_SAVE_PATH = "fich.bin"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_GAME_MENU = (
    " ___________________________________\n"
    "|        Choose one option:         |\n"
    "|___________________________________|\n"
    "|1-Previous plays                   |\n"
    "|2-Play                             |\n"
    "|3-Pause                            |\n"
    "|___________________________________|\n"
    "\n"
)

_RULES = (
    "\n\n"
    "----------- Regras Ultimate Tic-Tac-Toe  -----------\n\n"
    "Cada número corresponde a uma posição\n"
    "\n\n    C0       C1        C2"
    "\n  +----------+---------+---------+\n"
    "  | 0  1  2  | _  _  _ | _  _  _ |\n"
    "L0| 3  4  5  | _  _  _ | _  _  _ |\n"
    "  | 6  7  8  | _  _  _ | _  _  _ |\n"
    "  |----------+---------+---------|\n"
    "  | _  _  _  | _  _  _ | _  _  _ |\n"
    "L1| _  _  _  | _  _  _ | _  _  _ |\n"
    "  | _  _  _  | _  _  _ | _  _  _ |\n"
    "  |----------+---------+---------|\n"
    "  | _  _  _  | _  _  _ | _  _  _ |\n"
    "L2| _  _  _  | _  _  _ | _  _  _ |\n"
    "  | _  _  _  | _  _  _ | _  _  _ |\n"
    "  +----------+---------+---------+\n"
    "\n\nObjetivo:\n"
    "\t- Ser o primeiro a construir linha/coluna/diagonal com 3 peças iguais\n\n"
    "Regras:\n"
    "\t- Os dois jogadores colocam, alternadamente, as suas peças de forma a "
    "construirem uma linha/coluna/diagonal\n"
    "\t  com 3 peças iguais em 9 tabuleiros de 3 x 3\n\n"
    "\t- O jogador deve jogar tendo em conta as seguintes propriedades:\n"
    "\t\t- Ganhar completando a linha/coluna/diagonal;\n"
    "\t\t- Bloquer para impedir que o adeversáro complete a sua linha/coluna/diagonal;\n"
    "\t\t- Fazer jogadas tendo em consideração que o tabuleiro seguinte a jogar "
    "será decidido pela jogada atual.\n\n\n"
)


class GameMode(IntEnum):
    TWO_PLAYERS = 0
    BOT_GAME = 1


class GamePaused(Exception):
    """Raised when a player pauses; the state has been written to ``path``."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"game saved to {path}")
        self.path = path


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_position(text: str) -> int:
    """Read the leading integer of ``text``; a zero not spelled as a leading '0' is an error."""
    value = _atoi(text)
    if value == 0 and not text.startswith("0"):
        raise ValueError(f"not a number: {text!r}")
    return value


def rules_text() -> str:
    return _RULES


class Game:
    """One game of ultimate tic-tac-toe between two people or a person and the computer."""

    def __init__(
        self,
        mode: GameMode | int,
        names: tuple[str, str],
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.mode = GameMode(mode)
        first, second = names
        if self.mode is GameMode.BOT_GAME:
            second = COMPUTER_NAME
        self.names = (first, second)
        self.input_fn = input_fn
        self.output_fn = output_fn if output_fn is not None else sys.stdout.write
        self.rng = rng if rng is not None else random.Random()
        self.board = Board()
        self.history = PlayHistory()
        self.n_plays = 0
        self.player = 1
        self.current_section = self.rng.randint(0, 8)
        self.section_before = self.current_section
        self.save_path = Path(DEFAULT_SAVE_PATH)
        self.finished = False
        self.winner: int | None = None

    def _name(self, player: int) -> str:
        return self.names[0] if player == 1 else self.names[1]

    def apply_move(self, player: int, section: int, position: int) -> Outcome:
        """Play ``position`` in ``section`` for ``player`` and settle the section."""
        row, col = convert_position(position)
        self.board.place(section, row, col, PLAYER_MARKS[1 if player == 1 else 2])
        self.history.add(section, row, col, self.n_plays, player)
        self.n_plays += 1
        self.section_before = section

        outcome = self.board.section_outcome(section)
        if outcome is Outcome.WIN:
            game_over = self.board.claim_section(section, player)
            self.output_fn(f"\n{self._name(player)} won board [{section}] !\n")
            if game_over:
                self.finished = True
                if self.board.global_outcome() is Outcome.WIN:
                    self.winner = player
        elif outcome is Outcome.DRAW:
            self.output_fn(f"\nDraw on the board [{section}] !\n")
            self.board.mark_draw(section)
            if self.board.global_outcome() is Outcome.DRAW:
                self.finished = True
        return outcome

    def _menu(self) -> int:
        self.output_fn(_GAME_MENU)
        while True:
            option = _atoi(self.input_fn("Option: "))
            if option in (1, 2, 3):
                return option
            self.output_fn("Please enter a valid input [1-3]\n")

    def _show_previous(self) -> None:
        if self.n_plays <= 0:
            self.output_fn("Sorry, haven't reached the minimum of moves yet\n")
            return
        self.output_fn(f"Total plays: {self.n_plays}\n")
        k = _atoi(self.input_fn("Plays to see [1-10]: "))
        for play in self.history.last(k):
            self.output_fn(format_play(play) + "\n")

    def _pause(self, player: int) -> None:
        if self.n_plays == 0:
            self.output_fn("There are no plays to save, please make a play\n")
            return
        self.output_fn(f"writing game state to {self.save_path}...\n")
        save_game(
            self.save_path,
            self.history,
            self.n_plays,
            int(self.mode),
            self.names,
            player,
            self.current_section,
        )
        raise GamePaused(self.save_path)

    def _ask_position(self, section: int) -> int:
        while True:
            try:
                position = parse_position(self.input_fn("\nPosition: "))
            except ValueError:
                self.output_fn("Please enter a number!\n")
                continue
            if 0 <= position <= 8 and self.board.is_free(section, *convert_position(position)):
                return position
            self.output_fn("Please enter a valid input\n")

    def human_move(self, player: int) -> int:
        """Run one human turn in the current section and return the chosen position."""
        section = self.current_section
        self.section_before = section
        self.output_fn(f"\nCurrent board: [{section}]")
        self.output_fn(f"\n{self._name(player)} plays:\n")
        choice = self._menu()
        if choice == 1:
            self._show_previous()
        elif choice == 3:
            self._pause(player)
        position = self._ask_position(section)
        self.apply_move(player, section, position)
        return position

    def bot_move(self) -> int:
        """Let the computer pick a random free cell of the current section."""
        section = self.current_section
        self.section_before = section
        self.output_fn(f"\nCurrent board: [{section}]")
        self.output_fn("\nComputer plays:\n")
        while True:
            position = self.rng.randint(0, 8)
            self.output_fn(f"Position: {position}\n")
            if self.board.is_free(section, *convert_position(position)):
                break
        self.apply_move(2, section, position)
        return position

    def _next_section(self, position: int) -> bool:
        if not any(self.board.is_section_open(s) for s in range(9)):
            return False
        section = position
        while not self.board.is_section_open(section):
            section = self.rng.randrange(9)
        self.current_section = section
        return True

    def _export(self) -> None:
        name = self.input_fn("Choose file name to save the succession of all plays: ")
        try:
            export_plays(name, self.history, self.n_plays)
        except OSError:
            self.output_fn("Failed to save plays to file\n")

    def run(self) -> int | None:
        """Play until the game ends; return the winning player, or None on a draw."""
        while not self.finished and self.n_plays < MAX_PLAYS:
            player = self.player
            if self.mode is GameMode.BOT_GAME and player == 2:
                position = self.bot_move()
            else:
                self.output_fn(self.board.render())
                position = self.human_move(player)
                if self.mode is GameMode.BOT_GAME:
                    self.output_fn(self.board.render())
            if self.finished:
                break
            self.player = 2 if player == 1 else 1
            if not self._next_section(position):
                break

        self.output_fn(self.board.render())
        if self.winner is None:
            self.output_fn("Draw in the game!\n")
        else:
            self.output_fn(f"{self._name(self.winner)} won!\n")
        self._export()
        return self.winner