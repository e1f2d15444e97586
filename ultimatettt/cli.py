"""Start-up menus and the command-line entry point."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from pathlib import Path

from .board import Board
from .game import DEFAULT_SAVE_PATH, Game, GameMode, GamePaused, rules_text
from .savefile import load_game
from .utils import init_random

InputFn = Callable[[str], str]
OutputFn = Callable[[str], object]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MAIN_MENU = (
    " __________________________\n"
    "|    Choose one option:    |\n"
    "|__________________________|\n"
    "|1-Multiplayer             |\n"
    "|2-Singleplayer            |\n"
    "|3-Help                    |\n"
    "|4-Exit                    |\n"
    "|__________________________|\n"
    "\n"
)

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


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _choose(input_fn: InputFn, output_fn: OutputFn, valid: range) -> int:
    while True:
        option = _atoi(input_fn("Option: "))
        if option in valid:
            return option
        output_fn(f"Please enter a valid input [{valid.start}-{valid.stop - 1}]\n")


def _ask_yes_no(input_fn: InputFn, output_fn: OutputFn, prompt: str) -> bool:
    while True:
        answer = input_fn(prompt)[:1]
        if answer in ("Y", "N"):
            return answer == "Y"
        output_fn("Please enter a valid input: Y(Yes) or N(No)\n")


def menu(input_fn: InputFn = input, output_fn: OutputFn | None = None) -> int:
    """Show the start menu and return the chosen option (1-4)."""
    out = output_fn if output_fn is not None else sys.stdout.write
    out(_MAIN_MENU)
    return _choose(input_fn, out, range(1, 5))


def menu_game(input_fn: InputFn = input, output_fn: OutputFn | None = None) -> int:
    """Show the in-game menu and return the chosen option (1-3)."""
    out = output_fn if output_fn is not None else sys.stdout.write
    out(_GAME_MENU)
    return _choose(input_fn, out, range(1, 4))


def _play(game: Game) -> None:
    try:
        game.run()
    except GamePaused:
        pass


def _resume(path: Path, input_fn: InputFn, output_fn: OutputFn) -> None:
    board = Board()
    saved = load_game(path, board)
    game = Game(GameMode(saved.game_mode), saved.names, input_fn, output_fn)
    game.board = board
    game.history = saved.history
    game.n_plays = saved.n_plays
    game.player = saved.player
    game.current_section = saved.board_before
    game.section_before = saved.board_before
    game.save_path = path
    _play(game)


def _new_game(mode: GameMode, input_fn: InputFn, output_fn: OutputFn) -> None:
    first = input_fn("First player name: ")
    second = ""
    if mode is GameMode.TWO_PLAYERS:
        second = input_fn("Second player name: ")
    _play(Game(mode, (first, second), input_fn, output_fn))


def initializer(input_fn: InputFn = input, output_fn: OutputFn | None = None) -> None:
    """Offer to resume a saved game, otherwise run the start menu."""
    out = output_fn if output_fn is not None else sys.stdout.write
    save_path = Path(DEFAULT_SAVE_PATH)

    if save_path.is_file():
        out(
            "A jogo.bin file with valid data has bin found, "
            "do you wish to load the previous game?(Y/N)\n"
        )
        if _ask_yes_no(input_fn, out, "Option: "):
            _resume(save_path, input_fn, out)
            return
        save_path.unlink()

    option = menu(input_fn, out)
    if option == 1:
        _new_game(GameMode.TWO_PLAYERS, input_fn, out)
    elif option == 2:
        _new_game(GameMode.BOT_GAME, input_fn, out)
    elif option == 3:
        out(rules_text())
        if _ask_yes_no(input_fn, out, "Do you want to start playing? (Y/N)\n"):
            initializer(input_fn, out)


def main(argv: list[str] | None = None) -> int:
    """Run the game from the terminal."""
    init_random()
    try:
        initializer(input, sys.stdout.write)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0