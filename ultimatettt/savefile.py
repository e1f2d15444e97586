"""Binary save files for paused games and text exports of the moves made."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from itertools import islice
from os import PathLike
from typing import Union

from .board import PLAYER_MARKS, Board, Outcome
from .plays import PlayHistory, format_play

StrPath = Union[str, "PathLike[str]"]

NAME_SIZE = 255
_HEADER = struct.Struct(f"<ii{NAME_SIZE}s{NAME_SIZE}sii")
_RECORD = struct.Struct("<5i")


@dataclass
class SavedGame:
    """Everything read back from a save file."""

    game_mode: int
    n_plays: int
    names: tuple[str, str]
    player: int
    board_before: int
    history: PlayHistory
    last_board: int | None = None


def _encode_name(name: str) -> bytes:
    return name.encode("utf-8")[:NAME_SIZE]


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def save_game(
    path: StrPath,
    history: PlayHistory,
    n_plays: int,
    game_mode: int,
    names: tuple[str, str],
    player: int,
    board_before: int,
) -> None:
    """Write the game state: header, then one record per move.

    The first record carries the total number of moves in place of its own count.
    """
    first, second = names
    with open(path, "wb") as fh:
        fh.write(
            _HEADER.pack(
                int(game_mode),
                n_plays,
                _encode_name(first),
                _encode_name(second),
                player,
                board_before,
            )
        )
        for index, play in enumerate(history):
            count = n_plays if index == 0 else play.n_plays
            fh.write(_RECORD.pack(play.x, play.y, play.board, count, play.player))


def load_game(path: StrPath, board: Board) -> SavedGame:
    """Read a save file and replay its moves onto ``board``.

    Moves alternate X and O in file order; won sections are claimed and full
    sections recorded as drawn on the global grid.
    """
    with open(path, "rb") as fh:
        data = fh.read()
    if len(data) < _HEADER.size:
        raise ValueError(f"{path}: save file is truncated")
    game_mode, total, first, second, player, board_before = _HEADER.unpack_from(data)
    body = data[_HEADER.size:]
    body = body[: len(body) - len(body) % _RECORD.size]

    history = PlayHistory()
    last_board: int | None = None
    for count, (x, y, section, n_plays, mover_id) in enumerate(_RECORD.iter_unpack(body)):
        if not (0 <= x < 3 and 0 <= y < 3):
            raise ValueError(f"{path}: cell ({x},{y}) is off the board")
        history.add(section, x, y, n_plays, mover_id)
        mover = 1 if count % 2 == 0 else 2
        board.place(section, x, y, PLAYER_MARKS[mover])
        outcome = board.section_outcome(section)
        if outcome is Outcome.WIN:
            board.claim_section(section, mover)
        elif outcome is Outcome.DRAW:
            board.mark_draw(section)
        last_board = section

    return SavedGame(
        game_mode=game_mode,
        n_plays=total,
        names=(_decode_name(first), _decode_name(second)),
        player=player,
        board_before=board_before,
        history=history,
        last_board=last_board,
    )


def export_plays(path: StrPath, history: PlayHistory, n_plays: int) -> None:
    """Write a readable list of the first ``n_plays`` moves."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(f"Número de jogadas: {n_plays}\n")
        for play in islice(history, n_plays):
            fh.write(format_play(play) + "\n")