"""The ordered history of moves made during a game."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_SHOWN = 10


@dataclass(frozen=True)
class Play:
    """One move: a cell (x, y) of a board section, by a player."""

    board: int
    x: int
    y: int
    n_plays: int
    player: int


def format_play(play: Play) -> str:
    return f"Player {play.player} made the move ({play.x},{play.y}) on Board [{play.board}]"


class PlayHistory:
    """Moves in the order they were made."""

    def __init__(self, plays: Iterable[Play] | None = None) -> None:
        self._plays: list[Play] = list(plays) if plays is not None else []

    def add(self, board: int, x: int, y: int, n_plays: int, player: int) -> Play:
        play = Play(board=board, x=x, y=y, n_plays=n_plays, player=player)
        self._plays.append(play)
        return play

    def __iter__(self) -> Iterator[Play]:
        return iter(self._plays)

    def __len__(self) -> int:
        return len(self._plays)

    def last(self, k: int) -> list[Play]:
        """The most recent ``k`` moves (at most ten), newest first."""
        count = min(k, MAX_SHOWN)
        if count <= 0:
            return []
        return list(reversed(self._plays[-count:]))

    def describe(self) -> str:
        if not self._plays:
            return "Empty list\n"
        return "".join(
            f"Node: {number} \nx={p.x}\ty={p.y}\tBoard: {p.board}\t"
            f"Plays: {p.n_plays}\tPlayer: {p.player}\n"
            for number, p in enumerate(self._plays, start=1)
        )