"""The nine 3x3 sections of an ultimate tic-tac-toe board and the global grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum

EMPTY = "_"
CLAIMED = " "
DRAWN = "."
PLAYER_MARKS = {1: "X", 2: "O"}


class Outcome(Enum):
    """State of a 3x3 grid."""

    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


def _lines(grid: Sequence[Sequence[str]]) -> Iterator[tuple[str, ...]]:
    yield from (tuple(row) for row in grid)
    yield from zip(*grid)
    yield tuple(grid[i][i] for i in range(3))
    yield tuple(grid[i][2 - i] for i in range(3))


def evaluate_grid(grid: Sequence[Sequence[str]]) -> Outcome:
    """Report a win (three equal non-empty cells in a line), a draw (full) or neither."""
    for line in _lines(grid):
        first = line[0]
        if first != EMPTY and all(cell == first for cell in line):
            return Outcome.WIN
    if any(EMPTY in row for row in grid):
        return Outcome.ONGOING
    return Outcome.DRAW


def convert_position(position: int) -> tuple[int, int]:
    """Turn a position 0-8 into (row, column)."""
    if not 0 <= position <= 8:
        raise ValueError(f"position must be between 0 and 8, got {position}")
    return divmod(position, 3)


def _mark_for(player: int) -> str:
    return PLAYER_MARKS[1] if player == 1 else PLAYER_MARKS[2]


def _check_section(section: int) -> None:
    if not 0 <= section <= 8:
        raise ValueError(f"section must be between 0 and 8, got {section}")


class Board:
    """Nine small boards plus the global board that records who took each one."""

    def __init__(self) -> None:
        self.sections: list[list[list[str]]] = [
            [[EMPTY] * 3 for _ in range(3)] for _ in range(9)
        ]
        self.global_grid: list[list[str]] = [[EMPTY] * 3 for _ in range(3)]

    def get(self, section: int, row: int, col: int) -> str:
        _check_section(section)
        return self.sections[section][row][col]

    def place(self, section: int, row: int, col: int, mark: str) -> None:
        """Put ``mark`` on a free cell of a section."""
        if not self.is_free(section, row, col):
            raise ValueError(f"cell ({row},{col}) of section {section} is taken")
        self.sections[section][row][col] = mark

    def is_free(self, section: int, row: int, col: int) -> bool:
        return self.get(section, row, col) == EMPTY

    def is_section_open(self, section: int) -> bool:
        """True while the section is neither won nor drawn on the global board."""
        row, col = convert_position(section)
        return self.global_grid[row][col] == EMPTY

    def section_outcome(self, section: int) -> Outcome:
        _check_section(section)
        return evaluate_grid(self.sections[section])

    def global_outcome(self) -> Outcome:
        return evaluate_grid(self.global_grid)

    def claim_section(self, section: int, player: int) -> bool:
        """Give a section to ``player``; return True if the whole game is now over."""
        _check_section(section)
        mark = _mark_for(player)
        self.sections[section] = [[CLAIMED] * 3 for _ in range(3)]
        self.sections[section][1][1] = mark
        row, col = convert_position(section)
        self.global_grid[row][col] = mark
        return self.global_outcome() is not Outcome.ONGOING

    def mark_draw(self, section: int) -> None:
        """Record a drawn section on the global board."""
        row, col = convert_position(section)
        self.global_grid[row][col] = DRAWN

    def render(self) -> str:
        parts = ["\n\n      C0       C1     C2", "\n  +------------------------+\n"]
        bands = (self.sections[0:3], self.sections[3:6], self.sections[6:9])
        for band_no, band in enumerate(bands):
            if band_no:
                parts.append("  |--------+-------+-------|\n")
            for row in range(3):
                label = f"L{band_no}" if row == 1 else "  "
                left, middle, right = (" ".join(section[row]) for section in band)
                parts.append(f"{label}| {left}  | {middle} | {right} |\n")
        parts.append("  +------------------------+\n")
        return "".join(parts)

    def render_global(self) -> str:
        return "".join(
            "".join(f" {cell} " for cell in row) + "\n" for row in self.global_grid
        )