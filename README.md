# ultimatettt

Ultimate Tic-Tac-Toe played in the terminal.

The board is made of nine 3×3 sections arranged in a 3×3 grid. To claim a
section, you make a line, a column or a diagonal of three of your marks inside
it. To win the game, you claim three sections in a line, a column or a
diagonal of the big grid. A section that fills up with no winner is marked as
drawn on the big grid.

The first section is picked at random. After that, the cell you play decides
which section your opponent plays in next. If that section has already been
claimed or drawn, a random open section is chosen instead.

## Installing

```
pip install .
```

## Playing

```
ultimatettt
```

The main menu offers:

1. Multiplayer: two people take turns at the same terminal.
2. Singleplayer: you play against the computer.
3. Help: shows the rules and the cell numbering, then asks whether to start playing.
4. Exit.

Cells inside a section are numbered 0 to 8, left to right and top to bottom:

```
0 1 2
3 4 5
6 7 8
```

On each turn you can look at the most recent plays (up to ten, newest first),
make a play, or pause. When you pause, the game state is written to `fich.bin`
in the current directory and the program stops. The next time you start
`ultimatettt`, it offers to resume that game. If you decline, the file is
deleted.

When a game ends, you are asked for a file name, and the list of plays is
written to it as text.

## Using it as a library

The game logic lives in `ultimatettt.board`, `ultimatettt.plays`,
`ultimatettt.savefile` and `ultimatettt.game`:

```python
from ultimatettt.board import Board, Outcome

board = Board()
for col in range(3):
    board.place(0, 0, col, "X")
assert board.section_outcome(0) is Outcome.WIN
board.claim_section(0, 1)
print(board.render())
```

- `ultimatettt.board`: `Board` holds the nine sections and the global grid;
  `evaluate_grid` reports `Outcome.WIN`, `Outcome.DRAW` or `Outcome.ONGOING`
  for any 3×3 grid; `convert_position` turns 0–8 into `(row, column)`.
- `ultimatettt.plays`: `Play` records one move and `PlayHistory` keeps them in
  order, with `last(k)` for the most recent moves.
- `ultimatettt.savefile`: `save_game` and `load_game` write and read the binary
  save file (loading replays the moves onto a `Board`), and `export_plays`
  writes the text list of moves.
- `ultimatettt.game`: `Game(mode, names, input_fn, output_fn, rng)` runs a full
  match. It takes input and output callables, so it can be driven from tests
  or other front ends as well as from the terminal. `Game.run()` returns the
  winning player (1 or 2), or `None` on a draw, and raises `GamePaused` when a
  player pauses. `Game.apply_move(player, section, position)` plays a single
  move directly.

## What it does not do

The computer opponent picks a random free cell; it has no strategy. There is
no network play: both players share one terminal. Only one saved game is kept,
in `fich.bin` in the current directory.

## Running the tests

```
pip install .[test]
pytest
```