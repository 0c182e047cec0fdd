# sudokugame

A simple sudoku game that you play in a pygame window.

When the game starts, it makes a new puzzle. It places twenty-one fixed digits
at random, and no two of them conflict. You fill in the other cells.

## Installing

```
pip install .
```

## Playing

```
sudokugame
```

The command accepts only `--help`. The window is 900×900 pixels and runs at
60 frames per second.

If the working directory contains `res/JetBrainsMonoNerdFont-Bold.ttf`, the
game draws the digits in that font. If the file is missing, it uses pygame's
default font.

### Controls

- **Select a cell**: click it with the left mouse button, or drag over the
  board while you hold the button down.
- **Move the selection**: use the arrow keys, `W` `A` `S` `D`, or the Vim keys
  `H` `J` `K` `L`. A key held down repeats, and the selection stops at the
  edge of the board.
- **Enter a digit**: type `1` to `9`.
- **Clear a cell**: press `Backspace` or `Delete`.
- **Quit**: press `Escape` or close the window.

Fixed cells are shaded grey, and you cannot change them. A digit you enter that
already appears in its row, column or 3×3 box is shaded red.

## What the game does not do

- It does not solve puzzles. `GameState.SOLVER_BOARD` only gives an empty
  board.
- It does not check whether a puzzle can be solved. The fixed digits do not
  conflict, but that does not mean a solution exists.
- It does not detect a finished board or announce a win.
- `GameState.START_OPTIONS` shows a blank screen. There is no start menu.

## Using the board in code

The game logic is in `sudokugame.board` and does not need a display:

```python
import random
from sudokugame.board import Board, Direction

board = Board()
board.create_puzzle(random.Random(42))   # any object with randint(a, b)
board.select(4, 4)
board.move_selection(Direction.RIGHT)
board.enter_digit(5)
cell = board[4, 5]                       # Cell(value, fixed, invalid)
```

`Board` has these methods:

- `clear()` empties the board and selects the top-left cell.
- `create_puzzle(rng=None)` clears the board and places 21 fixed clues.
- `is_safe_to_insert(value, row, col)` reports whether a value is absent from
  the cell's row, column and box.
- `select(row, col)` and `move_selection(direction)` change the selected cell.
- `enter_digit(digit)` writes a digit into the selected cell and flags it if it
  conflicts. `erase_selected()` empties the selected cell. Neither method
  changes a fixed cell.
- `highlight_invalid()` recomputes the conflict flags for the whole board.
  `clear_invalid()` drops all of them.

Positions outside the board raise `IndexError`. A digit outside 0–9 raises
`ValueError`.

`sudokugame.render.BoardView(rect, font=None)` maps a board onto a screen
rectangle. `cell_at(x, y)` returns the `(row, col)` under a point, or `None`
when the point is outside the board. `draw(surface, board)` draws the board
onto a pygame surface.

`sudokugame.game.Game(width=900, height=900, fps=60, state=GameState.PUZZLE_BOARD)`
holds a board and its view. `handle_event(event)` applies one pygame event, and
`run()` opens the window and runs until the window is closed.

## Running the tests

```
pip install ".[test]"
pytest
```