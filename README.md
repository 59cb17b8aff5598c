# velha

Judges a 3×3 tic-tac-toe board (*jogo da velha*) and reports the state of the game.

A board is three rows of three cells. Each cell is `0` (empty), `1` (X) or `2` (O). Any sequence of three sequences of three integers is accepted. A board of another shape raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from velha.board import Outcome, check_game

board = [
    [1, 2, 0],
    [0, 1, 2],
    [0, 0, 1],
]
assert check_game(board) is Outcome.X_WINS
```

`check_game(board)` returns an `Outcome`, which is an `IntEnum`. The conditions are tested in the order listed here, and the first one that holds gives the result:

| Outcome      | Value | Meaning                                                             |
|--------------|-------|---------------------------------------------------------------------|
| `IMPOSSIBLE` | -2    | Both players have a line, or one player has made 2 or more extra moves |
| `X_WINS`     | 1     | X has three in a row, column or diagonal                            |
| `O_WINS`     | 2     | O has three in a row, column or diagonal                            |
| `OPEN`       | -1    | No winner and at least one empty cell                               |
| `DRAW`       | 0     | No winner and the board is full                                     |

The module `velha.board` also provides the individual checks. Each one returns a `bool`:

- `x_wins(board)`: X holds a full line.
- `o_wins(board)`: O holds a full line.
- `is_open(board)`: at least one cell is empty.
- `is_impossible(board)`: both players hold a line, or the counts of X and O marks differ by more than one.

The board does not record which player moved first. For that reason a board on which O wins with fewer marks than X is reported as `O_WINS`, not as `IMPOSSIBLE`.

## Self-check

The package includes a set of example boards, each with its expected outcome. To run them:

```
velha-selfcheck
```

The command prints the boards in sections. Each board gets one line that ends in `Passou` (passed) or `Falhou` (failed). It exits with status 0.

From Python, `velha.selfcheck.run_checks()` returns a tuple of `Check` objects. Each object has the fields `section`, `label`, `board` and `expected`. Its `passed()` method classifies the board and compares the result with `expected`.

## Limitations

This package only classifies boards that you give it. It does not play a game, suggest moves or keep any game history.

## Tests

```
pip install .[test]
pytest
```