"""Built-in checks of the board classifier against known positions."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import groupby

from velha.board import Outcome, check_game

_VERDICT = {True: "Passou", False: "Falhou"}


@dataclass(frozen=True)
class Check:
    """A labelled board together with the outcome it should produce."""

    section: str
    label: str
    board: tuple[tuple[int, ...], ...]
    expected: Outcome

    def passed(self) -> bool:
        """Return True if the board classifies as expected."""
        return check_game(self.board) == self.expected


_X_WINS = "Testando casos válidos: vitória de X"
_O_WINS = "Testando casos válidos: vitória de O"
_DRAW = "Testando empate (sem vencedor, jogo completo)"
_OPEN = "Testando jogo indefinido (em andamento)"
_IMPOSSIBLE = "Testando jogo impossível"

_CHECKS: tuple[Check, ...] = (
    Check(_X_WINS, "Vitória X (diagonal)",
          ((1, 2, 0), (0, 1, 2), (0, 0, 1)), Outcome.X_WINS),
    Check(_X_WINS, "Vitória X (linha)",
          ((2, 0, 0), (1, 1, 1), (2, 0, 0)), Outcome.X_WINS),
    Check(_X_WINS, "Vitória X (coluna)",
          ((1, 2, 0), (1, 2, 0), (1, 0, 0)), Outcome.X_WINS),
    Check(_O_WINS, "Vitória O (linha)",
          ((2, 2, 2), (1, 1, 0), (0, 0, 0)), Outcome.O_WINS),
    Check(_O_WINS, "Vitória O (coluna)",
          ((0, 1, 2), (1, 0, 2), (0, 0, 2)), Outcome.O_WINS),
    Check(_O_WINS, "Vitória O (diagonal secundária)",
          ((0, 0, 2), (0, 2, 0), (2, 1, 1)), Outcome.O_WINS),
    Check(_DRAW, "Empate 1",
          ((1, 2, 1), (2, 1, 2), (2, 1, 2)), Outcome.DRAW),
    Check(_DRAW, "Empate 2",
          ((2, 1, 2), (1, 2, 1), (1, 2, 1)), Outcome.DRAW),
    Check(_OPEN, "Indefinido 1",
          ((1, 0, 0), (2, 1, 0), (0, 2, 0)), Outcome.OPEN),
    Check(_OPEN, "Indefinido 2",
          ((0, 0, 0), (0, 1, 0), (0, 0, 0)), Outcome.OPEN),
    Check(_IMPOSSIBLE, "Impossível (X jogou demais)",
          ((1, 1, 1), (1, 0, 0), (1, 2, 0)), Outcome.IMPOSSIBLE),
    Check(_IMPOSSIBLE, "Impossível (O venceu fora de ordem)",
          ((2, 2, 2), (1, 1, 0), (0, 0, 0)), Outcome.O_WINS),
    Check(_IMPOSSIBLE, "Impossível (dupla vitória)",
          ((1, 1, 1), (2, 2, 2), (0, 0, 0)), Outcome.IMPOSSIBLE),
)


def run_checks() -> tuple[Check, ...]:
    """Return every built-in check, in the order they are reported."""
    return _CHECKS


def main(argv: Sequence[str] | None = None) -> int:
    """Run the built-in checks and print one result line per check."""
    parser = argparse.ArgumentParser(
        prog="velha", description="Check the tic-tac-toe board classifier."
    )
    parser.parse_args(argv)

    for index, (section, checks) in enumerate(
        groupby(run_checks(), key=lambda check: check.section)
    ):
        prefix = "\n" if index else ""
        print(f"{prefix}======= {section} =======")
        for check in checks:
            print(f"{check.label}: {_VERDICT[check.passed()]}")
    print("\n======= Todos os testes concluídos =======")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())