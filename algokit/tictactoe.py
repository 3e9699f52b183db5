"""Two-player tic-tac-toe for the terminal."""

from __future__ import annotations

import argparse
import enum
from typing import List, Optional, Sequence, Tuple

_LINES = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),
    (1, 4, 7), (2, 5, 8), (3, 6, 9),
    (1, 5, 9), (3, 5, 7),
)


class GameStatus(enum.Enum):
    """State of a game after a move."""

    IN_PROGRESS = -1
    DRAW = 0
    WIN = 1


class InvalidMove(Exception):
    """Raised when a square is out of range or already taken."""


class Board:
    """Nine squares numbered 1 to 9; an empty square shows its own number."""

    def __init__(self) -> None:
        self._squares: List[str] = [str(n) for n in range(1, 10)]

    @property
    def squares(self) -> Tuple[str, ...]:
        return tuple(self._squares)

    def _cell(self, square: int) -> str:
        return self._squares[square - 1]

    def place(self, square: int, mark: str) -> None:
        """Put ``mark`` on ``square``; raise InvalidMove if that is not allowed."""
        if len(mark) != 1 or mark.isdigit():
            raise ValueError("a mark must be a single non-digit character")
        if not 1 <= square <= 9 or self._cell(square) != str(square):
            raise InvalidMove(f"square {square} is not available")
        self._squares[square - 1] = mark

    def status(self) -> GameStatus:
        """Tell whether someone has a line, the board is full, or play goes on."""
        for a, b, c in _LINES:
            if self._cell(a) == self._cell(b) == self._cell(c):
                return GameStatus.WIN
        if all(cell != str(n) for n, cell in enumerate(self._squares, start=1)):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS

    def render(self) -> str:
        """Return the board drawn as text with the players' marks."""
        s = self._squares
        rows = [
            "",
            "",
            "\tTic Tac Toe",
            "",
            "Player 1 (X)  -  Player 2 (O)",
            "",
            "",
        ]
        for index, start in enumerate((0, 3, 6)):
            if index:
                rows.append("____")
            rows.append("     |     |     ")
            rows.append(f"  {s[start]}  |  {s[start + 1]}  |  {s[start + 2]} ")
        rows.append("     |     |     ")
        rows.append("")
        return "\n".join(rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game between two players taking turns at the keyboard."""
    parser = argparse.ArgumentParser(
        prog="tictactoe", description="Two-player tic-tac-toe in the terminal."
    )
    parser.parse_args(argv)

    board = Board()
    player = 1
    while True:
        print(board.render())
        mark = "X" if player == 1 else "O"
        try:
            choice = input(f"Player {player}, enter a number:  ")
        except EOFError:
            print()
            return 1
        try:
            board.place(int(choice), mark)
        except (ValueError, InvalidMove):
            print("Invalid move ")
            continue
        status = board.status()
        if status is not GameStatus.IN_PROGRESS:
            break
        player = 2 if player == 1 else 1

    print(board.render())
    if status is GameStatus.WIN:
        print(f"==>Player {player} win")
    else:
        print("==>Game draw")
    return 0