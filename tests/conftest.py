"""
Shared test fixtures for the tic-tac-toe tests.
"""

import pytest

from tictactoe.board import Board
from tictactoe.game_logic import GameController


# =============================================================================
# Move sequences (row, col), played alternately starting with player one
# =============================================================================

# player one completes row 0 on the fifth move
ROW_ZERO_WIN = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]

# player two completes row 1 on the sixth move
PLAYER_TWO_WIN = [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)]

# fills the board with no three in a row:
#   X | O | X
#   X | O | O
#   O | X | X
FULL_BOARD_DRAW = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                   (1, 2), (2, 1), (2, 0), (2, 2)]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Fresh 3x3 board."""
    return Board()


@pytest.fixture
def controller() -> GameController:
    """Fresh controller with default player names."""
    return GameController()


def play(controller, moves):
    """Play moves in order and return the list of outcomes."""
    return [controller.play_round(r, c) for r, c in moves]
