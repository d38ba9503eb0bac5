import logging
from dataclasses import dataclass
from enum import Enum

from .board import Board
from .config import (
    BOARD_SIZE, PLAYER_ONE_TOKEN, PLAYER_TWO_TOKEN,
    DEFAULT_PLAYER_ONE_NAME, DEFAULT_PLAYER_TWO_NAME,
)

logger = logging.getLogger(__name__)


class RoundOutcome(str, Enum):
    """result of one play_round call"""
    INVALID = "invalid"     # cell taken, off the board, or round already over
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


@dataclass
class Player:
    """
    a seat at the board: display name, board token, rounds won
    """
    name: str
    token: int
    score: int = 0

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("player name must not be blank")


class GameController:
    """
    tic-tac-toe rules and turn state for two players sharing one board
    """
    def __init__(self, player_one_name=DEFAULT_PLAYER_ONE_NAME,
                 player_two_name=DEFAULT_PLAYER_TWO_NAME, board_size=BOARD_SIZE):
        """
        init board, players, and round flags
        """
        self.board = Board(board_size)
        self._players = (Player(player_one_name, PLAYER_ONE_TOKEN),
                         Player(player_two_name, PLAYER_TWO_TOKEN))
        self._active = self._players[0]   # player one always opens
        self.last_outcome = None          # outcome of the last accepted move
        self.winner = None                # Player who won this round, if any

    @property
    def players(self):
        return self._players

    @property
    def active_player(self):
        return self._active

    @property
    def is_round_over(self):
        return self.last_outcome in (RoundOutcome.WIN, RoundOutcome.DRAW)

    def is_full(self):
        return self.board.is_full()

    def _switch_active_player(self):
        self._active = self._players[1] if self._active is self._players[0] else self._players[0]

    def play_round(self, row, col):
        """
        place the active player's token, then decide the round
        returns: RoundOutcome
        """
        player = self._active
        logger.debug("Placing %s's token into Row: %s Column: %s", player.name, row, col)
        if self.is_round_over:
            logger.debug("round is over, ignoring move at (%s, %s)", row, col)
            return RoundOutcome.INVALID
        if not self.board.mark(row, col, player.token):
            logger.debug("cell (%s, %s) rejected for %s", row, col, player.name)
            return RoundOutcome.INVALID

        logger.debug("board after move:\n%s", self.board)
        if self.board.is_winner(player.token):
            player.score += 1
            self.winner = player
            self.last_outcome = RoundOutcome.WIN
            logger.info("%s has won! (score %d)", player.name, player.score)
        elif self.board.is_full():
            self.last_outcome = RoundOutcome.DRAW
            logger.info("round ended in a draw")
        else:
            self._switch_active_player()
            self.last_outcome = RoundOutcome.CONTINUE
        return self.last_outcome

    def reset_board(self):
        """
        clear the board for a new round; scores are kept
        """
        self.board.reset()
        self._active = self._players[0]
        self.last_outcome = None; self.winner = None
        logger.debug("board reset, scores %s",
                     ", ".join(f"{p.name}={p.score}" for p in self._players))
