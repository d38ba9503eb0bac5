import logging

from .config import BOARD_SIZE, MIN_BOARD_SIZE, EMPTY, PLAYER_TOKENS, TOKEN_SYMBOLS

logger = logging.getLogger(__name__)


class Board:
    """
    square grid of cells, each EMPTY or holding a player token

    cells are marked at most once per round; only reset() clears them
    """
    def __init__(self, size=BOARD_SIZE):
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"board size must be at least {MIN_BOARD_SIZE}, got {size}")
        self.size = size
        self._grid = self._empty_grid()

    def _empty_grid(self):
        return [[EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def _in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row, col):
        """token at (row, col); raises IndexError off the board"""
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.size}x{self.size} board")
        return self._grid[row][col]

    def rows(self):
        # copy so callers can't bypass mark()
        return [list(row) for row in self._grid]

    def empty_cells(self):
        return [(r, c) for r in range(self.size) for c in range(self.size)
                if self._grid[r][c] == EMPTY]

    def mark(self, row, col, token):
        """
        put token on an empty cell
        returns: True if placed, False if occupied, off the board, or not a player token
        """
        if token not in PLAYER_TOKENS:
            logger.debug("rejecting mark with non-player token %r", token)
            return False
        if not self._in_bounds(row, col):
            logger.debug("rejecting out of range cell (%s, %s)", row, col)
            return False
        if self._grid[row][col] != EMPTY:
            return False
        self._grid[row][col] = token
        return True

    def _lines(self):
        # rows, cols, main diag, anti-diag as lists of (row, col)
        n = self.size
        for i in range(n):
            yield [(i, j) for j in range(n)]
        for j in range(n):
            yield [(i, j) for i in range(n)]
        yield [(i, i) for i in range(n)]
        yield [(i, n - 1 - i) for i in range(n)]

    def winning_line(self, token):
        """
        first completed line for token, or None
        """
        if token == EMPTY:
            return None
        for line in self._lines():
            if all(self._grid[r][c] == token for r, c in line):
                return line
        return None

    def is_winner(self, token):
        return self.winning_line(token) is not None

    def is_full(self):
        return all(cell != EMPTY for row in self._grid for cell in row)

    def reset(self):
        # same board object, fresh cells
        self._grid = self._empty_grid()

    def __str__(self):
        sep = '\n' + '-' * (self.size * 4 - 3) + '\n'
        return sep.join(' | '.join(TOKEN_SYMBOLS.get(cell, '?') for cell in row)
                        for row in self._grid)

    def __repr__(self):
        return f"Board(size={self.size}, rows={self._grid!r})"
