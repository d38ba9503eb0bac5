# -----------------------------------------------------------------------------
# GAME CONSTANTS
# -----------------------------------------------------------------------------

BOARD_SIZE = 3              # fixed 3x3 grid
MIN_BOARD_SIZE = 3

EMPTY = 0                   # token of an unmarked cell
PLAYER_ONE_TOKEN = 1
PLAYER_TWO_TOKEN = 2
PLAYER_TOKENS = (PLAYER_ONE_TOKEN, PLAYER_TWO_TOKEN)

DEFAULT_PLAYER_ONE_NAME = "Player 1"
DEFAULT_PLAYER_TWO_NAME = "Player 2"

# player 1 is X, 2 is O
TOKEN_SYMBOLS = {EMPTY: ' ', PLAYER_ONE_TOKEN: 'X', PLAYER_TWO_TOKEN: 'O'}
