# Ataxx Game Constants
BOARD_SIZE = 7

# Width of the permanently blocked frame around the playable squares
BORDER = 2
EXTENDED_SIDE = BOARD_SIZE + 2 * BORDER
BOARD_TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE

COLUMNS = "abcdefg"
ROWS = "1234567"
CENTER_COLUMN = "d"
CENTER_ROW = "4"

# Number of consecutive non-extending moves before the game ends
JUMP_LIMIT = 25

# Furthest a piece may travel in one move (Chebyshev distance)
MAX_MOVE_DISTANCE = 2

# Default agent parameters
DEFAULT_MINIMAX_DEPTH = 4

# Search values: INFTY bounds every score, WINNING_VALUE marks a decided game
INFTY = 2 ** 31 - 1
WINNING_VALUE = INFTY - 20

PASS_TEXT = "-"
