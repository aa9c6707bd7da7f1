# Scheduling
FPS = 60

# Breakout dimensions
BREAKOUT_WIDTH, BREAKOUT_HEIGHT = 600, 700
BREAKOUT_PADDLE_WIDTH = 100
BREAKOUT_PADDLE_HEIGHT = 12
WALL_GAP = 50                 # gap from the breakout paddle to the bottom wall
BALL_DIAMETER = 11
BLOCK_HEIGHT = 20
TOP_OFFSET = 60               # gap from the topmost blocks to the top wall
BLOCKS_PER_ROW = 10

# Pong dimensions
PONG_WIDTH, PONG_HEIGHT = 700, 450
PONG_PADDLE_WIDTH = 15
PONG_PADDLE_HEIGHT = 150
PONG_WALL_GAP = 10            # gap between the pong paddles and the side walls
BALL_RADIUS = 10
NET_WIDTH = 4

# Speeds
BALL_SPEED = 5
MAX_BALL_SPEED = 10
SPEED_INCREMENT = 0.25
MAX_REBOUND_ANGLE = 45        # degrees from the paddle normal
COMPUTER_SPEED = 0.1          # fraction of the distance to the ball per tick
PADDLE_SPEED = 10             # per agent action

# Colours (RGB tuples)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (200, 72, 72)
ROW_COLOURS = [
    (200, 72, 72),
    (198, 107, 59),
    (180, 122, 49),
    (162, 161, 42),
    (71, 160, 72),
    (66, 72, 200),
]

# Text
WIN_TEXT = "YOU WIN!"
WIN_FONT_SIZE = 54
SCORE_FONT_SIZE = 40
