# World units: origin at the centre of the arena, y grows upwards.
DIM = 500.0
PADDLE_HEIGHT = 100.0
WALL_THICKNESS = 10.0
# Paddles stop just short of the walls
BOUND = 2 * PADDLE_HEIGHT - 0.5 * WALL_THICKNESS

PADDLE_X = DIM - 10.0
PADDLE_SPEED = 500.0  # units per second
BALL_SIZE = 50.0

# Largest step the simulation takes in one tick (seconds)
MAX_DELTA = 0.2

# Added to a velocity component after a bounce
BOUNCE_BIAS = 5.0
# Vertical speed per unit of offset from the paddle centre
DEFLECTION = 10.0
# Serve velocity after a goal; x sign flips towards the side that conceded
SERVE_SPEED = (500.0, 50.0)

# Window
TITLE = "Pong!"
WINDOW_SIZE = (500, 500)
FPS = 60

# Colors
CLEAR_COLOR = (230, 230, 230)
PADDLE_COLOR = (128, 128, 255)
BALL_COLOR = (51, 179, 0)
TEXT_COLOR = (255, 255, 255)
FONT_SIZE = 40
