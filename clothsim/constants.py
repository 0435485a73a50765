# --- Simulation ---
DT = 0.05                  # time-step size
DAMPING = 0.995            # energy kept per Verlet step
CONSTRAINTS_ITER = 10      # relaxation sweeps per step
SUBDIVISIONS = 30          # cloth grid is SUBDIVISIONS x SUBDIVISIONS
EPSILON = 0.3              # point-point collision threshold
PIN_COUNT = 8              # particles grabbed by one pin/unpin request

# --- Cloth layout ---
CLOTH_WIDTH, CLOTH_HEIGHT = 10.0, 12.0
DEPTH_OFFSET = 20.0
DEPTH_JITTER = 0.1

# --- Host forces ---
GRAVITY = (0.0, -0.2, 0.0)
WIND_STRENGTH = 0.1

# --- Window ---
WIDTH, HEIGHT = 800, 800
FPS = 60
STATUS_EVERY = 30         # ticks between constraint error reports to the panel

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREY = (125, 125, 125)
LINK_COLOR = (60, 60, 160)
