from dataclasses import dataclass, replace

# -------- Settings --------
WIDTH, HEIGHT = 320, 480
FPS = 60

GRAVITY = 0.5
JUMP_VELOCITY = -8
MAX_FALL_SPEED = 5
PIPE_SPEED = 2
PIPE_GAP = 120
PIPE_SPACING = 150
PIPE_WIDTH = 60

BIRD_X, BIRD_Y = 80, 240
BIRD_SIZE = 30

SAVE_FILE = "face_flappy_best.json"
BEST_KEY = "best"


@dataclass(frozen=True)
class GameConfig:
    screen_width: int = WIDTH
    screen_height: int = HEIGHT

    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY
    max_fall_speed: float = MAX_FALL_SPEED

    bird_x: float = BIRD_X
    bird_y: float = BIRD_Y
    bird_width: int = BIRD_SIZE
    bird_height: int = BIRD_SIZE
    hitbox_inset: int = 5

    # tilt for flair
    rotation_scale: float = 3
    rotation_min: float = -20
    rotation_max: float = 90

    pipe_speed: float = PIPE_SPEED
    pipe_gap: int = PIPE_GAP
    pipe_spacing: int = PIPE_SPACING
    pipe_width: int = PIPE_WIDTH
    gap_min: float = 150
    gap_max: float = 280
    spawn_offset: int = 50
    preseed_pipes: int = 3

    ceiling_margin: float = 10
    floor_margin: float = 40
    ground_height: int = 50

    restart_to_start: bool = True


CLASSIC = GameConfig()

# webcam build: lazy pipes, straight back into play after a crash
FACE = replace(
    CLASSIC,
    gap_min=140,
    gap_max=300,
    floor_margin=50,
    rotation_min=-25,
    preseed_pipes=0,
    restart_to_start=False,
)

PRESETS = {"classic": CLASSIC, "face": FACE}


def get_preset(name):
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"unknown variant {name!r}, expected one of {sorted(PRESETS)}") from None
