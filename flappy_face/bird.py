from .config import CLASSIC, GameConfig


class Bird:
    def __init__(self, config: GameConfig = CLASSIC):
        self.config = config
        self.width = config.bird_width
        self.height = config.bird_height
        self.reset()

    def reset(self):
        self.x = self.config.bird_x
        self.y = self.config.bird_y
        self.velocity = 0.0
        self.rotation = 0.0

    def update(self, playing=True):
        if not playing:
            return
        cfg = self.config
        self.velocity = min(self.velocity + cfg.gravity, cfg.max_fall_speed)
        self.y += self.velocity
        self.rotation = max(cfg.rotation_min, min(cfg.rotation_max, self.velocity * cfg.rotation_scale))

    def jump(self, playing=True):
        if playing:
            self.velocity = self.config.jump_velocity

    def hitbox(self):
        """Return (left, top, right, bottom) shrunk by the configured inset."""
        inset = self.config.hitbox_inset
        return (
            self.x + inset,
            self.y + inset,
            self.x + self.width - inset,
            self.y + self.height - inset,
        )

    @property
    def center(self):
        return self.x + self.width / 2, self.y + self.height / 2
