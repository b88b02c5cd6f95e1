import random

from .config import CLASSIC, GameConfig


class Pipe:
    def __init__(self, x, config: GameConfig = CLASSIC, rng=random):
        self.x = x
        self.config = config
        self.width = config.pipe_width
        self.gap = config.pipe_gap
        self.gap_y = rng.uniform(config.gap_min, config.gap_max)
        self.passed = False

    @property
    def top_end(self):
        return self.gap_y - self.gap / 2

    @property
    def bot_start(self):
        return self.gap_y + self.gap / 2

    def update(self):
        self.x -= self.config.pipe_speed

    def is_off_screen(self):
        return self.x <= -self.width

    def check_collision(self, bird) -> bool:
        left, top, right, bottom = bird.hitbox()
        if right > self.x and left < self.x + self.width:
            return top < self.top_end or bottom > self.bot_start
        return False

    def check_passed(self, bird) -> bool:
        if not self.passed and bird.x > self.x + self.width:
            self.passed = True
            return True
        return False
