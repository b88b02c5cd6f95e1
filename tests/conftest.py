import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def display():
    pygame.display.init()
    screen = pygame.display.set_mode((320, 480))
    yield screen
    pygame.display.quit()


class MemoryStore:
    def __init__(self, data=None):
        self.data = dict(data or {})
        self.writes = []

    def get(self, key, default=0):
        return self.data.get(key, default)

    def set(self, key, value):
        self.data[key] = value
        self.writes.append((key, value))


@pytest.fixture
def store():
    return MemoryStore()
