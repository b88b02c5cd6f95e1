"""Flappy Face: a pygame Flappy Bird clone with an optional custom bird face."""

from .bird import Bird
from .config import CLASSIC, FACE, GameConfig, get_preset
from .game import Action, GameLoop, GameMode
from .pipe import Pipe

__all__ = ["Action", "Bird", "CLASSIC", "FACE", "GameConfig", "GameLoop", "GameMode", "Pipe", "get_preset"]
