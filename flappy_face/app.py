import logging

import pygame

from .appearance import AppearanceError, ImageAppearance, WebcamAppearance
from .game import Action, GameLoop
from .input import InputMapper
from .renderer import Renderer
from .scheduler import FrameTicker

logger = logging.getLogger(__name__)


class App:
    """Window, input and ticker around a single GameLoop."""

    def __init__(self, config, store=None, fps=60, screen=None):
        self.config = config
        self.game = GameLoop(config, store=store, fps=fps)
        self.renderer = Renderer(config)
        self.inputs = InputMapper()
        self.screen = screen
        self.ticker = FrameTicker(self.frame, fps)

    def use_appearance(self, factory, *args):
        """Swap in a face provider; on failure keep the current one and tell the player."""
        try:
            provider = factory(*args)
        except AppearanceError as exc:
            logger.warning("%s", exc)
            self.game.notify(str(exc))
            return False
        self.renderer.appearance.close()
        self.renderer.appearance = provider
        return True

    def use_face_image(self, path):
        return self.use_appearance(ImageAppearance, path)

    def use_webcam(self, index=0):
        return self.use_appearance(WebcamAppearance, index)

    def frame(self):
        for action in self.inputs.poll():
            if action is Action.QUIT:
                self.ticker.stop()
                return
            self.game.handle_input(action)
        self.game.update()
        self.renderer.draw(self.screen, self.game)
        pygame.display.flip()

    def open_window(self):
        pygame.init()
        pygame.display.set_caption("Flappy Face")
        self.screen = pygame.display.set_mode((self.config.screen_width, self.config.screen_height))
        return self.screen

    def run(self):
        if self.screen is None:
            self.open_window()
        try:
            self.ticker.run()
        finally:
            self.renderer.appearance.close()
            pygame.quit()
