import logging

import pygame

logger = logging.getLogger(__name__)


class FrameTicker:
    """Calls ``callback`` once per frame until stopped.

    Each frame runs to completion before the clock waits for the next one, so
    frames never overlap. ``stop()`` may be called from inside the callback;
    the loop exits after that frame.
    """

    def __init__(self, callback, fps=60, clock=None):
        self.callback = callback
        self.fps = fps
        self.clock = clock or pygame.time.Clock()
        self.frames = 0
        self._running = False

    @property
    def running(self):
        return self._running

    def run(self):
        self._running = True
        logger.debug("Ticker started at %d fps", self.fps)
        while self._running:
            self.callback()
            self.frames += 1
            if self._running:
                self.clock.tick(self.fps)
        logger.debug("Ticker stopped after %d frames", self.frames)

    def stop(self):
        self._running = False
