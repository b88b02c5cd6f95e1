import logging
import random
from enum import Enum

from .bird import Bird
from .config import BEST_KEY, CLASSIC, FPS, GameConfig
from .pipe import Pipe

logger = logging.getLogger(__name__)


class GameMode(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Action(Enum):
    PRIMARY = "primary"
    RESTART = "restart"
    QUIT = "quit"


class GameLoop:
    """Owns the bird, the pipes and the score; advanced once per frame.

    Listeners are plain callables:
      on_score(score)
      on_game_over(score, best_score)
    """

    def __init__(self, config: GameConfig = CLASSIC, store=None, rng=None, fps=FPS):
        self.config = config
        self.store = store
        self.fps = fps
        self.rng = rng or random.Random()
        self.bird = Bird(config)
        self.pipes = []
        self.mode = GameMode.START
        self.score = 0
        self.best_score = store.get(BEST_KEY, 0) if store is not None else 0
        self.notice = None
        self._notice_frames = 0
        self.score_listeners = []
        self.game_over_listeners = []

    @property
    def playing(self):
        return self.mode is GameMode.PLAYING

    # -------- input --------
    def handle_input(self, action: Action):
        if action is Action.RESTART:
            self.restart_game()
        elif action is Action.PRIMARY:
            if self.mode is GameMode.START:
                self.start_game()
            elif self.mode is GameMode.PLAYING:
                self.bird.jump(self.playing)
            else:
                self.restart_game()

    # -------- transitions --------
    def _reset_round(self):
        self.score = 0
        self.pipes = []
        self.bird.reset()

    def start_game(self):
        self._reset_round()
        cfg = self.config
        for i in range(1, cfg.preseed_pipes + 1):
            self.pipes.append(self._new_pipe(cfg.screen_width + i * cfg.pipe_spacing))
        self.mode = GameMode.PLAYING
        logger.info("Round started (%d pipes seeded)", len(self.pipes))

    def restart_game(self):
        if self.config.restart_to_start:
            self._reset_round()
            self.mode = GameMode.START
        else:
            self.start_game()

    def game_over(self):
        self.mode = GameMode.GAME_OVER
        self.best_score = max(self.best_score, self.score)
        if self.store is not None:
            self.store.set(BEST_KEY, self.best_score)
        logger.info("Round over: score=%d best=%d", self.score, self.best_score)
        for listener in self.game_over_listeners:
            listener(self.score, self.best_score)

    def notify(self, message, seconds=3):
        self.notice = message
        self._notice_frames = max(1, round(seconds * self.fps))

    # -------- per frame --------
    def _new_pipe(self, x):
        return Pipe(x, self.config, self.rng)

    def _hit_boundary(self):
        cfg = self.config
        bird = self.bird
        return bird.y <= -cfg.ceiling_margin or bird.y + bird.height >= cfg.screen_height - cfg.floor_margin

    def update(self):
        if self._notice_frames:
            self._notice_frames -= 1
            if not self._notice_frames:
                self.notice = None

        if not self.playing:
            return

        self.bird.update(self.playing)
        if self._hit_boundary():
            self.game_over()
            return

        for pipe in self.pipes:
            pipe.update()
        self.pipes = [p for p in self.pipes if not p.is_off_screen()]

        cfg = self.config
        if not self.pipes or self.pipes[-1].x < cfg.screen_width - cfg.pipe_spacing:
            self.pipes.append(self._new_pipe(cfg.screen_width + cfg.spawn_offset))

        for pipe in self.pipes:
            if pipe.check_collision(self.bird):
                self.game_over()
                return
            if pipe.check_passed(self.bird):
                self.score += 1
                for listener in self.score_listeners:
                    listener(self.score)
