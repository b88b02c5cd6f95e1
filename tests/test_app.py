from types import SimpleNamespace

from flappy_face.__main__ import build_config, parse_args
from flappy_face.app import App
from flappy_face.appearance import AppearanceError, DefaultAppearance
from flappy_face.config import CLASSIC, FACE
from flappy_face.game import Action, GameMode


def _app(display, actions):
    app = App(CLASSIC, screen=display)
    queue = list(actions)
    app.inputs.poll = lambda: queue.pop(0) if queue else []
    return app


def test_frame_applies_input_then_updates(display):
    app = _app(display, [[Action.PRIMARY]])
    app.frame()
    assert app.game.mode is GameMode.PLAYING
    assert app.game.bird.velocity == CLASSIC.gravity


def test_quit_stops_ticker(display):
    app = _app(display, [[Action.PRIMARY], [], [Action.QUIT]])
    app.ticker.clock = SimpleNamespace(tick=lambda fps: 0)
    app.ticker.run()
    assert app.ticker.frames == 3
    assert app.game.mode is GameMode.PLAYING


def test_failed_face_keeps_previous_and_notifies(display):
    app = _app(display, [])

    def broken(*args):
        raise AppearanceError("Could not open webcam 3")

    assert not app.use_appearance(broken, 3)
    assert isinstance(app.renderer.appearance, DefaultAppearance)
    assert app.game.notice == "Could not open webcam 3"


def test_missing_face_image_notifies(display, tmp_path):
    app = _app(display, [])
    assert not app.use_face_image(str(tmp_path / "me.png"))
    assert app.game.notice.startswith("Could not load face image")


def test_cli_variants():
    assert build_config(parse_args([])) is CLASSIC
    assert build_config(parse_args(["--variant", "face"])) is FACE
    config = build_config(parse_args(["--floor-margin", "55"]))
    assert config.floor_margin == 55
    assert config.restart_to_start


def test_notice_duration_follows_app_fps(display):
    app = App(CLASSIC, fps=30, screen=display)
    app.game.notify("Could not open webcam 0", seconds=3)
    for _ in range(89):
        app.game.update()
    assert app.game.notice is not None
    app.game.update()
    assert app.game.notice is None
