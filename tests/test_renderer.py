import pygame

from flappy_face.config import CLASSIC
from flappy_face.game import GameLoop, GameMode
from flappy_face.renderer import GROUND, SKY, Renderer, draw_card

RED = (220, 0, 0)


class SolidFace:
    def surface(self, size):
        face = pygame.Surface((size, size), pygame.SRCALPHA)
        face.fill(RED)
        return face

    def close(self):
        pass


def _canvas():
    return pygame.Surface((CLASSIC.screen_width, CLASSIC.screen_height))


def test_draws_background_and_ground():
    game = GameLoop()
    game.start_game()
    canvas = _canvas()
    Renderer().draw(canvas, game)
    assert canvas.get_at((5, 200))[:3] == SKY
    assert canvas.get_at((5, CLASSIC.screen_height - 20))[:3] == GROUND


def test_draws_every_screen():
    game = GameLoop()
    renderer = Renderer()
    canvas = _canvas()
    renderer.draw(canvas, game)
    game.start_game()
    renderer.draw(canvas, game)
    game.pipes[0].x = 150
    renderer.draw(canvas, game)
    game.game_over()
    game.notify("Could not open webcam 0")
    renderer.draw(canvas, game)


def test_face_provider_replaces_default_bird():
    game = GameLoop()
    game.mode = GameMode.PLAYING
    canvas = _canvas()
    Renderer(appearance=SolidFace()).draw(canvas, game)
    cx, cy = game.bird.center
    assert canvas.get_at((int(cx), int(cy)))[:3] == RED


def test_card_shadow_is_translucent():
    canvas = _canvas()
    canvas.fill(SKY)
    card = pygame.Rect(20, 90, 280, 200)
    draw_card(canvas, card)
    r, g, b = canvas.get_at((card.centerx, card.bottom + 3))[:3]
    assert (r, g, b) != (0, 0, 0)
    assert all(abs(got - int(want * 215 / 255)) <= 3 for got, want in zip((r, g, b), SKY))
