import pygame

from .appearance import DefaultAppearance
from .config import CLASSIC
from .game import GameMode

SKY = (135, 206, 235)
GROUND = (139, 69, 19)
GRASS = (34, 139, 34)
PIPE_FILL = (34, 139, 34)
PIPE_EDGE = (0, 100, 0)
BIRD_BODY = (255, 215, 0)
BIRD_BEAK = (255, 165, 0)
INK = (30, 30, 30)
WHITE = (255, 255, 255)

CAP_HEIGHT = 30
CAP_OVERHANG = 5


# Fonts
def load_font(size, bold=False):
    f = pygame.font.SysFont("arial,verdana,dejavusans", size, bold=bold)
    if f is None:
        f = pygame.font.SysFont(None, size, bold=bold)
    return f


# Soft shadow text
def draw_text(surface, text, font, color, pos, shadow=True, center=False):
    txt_surf = font.render(text, True, color)
    x, y = pos
    if center:
        rect = txt_surf.get_rect(center=(x, y))
    else:
        rect = txt_surf.get_rect(topleft=(x, y))
    if shadow:
        shadow_surf = font.render(text, True, (0, 0, 0))
        shadow_surf.set_alpha(90)
        surface.blit(shadow_surf, (rect.x + 2, rect.y + 2))
    surface.blit(txt_surf, rect)
    return rect


# Rounded rect helper
def draw_card(surface, rect, color=WHITE, radius=18, shadow=True):
    if shadow:
        shade = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(shade, (0, 0, 0, 40), shade.get_rect(), border_radius=radius)
        surface.blit(shade, rect.move(0, 6))
    pygame.draw.rect(surface, color, rect, border_radius=radius)


class Renderer:
    """Draws a GameLoop onto a fixed-size pygame surface. Read-only."""

    def __init__(self, config=CLASSIC, appearance=None):
        pygame.font.init()
        self.config = config
        self.appearance = appearance or DefaultAppearance()
        self.font_sm = load_font(16)
        self.font_md = load_font(24)
        self.font_lg = load_font(36, bold=True)

    def draw(self, surface, game):
        cfg = self.config
        surface.fill(SKY)

        ground_top = cfg.screen_height - cfg.ground_height
        pygame.draw.rect(surface, GROUND, (0, ground_top, cfg.screen_width, cfg.ground_height))
        pygame.draw.rect(surface, GRASS, (0, ground_top, cfg.screen_width, 10))

        for pipe in game.pipes:
            self.draw_pipe(surface, pipe)
        self.draw_bird(surface, game.bird)

        if game.mode is GameMode.PLAYING:
            draw_text(surface, str(game.score), self.font_lg, WHITE, (cfg.screen_width // 2, 50), center=True)
        elif game.mode is GameMode.START:
            self.draw_start(surface, game)
        else:
            self.draw_game_over(surface, game)

        if game.notice:
            self.draw_notice(surface, game.notice)

    def draw_pipe(self, surface, pipe):
        cfg = self.config
        bottom = cfg.screen_height - cfg.ground_height
        top_rect = pygame.Rect(int(pipe.x), 0, pipe.width, int(pipe.top_end))
        bot_rect = pygame.Rect(int(pipe.x), int(pipe.bot_start), pipe.width, int(bottom - pipe.bot_start))
        cap_w = pipe.width + 2 * CAP_OVERHANG
        top_cap = pygame.Rect(int(pipe.x) - CAP_OVERHANG, int(pipe.top_end) - CAP_HEIGHT, cap_w, CAP_HEIGHT)
        bot_cap = pygame.Rect(int(pipe.x) - CAP_OVERHANG, int(pipe.bot_start), cap_w, CAP_HEIGHT)
        for rect in (top_rect, bot_rect, top_cap, bot_cap):
            pygame.draw.rect(surface, PIPE_FILL, rect)
            pygame.draw.rect(surface, PIPE_EDGE, rect, 3)

    def bird_sprite(self, bird):
        size = max(bird.width, bird.height)
        face = self.appearance.surface(size)
        sprite = pygame.Surface((size + 12, size + 12), pygame.SRCALPHA)
        c = sprite.get_width() // 2
        if face is not None:
            sprite.blit(face, face.get_rect(center=(c, c)))
            pygame.draw.circle(sprite, (0, 0, 0), (c, c), size // 2, 2)
            return sprite
        r = size // 2
        # body
        pygame.draw.circle(sprite, BIRD_BODY, (c, c), r)
        pygame.draw.circle(sprite, (0, 0, 0), (c, c), r, 2)
        # eye, facing right
        pygame.draw.circle(sprite, WHITE, (c + 5, c - 5), 4)
        pygame.draw.circle(sprite, (0, 0, 0), (c + 7, c - 5), 2)
        # beak
        beak = [(c + 8, c), (c + 18, c - 3), (c + 18, c + 3)]
        pygame.draw.polygon(sprite, BIRD_BEAK, beak)
        pygame.draw.polygon(sprite, (0, 0, 0), beak, 1)
        return sprite

    def draw_bird(self, surface, bird):
        # pygame rotates counter-clockwise, positive rotation noses down
        sprite = pygame.transform.rotate(self.bird_sprite(bird), -bird.rotation)
        cx, cy = bird.center
        surface.blit(sprite, sprite.get_rect(center=(int(cx), int(cy))))

    def draw_start(self, surface, game):
        cfg = self.config
        card = pygame.Rect(20, 90, cfg.screen_width - 40, 200)
        draw_card(surface, card)
        mid = cfg.screen_width // 2
        draw_text(surface, "Flappy Face", self.font_lg, INK, (mid, card.y + 45), center=True, shadow=False)
        draw_text(surface, "SPACE / click to flap", self.font_sm, INK, (mid, card.y + 95), center=True, shadow=False)
        draw_text(surface, f"Best: {game.best_score}", self.font_md, INK, (mid, card.y + 140), center=True, shadow=False)

    def draw_game_over(self, surface, game):
        cfg = self.config
        card = pygame.Rect(20, 110, cfg.screen_width - 40, 200)
        draw_card(surface, card)
        mid = cfg.screen_width // 2
        draw_text(surface, "Game Over", self.font_lg, INK, (mid, card.y + 40), center=True, shadow=False)
        draw_text(surface, f"Score: {game.score}", self.font_md, INK, (mid, card.y + 90), center=True, shadow=False)
        draw_text(surface, f"Best: {game.best_score}", self.font_md, INK, (mid, card.y + 125), center=True, shadow=False)
        draw_text(surface, "SPACE: again   R: restart", self.font_sm, INK, (mid, card.y + 170), center=True, shadow=False)

    def draw_notice(self, surface, message):
        cfg = self.config
        txt = self.font_sm.render(message, True, WHITE)
        rect = txt.get_rect(midbottom=(cfg.screen_width // 2, cfg.screen_height - 12))
        pygame.draw.rect(surface, INK, rect.inflate(16, 10), border_radius=8)
        surface.blit(txt, rect)
