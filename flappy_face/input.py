import pygame

from .game import Action


class InputMapper:
    """Turns raw pygame events into game actions."""

    def translate(self, event):
        if event.type == pygame.QUIT:
            return Action.QUIT
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                return Action.PRIMARY
            if event.key == pygame.K_r:
                return Action.RESTART
            if event.key == pygame.K_ESCAPE:
                return Action.QUIT
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return Action.PRIMARY
        elif event.type == pygame.FINGERDOWN:
            return Action.PRIMARY
        return None

    def poll(self):
        actions = []
        for event in pygame.event.get():
            action = self.translate(event)
            if action is not None:
                actions.append(action)
        return actions
