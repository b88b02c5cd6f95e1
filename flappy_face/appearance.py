"""Bird appearance providers.

The renderer asks the active provider for a face surface each frame. ``None``
means "draw the default bird". Providers never touch game state.
"""
import logging

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)

WEBCAM_INDEX = 0
WEBCAM_W, WEBCAM_H = 240, 180
SNAPSHOT_EVERY_MS = 500


class AppearanceError(RuntimeError):
    pass


def circle_crop(surface, size):
    """Scale ``surface`` to ``size`` x ``size`` and mask it to a circle."""
    # smoothscale wants 24/32 bit input, uploads can be paletted
    src = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    src.blit(surface, (0, 0))
    out = pygame.transform.smoothscale(src, (size, size))
    mask = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.circle(mask, (255, 255, 255, 255), (size // 2, size // 2), size // 2)
    out.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
    return out


def centre_square(surface):
    w, h = surface.get_size()
    side = min(w, h)
    return surface.subsurface(pygame.Rect((w - side) // 2, (h - side) // 2, side, side))


def square_around(frame, box=None):
    """Return a square slice of ``frame`` around ``box`` (x, y, w, h) or the centre."""
    h, w = frame.shape[:2]
    if box is None:
        side = min(w, h)
        cx, cy = w // 2, h // 2
    else:
        bx, by, bw, bh = box
        side = min(int(max(bw, bh) * 1.3), w, h)
        cx, cy = bx + bw // 2, by + bh // 2
    x0 = int(np.clip(cx - side // 2, 0, w - side))
    y0 = int(np.clip(cy - side // 2, 0, h - side))
    return frame[y0:y0 + side, x0:x0 + side]


def frame_to_surface(rgb):
    rgb = np.ascontiguousarray(rgb)
    h, w = rgb.shape[:2]
    return pygame.image.frombuffer(rgb.tobytes(), (w, h), "RGB").copy()


class DefaultAppearance:
    name = "default"

    def surface(self, size):
        return None

    def close(self):
        pass


class ImageAppearance:
    """Face picked from an image file on disk."""

    name = "image"

    def __init__(self, path):
        self.path = path
        try:
            self._image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise AppearanceError(f"Could not load face image {path}: {exc}") from exc
        self._cache = {}

    def surface(self, size):
        if size not in self._cache:
            self._cache[size] = circle_crop(centre_square(self._image), size)
        return self._cache[size]

    def close(self):
        self._cache.clear()


class WebcamAppearance:
    """Periodic webcam snapshot, cropped around the largest detected face."""

    name = "webcam"

    def __init__(self, index=WEBCAM_INDEX, interval_ms=SNAPSHOT_EVERY_MS,
                 capture_factory=cv2.VideoCapture, now=pygame.time.get_ticks):
        self.interval_ms = interval_ms
        self._now = now
        self.cap = capture_factory(index)
        if self.cap is None or not self.cap.isOpened():
            raise AppearanceError(f"Could not open webcam {index}")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, WEBCAM_W)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, WEBCAM_H)
        try:
            self.detector = cv2.CascadeClassifier(cv2.data.haarcascades + "haarcascade_frontalface_default.xml")
        except AttributeError as exc:
            self.cap.release()
            raise AppearanceError(f"Face detector unavailable: {exc}") from exc
        self._snapshot = None
        self._last_grab = None
        self._cache = {}
        logger.info("Webcam %s opened for bird face", index)

    def _grab(self):
        ok, frame = self.cap.read()
        if not ok or frame is None:
            logger.debug("Webcam read failed, keeping previous face")
            return
        frame = cv2.flip(frame, 1)
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        faces = ()
        if not self.detector.empty():
            faces = self.detector.detectMultiScale(gray, scaleFactor=1.1, minNeighbors=5)
        box = max(faces, key=lambda f: f[2] * f[3]) if len(faces) else None
        rgb = cv2.cvtColor(square_around(frame, box), cv2.COLOR_BGR2RGB)
        self._snapshot = frame_to_surface(rgb)
        self._cache.clear()

    def surface(self, size):
        now = self._now()
        if self._last_grab is None or now - self._last_grab >= self.interval_ms:
            self._last_grab = now
            self._grab()
        if self._snapshot is None:
            return None
        if size not in self._cache:
            self._cache[size] = circle_crop(self._snapshot, size)
        return self._cache[size]

    def close(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
