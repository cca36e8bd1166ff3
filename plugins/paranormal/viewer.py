"""
Pygame Frame Player

Plays a finished frame list in a window, looping like the saved
animation does.

Controls:
  SPACE       Pause / Resume
  LEFT/RIGHT  Step one frame (pauses)
  HOME        Jump to first frame
  S           Save current frame as PNG
  H           Toggle HUD overlay
  Q / ESC     Quit
"""

import os
import time
import numpy as np
import pygame

from .presets import FRAME_DELAY_MS

BG = (12, 12, 16)
HUD_COLOR = (150, 150, 160)


def fit_size(frame_w, frame_h, max_w, max_h):
    """Whole-number upscale of a frame that fits in max_w x max_h.

    Frames already larger than the window stay at 1x and can overflow it.
    """
    scale = max(1, min(max_w // frame_w, max_h // frame_h))
    return frame_w * scale, frame_h * scale


class FrameViewer:

    def __init__(self, frames, delay_ms=FRAME_DELAY_MS, window=(900, 900),
                 title="paranormal"):
        if not frames:
            raise ValueError("FrameViewer needs at least one frame")
        self.frames = frames
        self.delay = delay_ms / 1000.0
        self.title = title
        frame_h, frame_w = frames[0].shape[:2]
        self.canvas_w, self.canvas_h = fit_size(frame_w, frame_h, *window)
        self.index = 0
        self.paused = False
        self.show_hud = True
        self.running = True
        self._surfaces = [None] * len(frames)

    def _surface(self, i):
        if self._surfaces[i] is None:
            # pygame surfaces are (W, H); frames are (H, W)
            arr = np.ascontiguousarray(self.frames[i].swapaxes(0, 1))
            self._surfaces[i] = pygame.surfarray.make_surface(arr)
        return self._surfaces[i]

    def _save_frame(self):
        path = os.path.abspath(f"frame_{self.index:04d}.png")
        pygame.image.save(self._surface(self.index), path)
        print(f"Frame saved: {path}")

    def _draw_hud(self, screen):
        if not self.show_hud:
            return
        state = "paused" if self.paused else "playing"
        text = f"frame {self.index + 1}/{len(self.frames)}  {state}"
        screen.blit(self.hud_font.render(text, True, HUD_COLOR), (10, 8))

    def _handle_keydown(self, key):
        n = len(self.frames)
        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_RIGHT:
            self.paused = True
            self.index = (self.index + 1) % n
        elif key == pygame.K_LEFT:
            self.paused = True
            self.index = (self.index - 1) % n
        elif key == pygame.K_HOME:
            self.index = 0
        elif key == pygame.K_s:
            self._save_frame()
        elif key == pygame.K_h:
            self.show_hud = not self.show_hud

    def run(self):
        """Main player loop."""
        pygame.init()
        screen = pygame.display.set_mode((self.canvas_w, self.canvas_h))
        pygame.display.set_caption(self.title)
        clock = pygame.time.Clock()
        self.hud_font = pygame.font.SysFont("menlo", 13)

        last_advance = time.time()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            now = time.time()
            if not self.paused and now - last_advance >= self.delay:
                self.index = (self.index + 1) % len(self.frames)
                last_advance = now

            screen.fill(BG)
            scaled = pygame.transform.scale(
                self._surface(self.index), (self.canvas_w, self.canvas_h)
            )
            screen.blit(scaled, (0, 0))
            self._draw_hud(screen)
            pygame.display.flip()
            clock.tick(60)

        pygame.quit()
