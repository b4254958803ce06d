"""
Pygame Preview for Colour Map Morphing

Shows the CPU-materialized texture of a morph between two presets and
animates t with EMA smoothing. This is a preview, not an editor.

Controls:
  SPACE       Flip morph direction (t -> 0 or 1)
  D           Toggle key markers
  T           Transpose both maps
  S           Save screenshot
  Q / ESC     Quit
"""

import os
import time

import pygame

from .presets import build_preset
from .smoothing import MorphAnimator
from .texture import fill_texture


class Viewer:
    def __init__(self, settings, other=None, window=600):
        self.settings = settings
        self.window = window
        self.map_a = build_preset(settings.preset)
        self.map_b = build_preset(other or settings.preset)
        self.animator = MorphAnimator(self.map_a, self.map_b,
                                      time_constant=settings.morph_time_constant)
        self.draw_debug_info = settings.draw_debug_info
        self.running = True

    def _render_frame(self):
        size = self.settings.texture_size
        rgba = fill_texture(self.animator.color_map, size, size,
                            draw_debug_info=self.draw_debug_info)
        # Row 0 is y = 0; flip so +Y points up on screen
        rgb = rgba[::-1, :, :3]
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1).copy())
        return pygame.transform.smoothscale(surface, (self.window, self.window))

    def _handle_keydown(self, event, screen):
        if event.key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False
        elif event.key == pygame.K_SPACE:
            self.animator.set_target(0.0 if self.animator.target > 0.5 else 1.0)
        elif event.key == pygame.K_d:
            self.draw_debug_info = not self.draw_debug_info
        elif event.key == pygame.K_t:
            self.map_a.transpose()
            if self.map_b is not self.map_a:
                self.map_b.transpose()
        elif event.key == pygame.K_s:
            self._save_screenshot(screen)

    def _save_screenshot(self, screen):
        screenshots_dir = os.path.join(os.getcwd(), "screenshots")
        os.makedirs(screenshots_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = os.path.join(screenshots_dir, f"colormap_{timestamp}.png")
        pygame.image.save(screen, path)
        print(f"Screenshot saved: {path}")

    def run(self):
        """Main viewer loop."""
        pygame.init()
        screen = pygame.display.set_mode((self.window, self.window))
        pygame.display.set_caption("Colour Map")
        clock = pygame.time.Clock()

        last_time = time.time()
        while self.running:
            now = time.time()
            dt = min(now - last_time, 0.1)  # cap dt to avoid jumps
            last_time = now

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event, screen)

            self.animator.update(dt)
            screen.blit(self._render_frame(), (0, 0))
            pygame.display.set_caption(f"Colour Map  t={self.animator.t:.2f}")
            pygame.display.flip()
            clock.tick(60)

        pygame.quit()
