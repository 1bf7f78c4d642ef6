"""
renderer.py
-----------
Draws a RenderSnapshot with plain pygame shapes and text.

Responsibilities:
- Background, ground band, actor, obstacles, power-ups and particles
- HUD with score, high score and shield banner
- Menu and game-over overlays

The renderer only reads snapshots; it never touches simulation state.
"""

import pygame

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.game_settings import Display, Palette, Particles, World
from goose_runner.core.runtime.session_state import SessionState


OBSTACLE_COLORS = {
    "camera": Palette.CAMERA,
    "pursuer": Palette.PURSUER,
    "ledger": Palette.LEDGER,
}


class Renderer:
    """Handles all drawing for one target surface."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, width=Display.WIDTH, height=Display.HEIGHT):
        self.width = width
        self.height = height
        self._fonts = {}
        self._overlay = None
        DebugLogger.init_entry("Renderer")

    def _font(self, size):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont("monospace", size)
        return self._fonts[size]

    # ===========================================================
    # Frame
    # ===========================================================

    def draw(self, surface, snapshot):
        """Draw one complete frame for the given snapshot."""
        surface.fill(Palette.BACKGROUND)
        pygame.draw.rect(
            surface, Palette.GROUND,
            (0, World.GROUND_Y, self.width, self.height - World.GROUND_Y)
        )

        self._draw_actor(surface, snapshot.actor)
        for obstacle in snapshot.obstacles:
            self._draw_obstacle(surface, obstacle)
        for power_up in snapshot.power_ups:
            self._draw_power_up(surface, power_up)
        self._draw_particles(surface, snapshot.particles)
        self._draw_hud(surface, snapshot)

        if snapshot.state is SessionState.MENU:
            self._draw_menu(surface, snapshot)
        elif snapshot.state is SessionState.GAME_OVER:
            self._draw_game_over(surface, snapshot)

    # ===========================================================
    # Entities
    # ===========================================================

    def _draw_actor(self, surface, actor):
        rect = pygame.Rect(int(actor.x), int(actor.y), actor.width, actor.height)

        if actor.shielded:
            pygame.draw.circle(surface, Palette.GOLD, rect.center, 30, 3)

        # Body, head and beak facing right
        body = rect.inflate(-8, -18).move(0, 8)
        pygame.draw.ellipse(surface, Palette.GOOSE, body)
        pygame.draw.ellipse(surface, Palette.GOOSE_OUTLINE, body, 2)
        head_center = (rect.right - 12, rect.top + 12)
        pygame.draw.circle(surface, Palette.GOOSE, head_center, 9)
        pygame.draw.circle(surface, Palette.GOOSE_OUTLINE, head_center, 9, 2)
        beak = [
            (rect.right - 4, rect.top + 9),
            (rect.right + 6, rect.top + 13),
            (rect.right - 4, rect.top + 16),
        ]
        pygame.draw.polygon(surface, Palette.BEAK, beak)

    def _draw_obstacle(self, surface, obstacle):
        rect = pygame.Rect(int(obstacle.x), int(obstacle.y), obstacle.width, obstacle.height)
        color = OBSTACLE_COLORS.get(obstacle.kind, Palette.TEXT)

        if obstacle.kind == "camera":
            pygame.draw.rect(surface, color, rect.inflate(0, -16).move(0, -8), border_radius=4)
            pygame.draw.circle(surface, Palette.BACKGROUND, (rect.right - 8, rect.top + 12), 4)
            pygame.draw.line(surface, color, (rect.centerx, rect.centery), (rect.centerx, rect.bottom), 4)
        elif obstacle.kind == "pursuer":
            pygame.draw.circle(surface, color, (rect.centerx, rect.top + 8), 8)
            pygame.draw.rect(surface, color, (rect.x + 6, rect.top + 16, rect.width - 12, rect.height - 16))
        else:
            for i in range(3):
                band = pygame.Rect(rect.x, rect.y + i * rect.height // 3, rect.width, rect.height // 3 - 2)
                pygame.draw.rect(surface, color, band, border_radius=2)

    def _draw_power_up(self, surface, power_up):
        if power_up.collected:
            return
        rect = pygame.Rect(int(power_up.x), int(power_up.y), power_up.width, power_up.height)
        pygame.draw.rect(surface, Palette.GOLD, rect.inflate(4, 4), 2)
        pygame.draw.ellipse(surface, Palette.HAT, rect.inflate(-4, -12).move(0, -2))
        pygame.draw.rect(surface, Palette.HAT, (rect.x + 2, rect.centery + 2, rect.width - 4, 4))

    def _draw_particles(self, surface, particles):
        size = Particles.SIZE
        for particle in particles:
            alpha = int(255 * particle.fade)
            dot = pygame.Surface((size, size), pygame.SRCALPHA)
            dot.fill((*Palette.GOLD, alpha))
            surface.blit(dot, (int(particle.x), int(particle.y)))

    # ===========================================================
    # HUD & Overlays
    # ===========================================================

    def _draw_hud(self, surface, snapshot):
        font = self._font(20)
        surface.blit(font.render(f"Score: {snapshot.score}", True, Palette.TEXT), (20, 40))
        surface.blit(font.render(f"High: {snapshot.high_score}", True, Palette.TEXT), (20, 70))
        if snapshot.actor.shielded:
            surface.blit(font.render("SHIELDED! 2X SCORE", True, Palette.GOLD), (20, 100))

    def _overlay_surface(self):
        if self._overlay is None:
            self._overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
            self._overlay.fill(Palette.OVERLAY)
        return self._overlay

    def _blit_centered(self, surface, text, size, y, color=Palette.TEXT):
        rendered = self._font(size).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(self.width // 2, y)))

    def _draw_menu(self, surface, snapshot):
        surface.blit(self._overlay_surface(), (0, 0))
        self._blit_centered(surface, "Goose Runner", 40, 120)
        self._blit_centered(surface, "Jump over cameras, farmers and ledgers.", 18, 180)
        self._blit_centered(surface, "Collect hats for a shield and 2x score!", 18, 205)
        self._blit_centered(surface, "Press SPACE or tap to start", 18, 260, Palette.SUBTLE)

    def _draw_game_over(self, surface, snapshot):
        surface.blit(self._overlay_surface(), (0, 0))
        self._blit_centered(surface, "Game Over!", 40, 120)
        self._blit_centered(surface, f"Score: {snapshot.score}", 24, 180)
        self._blit_centered(surface, f"High Score: {snapshot.high_score}", 20, 215, Palette.SUBTLE)
        self._blit_centered(surface, "Press SPACE or tap to restart", 18, 270, Palette.SUBTLE)
