"""
main_loop.py
------------
Host loop: one simulation update per displayed frame.

Responsibilities:
- Initialize pygame and the collaborators (input, audio, renderer, storage)
- Translate events into commands for the frame driver
- Update the driver once per frame and draw its snapshot
"""

import random

import pygame

from goose_runner.audio.sound_manager import SoundManager
from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.frame_driver import FrameDriver
from goose_runner.core.runtime.game_settings import Display
from goose_runner.core.runtime.session import Session
from goose_runner.core.services.event_manager import EventManager
from goose_runner.core.services.highscore_store import HighScoreStore
from goose_runner.core.services.input_manager import InputManager
from goose_runner.core.services.settings_manager import SettingsManager
from goose_runner.graphics.renderer import Renderer


class MainLoop:
    """Core runtime controller managing the game's main loop."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, seed=None, muted=False, highscore_file=None, settings_file=None):
        """
        Args:
            seed: Optional seed for spawns and particles.
            muted: Disable audio regardless of saved settings.
            highscore_file: Override for the high score JSON path.
            settings_file: Override for the user settings JSON path.
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()

        self.settings = SettingsManager(settings_file)
        if muted:
            self.settings.set("audio", "muted", True)

        self.events = EventManager()
        self.sound = SoundManager(self.settings)
        self.sound.subscribe(self.events)

        rng = random.Random(seed)
        self.session = Session(
            store=HighScoreStore(highscore_file),
            events=self.events,
            rng=rng,
        )
        self.driver = FrameDriver(self.session)
        self.input_manager = InputManager()
        self.renderer = Renderer(Display.WIDTH, Display.HEIGHT)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub(f"Seed: {seed if seed is not None else 'random'}")

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute main game loop until quit."""
        DebugLogger.section("Game Loop")

        while self.running:
            self.clock.tick(Display.FPS)
            self._handle_events()
            if not self.running:
                break

            snapshot = self.driver.update()
            self.renderer.draw(self.screen, snapshot)
            pygame.display.flip()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            command = self.input_manager.translate(event, self.session.state)
            if command is not None:
                self.driver.submit(command)

        if self.input_manager.quit_requested:
            self.running = False
