"""
input_manager.py
----------------
Translates pygame events into the two simulation commands.

A single "action" input means start in the menu or after game over, and jump
while playing. Keyboard, left mouse button and touch all map to it.
"""

import pygame

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.commands import Command
from goose_runner.core.runtime.session_state import SessionState


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "action": [pygame.K_SPACE, pygame.K_UP, pygame.K_w],
    "quit": [pygame.K_ESCAPE],
}


class InputManager:
    """
    Maps raw events to Command values.

    Usage:
        for event in pygame.event.get():
            command = input_manager.translate(event, session.state)
            if command is not None:
                driver.submit(command)
        if input_manager.quit_requested:
            running = False
    """

    def __init__(self, key_bindings=None):
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._key_to_action = {
            key: action
            for action, keys in self.key_bindings.items()
            for key in keys
        }
        self.quit_requested = False

    def translate(self, event, state: SessionState):
        """
        Convert one pygame event into a Command, or None if it is not an input
        the simulation cares about.
        """
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return None

        action = None
        if event.type == pygame.KEYDOWN:
            action = self._key_to_action.get(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Touch screens also emit synthetic mouse events; FINGERDOWN covers those
            if getattr(event, "button", 1) == 1 and not getattr(event, "touch", False):
                action = "action"
        elif event.type == pygame.FINGERDOWN:
            action = "action"

        if action == "quit":
            self.quit_requested = True
            DebugLogger.action("Quit requested", category="input")
            return None
        if action != "action":
            return None

        command = Command.JUMP if state is SessionState.PLAYING else Command.START
        DebugLogger.trace(f"Input -> {command.value}", category="input")
        return command
