"""
session.py
----------
Session state machine: menu -> playing -> gameOver -> playing.

Responsibilities
----------------
- Own the SimulationState and the spawner for the session's lifetime.
- Apply the start and jump commands where they are legal, ignore them elsewhere.
- End the run on collision and settle the high score once per run.
- Publish every transition on the event bus.
"""

import random

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.commands import Command
from goose_runner.core.runtime.game_settings import World
from goose_runner.core.runtime.session_state import SessionState
from goose_runner.core.runtime.session_stats import SessionStats
from goose_runner.core.runtime.simulation_state import SimulationState
from goose_runner.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    HighScoreEvent,
    JumpEvent,
    RunStartedEvent,
)
from goose_runner.core.services.highscore_store import MemoryHighScoreStore
from goose_runner.systems.entity_management.spawn_manager import SpawnManager


class Session:
    """Governs legal command sequencing and score bookkeeping."""

    def __init__(self, store=None, events: EventManager = None, rng: random.Random = None):
        """
        Args:
            store: Persistence collaborator with load_high_score()/save_high_score(int).
                Defaults to an in-memory store.
            events: Event bus for transition notifications.
            rng: Random source shared by the spawner and particle bursts.
        """
        self.store = store if store is not None else MemoryHighScoreStore()
        self.events = events if events is not None else EventManager()
        self.rng = rng if rng is not None else random.Random()

        high_score = self.store.load_high_score()
        self.sim = SimulationState(stats=SessionStats(high_score=high_score))
        self.spawner = SpawnManager(self.rng)
        self.state = SessionState.MENU
        self._run_settled = False

        DebugLogger.init(f"Session ready (high score {high_score})", category="session")

    # ===========================================================
    # Queries
    # ===========================================================
    @property
    def playing(self) -> bool:
        return self.state is SessionState.PLAYING

    @property
    def stats(self) -> SessionStats:
        return self.sim.stats

    # ===========================================================
    # Commands
    # ===========================================================
    def handle(self, command: Command) -> bool:
        """Apply a command. Returns True if it changed anything."""
        if command is Command.START:
            return self.start()
        if command is Command.JUMP:
            return self.jump()
        DebugLogger.warn(f"Ignoring unknown command {command!r}", category="input")
        return False

    def start(self) -> bool:
        """Begin a fresh run from menu or gameOver. Ignored while playing."""
        if self.state is SessionState.PLAYING:
            return False

        previous = self.state
        self.sim.reset()
        self.spawner.reset()
        self.state = SessionState.PLAYING
        self._run_settled = False

        DebugLogger.state(f"{previous.value} -> {self.state.value}")
        self.events.dispatch(RunStartedEvent(high_score=self.stats.high_score))
        return True

    def jump(self) -> bool:
        """Launch the actor. Only while playing and grounded; no double jump."""
        actor = self.sim.actor
        if self.state is not SessionState.PLAYING or actor.airborne:
            return False

        actor.velocity_y = World.JUMP_VELOCITY
        actor.airborne = True
        self.stats.add_jump()

        DebugLogger.trace(f"Jump at frame {self.sim.frame_count}", category="input")
        self.events.dispatch(JumpEvent(position=(actor.x, actor.y)))
        return True

    # ===========================================================
    # Run Termination
    # ===========================================================
    def end_run(self, obstacle) -> bool:
        """Collision outcome: playing -> gameOver. Later hits in the same tick are ignored."""
        if self.state is not SessionState.PLAYING:
            return False

        self.state = SessionState.GAME_OVER
        kind = obstacle.kind.value if obstacle is not None else "unknown"

        DebugLogger.state(
            f"playing -> {self.state.value} (hit {kind} at frame {self.sim.frame_count})"
        )
        self.events.dispatch(GameOverEvent(obstacle_kind=kind, frame=self.sim.frame_count))
        return True

    def settle_run(self) -> bool:
        """
        Record and persist a new best once the terminating tick has finished.
        Saves at most once per run. Returns True if a new high score was saved.
        """
        if self.state is not SessionState.GAME_OVER or self._run_settled:
            return False
        self._run_settled = True

        if not self.stats.commit_high_score():
            DebugLogger.system(f"Run over: score {self.stats.score}", category="session")
            return False

        high_score = self.stats.high_score
        self.store.save_high_score(high_score)
        DebugLogger.action(f"New high score: {high_score}", category="session")
        self.events.dispatch(HighScoreEvent(high_score=high_score))
        return True
