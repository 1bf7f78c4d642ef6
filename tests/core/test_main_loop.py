"""
test_main_loop.py
-----------------
Tests for the host loop wiring and the command-line entry point.

pygame display calls are mocked; input events are real pygame events.
"""

from unittest.mock import patch

import pygame
import pytest

from goose_runner.__main__ import main, parse_args
from goose_runner.core.runtime.main_loop import MainLoop
from goose_runner.core.runtime.session_state import SessionState


@pytest.fixture
def main_loop(tmp_path):
    with patch("goose_runner.core.runtime.main_loop.pygame") as mock_pg:
        loop = MainLoop(
            seed=3,
            muted=True,
            highscore_file=tmp_path / "hs.json",
            settings_file=tmp_path / "settings.json",
        )
        yield loop, mock_pg


class TestMainLoop:

    def test_wires_collaborators(self, main_loop):
        loop, mock_pg = main_loop
        mock_pg.display.set_mode.assert_called_once_with((800, 400))
        assert loop.session.state is SessionState.MENU
        assert loop.sound.muted
        assert loop.driver.session is loop.session

    def test_action_key_queues_start(self, main_loop):
        loop, mock_pg = main_loop
        mock_pg.event.get.return_value = [
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        ]
        loop._handle_events()

        snapshot = loop.driver.update()
        assert snapshot.state is SessionState.PLAYING
        assert loop.running

    def test_quit_event_stops_loop(self, main_loop):
        loop, mock_pg = main_loop
        mock_pg.event.get.return_value = [pygame.event.Event(pygame.QUIT)]
        loop._handle_events()
        assert not loop.running

    def test_run_exits_when_quit_seen(self, main_loop):
        loop, mock_pg = main_loop
        mock_pg.event.get.return_value = [pygame.event.Event(pygame.QUIT)]
        loop.run()
        mock_pg.quit.assert_called_once()


class TestEntryPoint:

    def test_parse_args(self):
        args = parse_args(["--seed", "7", "--mute", "--highscore-file", "hs.json"])
        assert args.seed == 7
        assert args.mute
        assert args.highscore_file == "hs.json"
        assert args.settings_file is None

    def test_main_builds_and_runs_loop(self):
        with patch("goose_runner.__main__.MainLoop") as mock_loop:
            main(["--mute"])
        mock_loop.assert_called_once_with(
            seed=None, muted=True, highscore_file=None, settings_file=None
        )
        mock_loop.return_value.run.assert_called_once()
