"""
sound_manager.py
----------------
Synthesized tone feedback for jump, power-up and game-over.

Tones are generated once with numpy (frequency sweep, waveform, decaying
gain) and played through pygame's mixer. Audio is optional: if the mixer
cannot start or a sound fails to build or play, the failure is logged and the
game carries on.
"""

import numpy as np
import pygame

from goose_runner.core.debug.debug_logger import DebugLogger
from goose_runner.core.runtime.game_settings import Tones
from goose_runner.core.services.event_manager import (
    GameOverEvent,
    JumpEvent,
    PowerUpCollectedEvent,
)

TONE_PRESETS = {
    "jump": Tones.JUMP,
    "powerup": Tones.POWERUP,
    "hit": Tones.HIT,
}

AUDIO_ERRORS = (pygame.error, ValueError, TypeError, OSError)


# ===========================================================
# Synthesis
# ===========================================================

def synthesize_tone(frequency, duration, waveform="sine", sweep=1.0,
                    sample_rate=Tones.SAMPLE_RATE, volume=1.0):
    """
    Build a mono float32 tone. Peak amplitude is GAIN_START * volume.

    Args:
        frequency: Start frequency in Hz.
        duration: Length in seconds.
        waveform: "sine", "square" or "sawtooth".
        sweep: End frequency as a ratio of the start (exponential ramp).
        sample_rate: Samples per second.
        volume: Linear scale applied on top of the gain envelope.
    """
    samples = int(sample_rate * duration)
    if samples <= 0:
        return np.zeros(1, dtype=np.float32)

    t = np.linspace(0, duration, samples, endpoint=False)

    # Phase of an exponential sweep f(t) = f0 * sweep ** (t / d)
    if abs(sweep - 1.0) < 1e-9:
        phase = 2 * np.pi * frequency * t
    else:
        k = np.log(sweep) / duration
        phase = 2 * np.pi * frequency * (np.exp(k * t) - 1.0) / k

    if waveform == "square":
        wave = np.sign(np.sin(phase))
    elif waveform == "sawtooth":
        cycles = phase / (2 * np.pi)
        wave = 2.0 * (cycles - np.floor(cycles)) - 1.0
    else:
        wave = np.sin(phase)

    # Exponential gain ramp from GAIN_START to GAIN_END
    envelope = Tones.GAIN_START * (Tones.GAIN_END / Tones.GAIN_START) ** (t / duration)
    return (wave * envelope * volume).astype(np.float32)


def _to_mixer_array(wave, channels):
    """Convert a float wave to the int16 layout the mixer expects."""
    pcm = np.ascontiguousarray((np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16))
    if channels > 1:
        pcm = np.ascontiguousarray(np.repeat(pcm[:, np.newaxis], channels, axis=1))
    return pcm


# ===========================================================
# Sound Manager
# ===========================================================

class SoundManager:
    """Audio collaborator. Never raises into the simulation."""

    def __init__(self, settings=None):
        """
        Args:
            settings: Optional SettingsManager providing audio.master_volume
                (0-100) and audio.muted.
        """
        self.sounds = {}
        self.master_level = 100
        self.muted = False
        if settings is not None:
            self.master_level = settings.get("audio", "master_volume", 100)
            self.muted = settings.get("audio", "muted", False)

        self.available = False
        self._channels = 1
        self._sample_rate = Tones.SAMPLE_RATE

        if not self.muted:
            self._init_mixer()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=Tones.SAMPLE_RATE, size=-16, channels=1)
            frequency, _size, channels = pygame.mixer.get_init()
            self._sample_rate = frequency
            self._channels = channels
            self.available = True
            DebugLogger.init(f"Mixer ready ({frequency} Hz, {channels} ch)", category="audio")
        except AUDIO_ERRORS as e:
            self.available = False
            DebugLogger.warn(f"Audio unavailable: {e}", category="audio")

    # ===========================================================
    # Volume
    # ===========================================================
    @staticmethod
    def volume_scale(level):
        """Log-like volume curve for a 0-100 level."""
        if level <= 0:
            return 0.0
        return min(max((level / 100) ** 2, 0.0), 1.0)

    # ===========================================================
    # Playback
    # ===========================================================
    def play_tone(self, category: str) -> bool:
        """
        Play the tone for a category ("jump", "powerup", "hit").
        Returns True if playback started. Failures are logged, never raised.
        """
        if self.muted or not self.available:
            return False

        try:
            sound = self.sounds.get(category)
            if sound is None:
                sound = self._build_sound(category)
                self.sounds[category] = sound
            sound.play()
            return True
        except (KeyError, *AUDIO_ERRORS) as e:
            DebugLogger.warn(f"Failed to play '{category}': {e}", category="audio")
            return False

    def _build_sound(self, category):
        frequency, duration, waveform, sweep = TONE_PRESETS[category]
        wave = synthesize_tone(
            frequency, duration, waveform, sweep,
            sample_rate=self._sample_rate,
            volume=self.volume_scale(self.master_level),
        )
        return pygame.sndarray.make_sound(_to_mixer_array(wave, self._channels))

    # ===========================================================
    # Event Wiring
    # ===========================================================
    def subscribe(self, events):
        """Hook tone playback onto simulation events."""
        events.subscribe(JumpEvent, self._on_jump)
        events.subscribe(PowerUpCollectedEvent, self._on_power_up)
        events.subscribe(GameOverEvent, self._on_game_over)

    def _on_jump(self, event):
        self.play_tone("jump")

    def _on_power_up(self, event):
        self.play_tone("powerup")

    def _on_game_over(self, event):
        self.play_tone("hit")
