"""
game_settings.py
----------------
Centralized constants for all game systems.

Gravity, jump impulse and scroll speed are expressed per frame tick (one
simulation step per rendered frame). Shield duration is wall-clock time in
milliseconds.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 400
    FPS: int = 60
    CAPTION: str = "Goose Runner"


# ===========================================================
# World & Physics
# ===========================================================

class World:
    """Ground line, gravity and scroll speed."""
    GROUND_Y: int = 300
    GRAVITY: float = 0.6
    JUMP_VELOCITY: float = -12.0
    BASE_SPEED: float = 4.0
    SPEED_RAMP_FRAMES: float = 3600.0   # +1 px/frame per this many frames, uncapped


# ===========================================================
# Actor Defaults
# ===========================================================

class ActorDefaults:
    """Initial pose of the goose."""
    X: float = 100.0
    WIDTH: int = 50
    HEIGHT: int = 50


# ===========================================================
# Spawning
# ===========================================================

class Spawning:
    """Per-tick spawn probabilities, cooldowns (frames) and vertical offsets."""
    OBSTACLE_RATE: float = 0.01
    POWERUP_RATE: float = 0.003
    OBSTACLE_COOLDOWN: int = 120
    POWERUP_COOLDOWN: int = 300
    OBSTACLE_OFFSET_Y: int = 40
    POWERUP_OFFSET_Y: int = 80


class ObstacleSizes:
    """Fixed (width, height) per obstacle kind."""
    CAMERA: tuple = (35, 40)
    PURSUER: tuple = (35, 40)
    LEDGER: tuple = (30, 35)


# ===========================================================
# Power-ups & Scoring
# ===========================================================

class PowerUps:
    """Shield hat pickup."""
    WIDTH: int = 30
    HEIGHT: int = 30
    SHIELD_DURATION_MS: int = 5000


class Scoring:
    """Raw points per tick and display scaling."""
    BASE_MULTIPLIER: int = 1
    SHIELDED_MULTIPLIER: int = 2
    DISPLAY_DIVISOR: int = 10


# ===========================================================
# Particles
# ===========================================================

class Particles:
    """Collection burst parameters (life in frame ticks)."""
    BURST_COUNT: int = 5
    LIFE: int = 30
    SPREAD: float = 20.0
    SPEED: float = 4.0
    SIZE: int = 3


# ===========================================================
# Audio
# ===========================================================

class Tones:
    """Synthesized tone parameters: (frequency Hz, duration s, waveform, sweep ratio)."""
    JUMP: tuple = (300.0, 0.2, "sawtooth", 0.7)
    POWERUP: tuple = (400.0, 0.3, "sine", 2.0)
    HIT: tuple = (200.0, 0.5, "square", 0.3)

    SAMPLE_RATE: int = 22050
    GAIN_START: float = 0.1
    GAIN_END: float = 0.01


# ===========================================================
# Storage
# ===========================================================

class Storage:
    """Persistent files written next to the working directory."""
    HIGHSCORE_FILE: str = "highscore.json"
    HIGHSCORE_KEY: str = "gooseRunnerHighScore"
    SETTINGS_FILE: str = "settings.json"


# ===========================================================
# Colors (RGB)
# ===========================================================

class Palette:
    """Renderer colors."""
    BACKGROUND = (247, 247, 247)
    GROUND = (204, 204, 204)
    TEXT = (0, 0, 0)
    GOLD = (255, 215, 0)
    GOOSE = (240, 240, 240)
    GOOSE_OUTLINE = (60, 60, 60)
    BEAK = (255, 150, 40)
    CAMERA = (70, 70, 90)
    PURSUER = (140, 90, 50)
    LEDGER = (40, 90, 160)
    HAT = (220, 60, 60)
    OVERLAY = (255, 255, 255, 230)
    SUBTLE = (110, 110, 110)
