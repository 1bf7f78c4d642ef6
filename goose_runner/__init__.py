"""
Goose Runner
------------
Side-scrolling arcade runner: jump over obstacles, collect hats for a shield,
and chase the high score.
"""

__version__ = "1.0.0"
