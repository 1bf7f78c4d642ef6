"""
commands.py
-----------
The two abstract commands the simulation accepts from input collaborators.
"""

from enum import Enum


class Command(Enum):
    START = "start"
    JUMP = "jump"
