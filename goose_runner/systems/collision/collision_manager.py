"""
collision_manager.py
--------------------
Axis-aligned box overlap tests between the actor and scrolling entities.

Responsibilities
----------------
- Provide the strict AABB predicate shared by every collision check.
- Decide whether an obstacle hit counts (ignored while shielded).
- Decide whether a power-up is collected (always tested).

The manager only detects. Outcomes (ending the run, granting the shield) are
applied by the physics engine and the session.
"""

from goose_runner.core.debug.debug_logger import DebugLogger


def boxes_overlap(a, b) -> bool:
    """
    True iff the x-ranges and y-ranges of two boxes both intersect.

    All four comparisons are strict, so boxes that only share an edge do not
    collide. Works with any object exposing x, y, width, height.
    """
    return (
        a.x < b.x + b.width and
        a.x + a.width > b.x and
        a.y < b.y + b.height and
        a.y + a.height > b.y
    )


class CollisionManager:
    """Detects actor collisions but lets the engine decide what happens."""

    def obstacle_hit(self, actor, obstacle) -> bool:
        """An obstacle only counts against an unshielded actor."""
        if actor.shielded:
            return False
        if boxes_overlap(actor, obstacle):
            DebugLogger.trace(
                f"Actor hit {obstacle.kind.value} at ({obstacle.x:.1f}, {obstacle.y:.1f})"
            )
            return True
        return False

    def power_up_collected(self, actor, power_up) -> bool:
        if power_up.collected:
            return False
        return boxes_overlap(actor, power_up)
