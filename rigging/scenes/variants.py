"""
rigging/scenes/variants.py
==========================
Derive modified copies of an existing scene without touching the original.
"""

import dataclasses

from core.models import AnchorKind, RopeScene


def with_pulley_friction(scene: RopeScene, friction: float) -> RopeScene:
    """
    Return a copy of scene with every pulley's friction coefficient replaced.

    Pass-level overrides are left as they are and still take precedence.

    Args:
        scene: Source scene (not modified).
        friction: New friction coefficient for all pulley anchors.

    Returns:
        New RopeScene sharing the path and load of the source.
    """
    anchors = [
        dataclasses.replace(anchor, friction_coefficient=friction)
        if anchor.kind is AnchorKind.PULLEY else anchor
        for anchor in scene.anchors
    ]
    return dataclasses.replace(scene, anchors=anchors)
