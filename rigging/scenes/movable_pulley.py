"""
rigging/scenes/movable_pulley.py
================================
A single movable pulley hanging on the rope, carrying the load.

    input              support
    (free end)         (fixed)
        \\               /
         \\             /
          [moving pulley]
                |
              load (100 kg)

Path: input -> moving (wrap = pi) -> support

Both segments end on the moving pulley, which is attached to the load,
so the load hangs from two rope segments: ideal mechanical advantage 2.
"""

import math

from core.models import FixedAnchor, PulleyAnchor, RopeLoad, RopePass, RopeScene

DEFAULT_MASS = 100.0  # kg


def build(mass: float = DEFAULT_MASS, friction: float = 0.0) -> RopeScene:
    """
    Construct and return the movable pulley scene.

    Args:
        mass: Load mass in kg.
        friction: Friction coefficient of the pulley.

    Returns:
        RopeScene with 3 anchors and a 3-pass path.
    """
    anchors = [
        FixedAnchor(id="input", label="Free end"),
        PulleyAnchor(
            id="moving",
            label="Movable sheave",
            friction_coefficient=friction,
            default_wrap_angle=math.pi,
            attached_to_load=True
        ),
        FixedAnchor(id="support", label="Fixed support"),
    ]
    path = [
        RopePass(anchor_id="input"),
        RopePass(anchor_id="moving", wrap_angle=math.pi),
        RopePass(anchor_id="support"),
    ]
    return RopeScene(
        id="movable-pulley",
        label="Movable pulley (MA = 2)",
        anchors=anchors,
        path=path,
        load=RopeLoad(mass=mass, anchor_ids=["moving"])
    )
