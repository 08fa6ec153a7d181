"""
rigging/scenes/fixed_pulley.py
==============================
A single fixed pulley redirecting the rope down to the load.

          [pulley]
          /      \\
         /        \\
    input          load
    (free end)     (100 kg)

Path: input -> pulley (wrap = pi) -> load

Only the last segment touches the load, so the ideal mechanical advantage
is 1: the pulley changes the direction of the force, not its magnitude.
"""

import math

from core.models import FixedAnchor, LoadAnchor, PulleyAnchor, RopeLoad, RopePass, RopeScene

DEFAULT_MASS = 100.0  # kg


def build(mass: float = DEFAULT_MASS, friction: float = 0.0) -> RopeScene:
    """
    Construct and return the fixed pulley scene.

    Args:
        mass: Load mass in kg.
        friction: Friction coefficient of the pulley.

    Returns:
        RopeScene with 3 anchors and a 3-pass path.
    """
    return RopeScene(
        id="fixed-pulley",
        label="Fixed pulley (MA = 1)",
        anchors=_define_anchors(mass, friction),
        path=_define_path(),
        load=RopeLoad(mass=mass, anchor_ids=["load"])
    )


def _define_anchors(mass: float, friction: float) -> list:
    return [
        FixedAnchor(id="input", label="Free end"),
        PulleyAnchor(
            id="pulley",
            label="Fixed sheave",
            friction_coefficient=friction,
            default_wrap_angle=math.pi
        ),
        LoadAnchor(id="load", label="Load", mass=mass),
    ]


def _define_path() -> list[RopePass]:
    return [
        RopePass(anchor_id="input"),
        RopePass(anchor_id="pulley", wrap_angle=math.pi),
        RopePass(anchor_id="load"),
    ]
