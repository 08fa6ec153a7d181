"""
solver/friction.py
==================
Capstan friction model for a single anchor crossing.

The friction factor for a rope bent over an anchor is:

    f = exp(mu * theta)

where:
    mu    = friction coefficient between rope and anchor
    theta = wrap (contact) angle in radians

f is independent of the tension magnitude. solver/equilibrium.py relies on
this: segment multipliers computed with a unit input force scale linearly
to any other input force.

Effective values are resolved with the precedence
    pass override -> anchor default -> kind default
and are shared by solver/validator.py and solver/segments.py.
"""

import math

import numpy as np

from core.models import Anchor, AnchorKind, RopePass


def friction_factor(wrap_angle: float, friction_coefficient: float) -> float:
    """
    Compute the capstan friction factor for one anchor crossing.

    Args:
        wrap_angle: Effective wrap angle in radians.
        friction_coefficient: Effective friction coefficient (dimensionless).

    Returns:
        exp(mu * theta), or 1.0 (no loss) if either argument is <= 0.
    """
    if wrap_angle <= 0 or friction_coefficient <= 0:
        return 1.0
    return float(np.exp(friction_coefficient * wrap_angle))


def effective_wrap_angle(anchor: Anchor, rope_pass: RopePass) -> float:
    """
    Resolve the wrap angle for one pass over an anchor.

    Args:
        anchor: Anchor the pass refers to.
        rope_pass: The pass, possibly carrying its own override.

    Returns:
        Wrap angle in radians.
    """
    if rope_pass.wrap_angle is not None:
        return rope_pass.wrap_angle
    if anchor.default_wrap_angle is not None:
        return anchor.default_wrap_angle
    return _kind_default_wrap_angle(anchor)


def effective_friction(anchor: Anchor, rope_pass: RopePass) -> float:
    """
    Resolve the friction coefficient for one pass over an anchor.

    Args:
        anchor: Anchor the pass refers to.
        rope_pass: The pass, possibly carrying its own override.

    Returns:
        Friction coefficient, 0.0 if neither pass nor anchor defines one.
    """
    if rope_pass.friction_coefficient is not None:
        return rope_pass.friction_coefficient
    if anchor.friction_coefficient is not None:
        return anchor.friction_coefficient
    return 0.0


def crossing_factor(anchor: Anchor, rope_pass: RopePass) -> float:
    """Friction factor for a pass, using its effective wrap angle and μ."""
    return friction_factor(
        effective_wrap_angle(anchor, rope_pass),
        effective_friction(anchor, rope_pass)
    )


def _kind_default_wrap_angle(anchor: Anchor) -> float:
    """
    Default wrap angle when neither the pass nor the anchor sets one.

    Pulleys default to a half turn (pi). Fixed and load anchors do not
    redirect the rope and default to 0.

    Raises:
        ValueError: If the anchor kind is not handled here.
    """
    if anchor.kind is AnchorKind.PULLEY:
        return math.pi
    elif anchor.kind is AnchorKind.FIXED:
        return 0.0
    elif anchor.kind is AnchorKind.LOAD:
        return 0.0
    raise ValueError(f"Unhandled anchor kind: '{anchor.kind}'.")
