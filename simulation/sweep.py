"""
simulation/sweep.py
===================
Re-solves one scene over a range of pulley friction coefficients.

Each point applies the same μ to every pulley anchor
(rigging/scenes/variants.py) and solves the resulting scene independently.
Useful for seeing how quickly friction eats into the ideal mechanical
advantage of a rig.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from core.models import RopeScene
from rigging.scenes.variants import with_pulley_friction
from solver.equilibrium import compute_tensions

logger = logging.getLogger(__name__)


@dataclass
class SweepPoint:
    """
    Solver output for one friction coefficient.

    Attributes:
        friction_coefficient (float): μ applied to every pulley.
        input_force (float): Solved force at the free end, N.
        mechanical_advantage (float): load_force / input_force.
    """
    friction_coefficient: float
    input_force: float
    mechanical_advantage: float


def friction_sweep(
    scene: RopeScene,
    coefficients: Iterable[float],
    gravity: float
) -> list[SweepPoint]:
    """
    Solve scene once per friction coefficient.

    Args:
        scene: Base scene (not modified).
        coefficients: Friction coefficients to apply, in order.
        gravity: Gravitational acceleration, m/s².

    Returns:
        One SweepPoint per coefficient, in input order.

    Raises:
        SceneValidationError: If a coefficient is negative, or the base
                              scene is itself invalid.
    """
    points = []
    for mu in coefficients:
        result = compute_tensions(with_pulley_friction(scene, mu), gravity)
        points.append(SweepPoint(
            friction_coefficient=mu,
            input_force=result.input_force,
            mechanical_advantage=result.mechanical_advantage
        ))
        logger.debug("Sweep '%s' mu=%.4g -> MA=%.6g", scene.id, mu, result.mechanical_advantage)
    return points
