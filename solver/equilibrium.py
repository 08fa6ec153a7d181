"""
solver/equilibrium.py
=====================
Solves the static equilibrium of a load hanging from a rope path.

The input force F_in must satisfy:

    F_in * sum(m_i for load-bearing segments i) = m * g

The multipliers m_i depend only on wrap angles and friction coefficients,
never on the tension magnitude (see solver/friction.py). So one pass of the
segment builder with F_in = 1 gives every m_i, the equation above is solved
in closed form, and a second pass with the solved F_in gives the true
tensions. No iteration is needed.

Procedure:
  1. Validate the scene (solver/validator.py), abort on any error
  2. Load force = mass * gravity
  3. Unit-force segment pass
  4. Sum multipliers of load-bearing segments -> S
  5. F_in = load_force / S
  6. Final segment pass with F_in
  7. Mechanical advantage = load_force / F_in
"""

import logging
import math

import numpy as np

from core.exceptions import EquilibriumError, SceneValidationError
from core.models import RopeScene, TensionResult
from solver.segments import build_segments
from solver.validator import validate_scene

logger = logging.getLogger(__name__)


def compute_tensions(scene: RopeScene, gravity: float) -> TensionResult:
    """
    Solve for the input force and every segment tension of a rope scene.

    Args:
        scene: Scene to solve (not modified).
        gravity: Gravitational acceleration in m/s². Must be positive.

    Returns:
        TensionResult with forces, mechanical advantage, per-segment results
        and the validator warnings.

    Raises:
        ValueError: If gravity is not a positive finite number.
        SceneValidationError: If the validator reports any error.
        EquilibriumError: If no segment carries the load or the load-bearing
                          multipliers do not sum to a positive value.
    """
    _check_gravity(gravity)

    validation = validate_scene(scene)
    if not validation.ok:
        raise SceneValidationError.from_validation(validation)

    for warning in validation.warnings:
        logger.warning("Scene '%s': %s", scene.id, warning)

    load_force = scene.load.mass * gravity

    # --- Unit-force pass: multipliers only ---
    unit_segments = build_segments(scene, 1.0)
    supporting = [segment for segment in unit_segments if segment.supports_load]
    if not supporting:
        raise EquilibriumError("No rope segment coupled to the load was found.")

    multiplier_sum = float(np.sum([segment.multiplier for segment in supporting]))
    logger.debug(
        "Scene '%s': %d load-bearing segments, multiplier sum %.6g",
        scene.id, len(supporting), multiplier_sum
    )

    if multiplier_sum <= 0:
        raise EquilibriumError("Cannot balance the load with the current configuration.")

    input_force = load_force / multiplier_sum

    # --- Final pass: true tensions ---
    segments = build_segments(scene, input_force)
    mechanical_advantage = load_force / input_force

    logger.debug(
        "Scene '%s': input force %.6g N, mechanical advantage %.6g",
        scene.id, input_force, mechanical_advantage
    )

    return TensionResult(
        scene_id=scene.id,
        gravity=gravity,
        load_force=load_force,
        input_force=input_force,
        mechanical_advantage=mechanical_advantage,
        n_support_segments=len(supporting),
        segments=segments,
        validation=validation
    )


def compute_input_force(scene: RopeScene, gravity: float) -> float:
    """
    Return only the force required at the free end.

    Same arguments and errors as compute_tensions().
    """
    return compute_tensions(scene, gravity).input_force


def _check_gravity(gravity: float) -> None:
    """Raise ValueError unless gravity is a positive finite number."""
    if not math.isfinite(gravity) or gravity <= 0:
        raise ValueError(f"Gravity must be a positive finite number, got {gravity!r}.")
