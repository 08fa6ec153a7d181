"""
solver/validator.py
===================
Structural validation of a RopeScene.

validate_scene() inspects a scene and returns a SceneValidation with every
problem found. It never raises and never modifies the scene; deciding what
to do with the errors is left to the caller (solver/equilibrium.py turns
them into a single SceneValidationError).

Checks, in order:
  1. Path has at least two passes (fatal, returns early)
  2. Anchor IDs are non-empty and unique
  3. Every pass refers to an existing anchor
  4. Effective wrap angle finite and >= 0 (error), <= 2*pi (warning otherwise)
  5. Effective friction coefficient finite and >= 0
  6. Load is attached to at least one anchor, and all of them exist
  7. Load mass finite and > 0
  8. At least one segment is coupled to the load
  9. Unused anchors (warning)
 10. Pulleys flagged as attached to the load but not listed in it (warning)
"""

import math
from collections import Counter

from core.models import AnchorKind, RopeScene, SceneValidation
from solver.friction import effective_friction, effective_wrap_angle

TWO_PI = 2 * math.pi


def validate_scene(scene: RopeScene) -> SceneValidation:
    """
    Validate a rope scene.

    Args:
        scene: Scene to inspect (not modified).

    Returns:
        SceneValidation with accumulated errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not scene.path or len(scene.path) < 2:
        errors.append("The rope path must contain at least two passes.")
        return SceneValidation(errors=errors, warnings=warnings)

    errors.extend(_check_anchor_ids(scene))

    anchor_map = {}
    for anchor in scene.anchors:
        anchor_map.setdefault(anchor.id, anchor)

    for index, rope_pass in enumerate(scene.path):
        anchor = anchor_map.get(rope_pass.anchor_id)
        if anchor is None:
            errors.append(
                f'Anchor "{rope_pass.anchor_id}" referenced at pass {index} does not exist.'
            )
            continue

        wrap = effective_wrap_angle(anchor, rope_pass)
        if not math.isfinite(wrap):
            errors.append(f"Wrap angle must be a finite number (pass {index}).")
        elif wrap < 0:
            errors.append(f"Wrap angle cannot be negative (pass {index}).")
        elif wrap > TWO_PI:
            warnings.append(f"Wrap angle greater than 2π at pass {index}.")

        friction = effective_friction(anchor, rope_pass)
        if not math.isfinite(friction):
            errors.append(f"Friction coefficient must be a finite number (pass {index}).")
        elif friction < 0:
            errors.append(f"Friction coefficient cannot be negative (pass {index}).")

    load_anchors = set(scene.load.anchor_ids)
    if not load_anchors:
        errors.append("The load must be attached to at least one anchor.")

    # each missing id is reported once, in order of first appearance
    for anchor_id in dict.fromkeys(scene.load.anchor_ids):
        if anchor_id not in anchor_map:
            errors.append(f'Load is attached to a missing anchor: "{anchor_id}".')

    if not math.isfinite(scene.load.mass):
        errors.append("The load mass must be a finite number.")
    elif scene.load.mass <= 0:
        errors.append("The load mass must be positive.")

    if not _has_load_segment(scene, load_anchors):
        errors.append("No rope segment is coupled to the load.")

    unused = _find_unused_anchors(scene)
    if unused:
        warnings.append(f"Unused anchors in the scene: {', '.join(unused)}.")

    for anchor in scene.anchors:
        if (anchor.kind is AnchorKind.PULLEY
                and anchor.attached_to_load
                and anchor.id not in load_anchors):
            warnings.append(
                f'Pulley "{anchor.id}" is marked as attached to the load '
                f"but is not listed among the load's anchors."
            )

    return SceneValidation(errors=errors, warnings=warnings)


def _check_anchor_ids(scene: RopeScene) -> list[str]:
    """Report empty and duplicated anchor identifiers."""
    errors = []
    for position, anchor in enumerate(scene.anchors):
        if not anchor.id:
            errors.append(f"Anchor at position {position} has an empty identifier.")

    counts = Counter(anchor.id for anchor in scene.anchors if anchor.id)
    for anchor_id, count in counts.items():
        if count > 1:
            errors.append(f'Anchor identifier "{anchor_id}" is used {count} times.')
    return errors


def _has_load_segment(scene: RopeScene, load_anchors: set[str]) -> bool:
    """True if any consecutive pair of passes touches a load anchor."""
    for current, following in zip(scene.path, scene.path[1:]):
        if current.anchor_id in load_anchors or following.anchor_id in load_anchors:
            return True
    return False


def _find_unused_anchors(scene: RopeScene) -> list[str]:
    """Return IDs of anchors never referenced by the path, in scene order."""
    used = {rope_pass.anchor_id for rope_pass in scene.path}
    return [anchor.id for anchor in scene.anchors if anchor.id not in used]
