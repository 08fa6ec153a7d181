"""
solver/segments.py
==================
Walks the rope path and builds per-segment results for an assumed input force.

For the i-th segment (pass i -> pass i+1):

    tension_i    = F_in * m_i
    m_0          = 1
    m_(i+1)      = m_i / f_(i+1)

where f_(i+1) is the capstan factor (solver/friction.py) incurred crossing
into the destination anchor of segment i. Multipliers therefore decay as the
rope is traced from the free end toward the load.

Consumed by solver/equilibrium.py, which calls build_segments() twice:
once with F_in = 1 and once with the solved input force.
"""

from core.exceptions import SceneValidationError
from core.models import RopeScene, SegmentResult
from solver.friction import crossing_factor


def build_segments(scene: RopeScene, assumed_input_force: float) -> list[SegmentResult]:
    """
    Build the ordered list of segment results.

    Args:
        scene: Scene whose path is walked (not modified).
        assumed_input_force: Tension at the free end, N.

    Returns:
        List of len(scene.path) - 1 SegmentResult objects, or an empty
        list if the path has fewer than two passes.

    Raises:
        SceneValidationError: If a pass refers to a missing anchor.
    """
    segments = []
    load_anchors = set(scene.load.anchor_ids)

    multiplier = 1.0
    for index, (current, following) in enumerate(zip(scene.path, scene.path[1:])):
        next_anchor = _resolve_anchor(scene, following.anchor_id)
        factor = crossing_factor(next_anchor, following)

        segments.append(SegmentResult(
            index=index,
            from_anchor_id=current.anchor_id,
            to_anchor_id=following.anchor_id,
            supports_load=(
                current.anchor_id in load_anchors
                or following.anchor_id in load_anchors
            ),
            multiplier=multiplier,
            friction_factor=factor,
            tension=assumed_input_force * multiplier
        ))

        multiplier /= factor

    return segments


def _resolve_anchor(scene: RopeScene, anchor_id: str):
    """
    Retrieve an anchor by ID from the scene.

    Raises:
        SceneValidationError: If anchor_id is not found.
    """
    anchor = scene.find_anchor(anchor_id)
    if anchor is None:
        raise SceneValidationError(f'Unknown anchor: "{anchor_id}".')
    return anchor
