"""
rigging/scenes/block_and_tackle.py
==================================
An n x n block and tackle: n fixed pulleys in the upper block, n movable
pulleys in the lower block, the rope end tied off at the upper block.

Geometry for pairs = 2:

    [top2]  [top1]  tie
      | \\    | \\   |
      |  \\   |  \\  |
    input [bottom2] [bottom1]
               \\       /
                 load

Path: input -> top_n -> bottom_n -> ... -> top_1 -> bottom_1 -> tie

Every segment that starts or ends on a lower-block pulley carries the load,
giving 2n supporting segments and an ideal mechanical advantage of 2n.
"""

import math

from core.models import AnchorKind, FixedAnchor, PulleyAnchor, RopeLoad, RopePass, RopeScene

DEFAULT_MASS = 100.0  # kg


def build(pairs: int = 2, mass: float = DEFAULT_MASS, friction: float = 0.0) -> RopeScene:
    """
    Construct and return an n x n block-and-tackle scene.

    Args:
        pairs: Number of pulleys in each block (n).
        mass: Load mass in kg.
        friction: Friction coefficient applied to every pulley.

    Returns:
        RopeScene with 2n + 2 anchors and a 2n + 2 pass path.

    Raises:
        ValueError: If pairs < 1.
    """
    if pairs < 1:
        raise ValueError(f"A block and tackle needs at least one pulley pair, got {pairs}.")

    anchors = _define_anchors(pairs, friction)
    path = [RopePass(anchor_id=anchor.id, wrap_angle=_pass_wrap(anchor)) for anchor in anchors]

    return RopeScene(
        id=f"block-tackle-{pairs}x{pairs}",
        label=f"Block and tackle {pairs}×{pairs}",
        anchors=anchors,
        path=path,
        load=RopeLoad(mass=mass, anchor_ids=[f"bottom{i}" for i in range(1, pairs + 1)])
    )


def _define_anchors(pairs: int, friction: float) -> list:
    """
    Define anchors in path order: free end, alternating upper/lower
    pulleys from pair n down to pair 1, then the tie-off point.
    """
    anchors = [FixedAnchor(id="input", label="Free end")]
    for i in range(pairs, 0, -1):
        anchors.append(PulleyAnchor(
            id=f"top{i}",
            label=f"Upper sheave {i}",
            friction_coefficient=friction,
            default_wrap_angle=math.pi
        ))
        anchors.append(PulleyAnchor(
            id=f"bottom{i}",
            label=f"Lower sheave {i}",
            friction_coefficient=friction,
            default_wrap_angle=math.pi,
            attached_to_load=True
        ))
    anchors.append(FixedAnchor(id="tie", label="Upper tie-off"))
    return anchors


def _pass_wrap(anchor) -> float | None:
    # Pulleys are wrapped half a turn; fixed anchors keep their default
    return math.pi if anchor.kind is AnchorKind.PULLEY else None
