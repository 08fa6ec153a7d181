"""
core/models.py
==============
Shared data contracts for the rope statics solver.

Every module in this project communicates exclusively through these dataclasses.
Scene types (anchors, passes, load, scene) are produced by the reference scenes
in rigging/scenes/ or by rigging/loader.py and consumed by solver/. Result types
(SegmentResult, TensionResult) are produced by solver/ and consumed by the
simulation layer and the CLI.

Scene types are frozen: a scene is treated as read-only for the duration of a
solve, and variants are derived with dataclasses.replace().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


# ---------------------------------------------------------------------------
# Anchors
# ---------------------------------------------------------------------------

class AnchorKind(str, Enum):
    """Discriminator for the three anchor variants."""
    FIXED = "fixed"
    PULLEY = "pulley"
    LOAD = "load"


@dataclass(frozen=True, kw_only=True)
class FixedAnchor:
    """
    A rigid anchorage: a tie point, a wall hook, the free end of the rope.

    Attributes:
        id (str): Unique identifier within the scene.
        label (Optional[str]): Human-readable name.
        friction_coefficient (Optional[float]): Default μ for every pass
                                                through this anchor.
        default_wrap_angle (Optional[float]): Default wrap angle in radians.
                                              Falls back to 0 for fixed anchors.
    """
    id: str
    label: Optional[str] = None
    friction_coefficient: Optional[float] = None
    default_wrap_angle: Optional[float] = None
    kind: AnchorKind = field(default=AnchorKind.FIXED, init=False)


@dataclass(frozen=True, kw_only=True)
class PulleyAnchor:
    """
    A sheave the rope is redirected over.

    Attributes:
        id (str): Unique identifier within the scene.
        label (Optional[str]): Human-readable name.
        friction_coefficient (Optional[float]): Default μ for every pass
                                                over this pulley.
        default_wrap_angle (Optional[float]): Default wrap angle in radians.
                                              Falls back to π (half a turn).
        attached_to_load (bool): True if the pulley body moves with the load
                                 (a movable pulley).
    """
    id: str
    label: Optional[str] = None
    friction_coefficient: Optional[float] = None
    default_wrap_angle: Optional[float] = None
    attached_to_load: bool = False
    kind: AnchorKind = field(default=AnchorKind.PULLEY, init=False)


@dataclass(frozen=True, kw_only=True)
class LoadAnchor:
    """
    Terminal anchor where the rope is tied directly to the load.

    Attributes:
        id (str): Unique identifier within the scene.
        mass (float): Mass of the load in kg.
        label (Optional[str]): Human-readable name.
        friction_coefficient (Optional[float]): Default μ, rarely relevant.
        default_wrap_angle (Optional[float]): Default wrap angle in radians.
                                              Falls back to 0 for load anchors.
    """
    id: str
    mass: float
    label: Optional[str] = None
    friction_coefficient: Optional[float] = None
    default_wrap_angle: Optional[float] = None
    kind: AnchorKind = field(default=AnchorKind.LOAD, init=False)


Anchor = Union[FixedAnchor, PulleyAnchor, LoadAnchor]


# ---------------------------------------------------------------------------
# Scene
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RopePass:
    """
    One stop of the rope path at a given anchor.

    Overrides set here take precedence over the anchor's own defaults
    for this traversal only.

    Attributes:
        anchor_id (str): ID of the anchor the rope passes through.
        wrap_angle (Optional[float]): Contact angle in radians for this pass.
        friction_coefficient (Optional[float]): μ for this pass.
        label (Optional[str]): Human-readable note for this stop.
    """
    anchor_id: str
    wrap_angle: Optional[float] = None
    friction_coefficient: Optional[float] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class RopeLoad:
    """
    The suspended load.

    Attributes:
        mass (float): Mass in kg. Must be positive.
        anchor_ids (List[str]): Anchors rigidly attached to (moving with) the load.
    """
    mass: float
    anchor_ids: List[str]


@dataclass(frozen=True)
class RopeScene:
    """
    Complete definition of a rope scene, as exported by every scene module.

    This is the single input contract for the validator and the solver.
    Every file in rigging/scenes/ must return an instance of this class
    from its build() function.

    Attributes:
        id (str): Scene identifier (copied into results).
        anchors (List[Anchor]): Every anchor in the scene. IDs must be unique.
        path (List[RopePass]): Rope route. path[0] is the free (input) end.
        load (RopeLoad): Load mass and the anchors coupled to it.
        label (Optional[str]): Human-readable name for reports.
    """
    id: str
    anchors: List[Anchor]
    path: List[RopePass]
    load: RopeLoad
    label: Optional[str] = None

    def find_anchor(self, anchor_id: str) -> Optional[Anchor]:
        """Return the first anchor with the given ID, or None."""
        for anchor in self.anchors:
            if anchor.id == anchor_id:
                return anchor
        return None


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@dataclass
class SceneValidation:
    """
    Outcome of solver/validator.py.

    Attributes:
        errors (List[str]): Problems that make the scene unsolvable.
        warnings (List[str]): Non-fatal observations (unused anchors,
                              unusually large wrap angles).
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if the validator reported no errors."""
        return not self.errors


# ---------------------------------------------------------------------------
# Solver Output
# ---------------------------------------------------------------------------

@dataclass
class SegmentResult:
    """
    State of a single rope segment between two consecutive passes.

    Produced by solver/segments.py.

    Attributes:
        index (int): Position of the segment along the path (0 = free end).
        from_anchor_id (str): Anchor at the start of the segment.
        to_anchor_id (str): Anchor at the end of the segment.
        supports_load (bool): True if either endpoint is coupled to the load.
        multiplier (float): Segment tension relative to the input tension.
        friction_factor (float): Capstan factor incurred crossing into
                                 to_anchor_id (1.0 = no loss).
        tension (float): Tension magnitude in Newtons.
    """
    index: int
    from_anchor_id: str
    to_anchor_id: str
    supports_load: bool
    multiplier: float
    friction_factor: float
    tension: float


@dataclass
class TensionResult:
    """
    Complete output of an equilibrium solve, passed to reports and the CLI.

    Attributes:
        scene_id (str): ID of the scene that was solved.
        gravity (float): Gravitational acceleration used, m/s².
        load_force (float): Weight of the load, N.
        input_force (float): Force required at the free end, N.
        mechanical_advantage (float): load_force / input_force.
        n_support_segments (int): Number of load-bearing segments.
        segments (List[SegmentResult]): Per-segment results in path order.
        validation (SceneValidation): Validator outcome (warnings only).
    """
    scene_id: str
    gravity: float
    load_force: float
    input_force: float
    mechanical_advantage: float
    n_support_segments: int
    segments: List[SegmentResult]
    validation: SceneValidation
