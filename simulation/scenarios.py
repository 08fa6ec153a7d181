"""
simulation/scenarios.py
=======================
Predefined rope scenarios for quick testing and validation.

Each scenario builds a reference scene, solves it, and returns a
TensionResult. New scenarios can be added by following the same
pattern: one function per scenario, all returning TensionResult.

To add a new scenario:
  1. Add a scene file to rigging/scenes/
  2. Define a function here that calls compute_tensions() with desired config
  3. Register it in SCENARIOS dict at the bottom of this file
"""

from core.models import RopeScene, TensionResult
from rigging.scenes import block_and_tackle, fixed_pulley, movable_pulley
from solver.equilibrium import compute_tensions

STANDARD_GRAVITY = 9.81  # m/s²


# ---------------------------------------------------------------------------
# Scenario definitions
# ---------------------------------------------------------------------------

def scenario_fixed_pulley(
    gravity: float = STANDARD_GRAVITY,
    friction: float = 0.0
) -> TensionResult:
    """
    Single fixed pulley, 100 kg load. Ideal MA = 1.

    Args:
        gravity: Gravitational acceleration, m/s².
        friction: Friction coefficient of every pulley.

    Returns:
        TensionResult from the solver.
    """
    return compute_tensions(fixed_pulley.build(friction=friction), gravity)


def scenario_movable_pulley(
    gravity: float = STANDARD_GRAVITY,
    friction: float = 0.0
) -> TensionResult:
    """Single movable pulley, 100 kg load. Ideal MA = 2."""
    return compute_tensions(movable_pulley.build(friction=friction), gravity)


def scenario_block_and_tackle_2x2(
    gravity: float = STANDARD_GRAVITY,
    friction: float = 0.0
) -> TensionResult:
    """Two fixed + two movable pulleys, 100 kg load. Ideal MA = 4."""
    return compute_tensions(block_and_tackle.build(pairs=2, friction=friction), gravity)


def scenario_block_and_tackle_3x3(
    gravity: float = STANDARD_GRAVITY,
    friction: float = 0.0
) -> TensionResult:
    """Three fixed + three movable pulleys, 100 kg load. Ideal MA = 6."""
    return compute_tensions(block_and_tackle.build(pairs=3, friction=friction), gravity)


# ---------------------------------------------------------------------------
# Scenario registry
# ---------------------------------------------------------------------------

SCENARIOS: dict[str, callable] = {
    "fixed_pulley":          scenario_fixed_pulley,
    "movable_pulley":        scenario_movable_pulley,
    "block_and_tackle_2x2":  scenario_block_and_tackle_2x2,
    "block_and_tackle_3x3":  scenario_block_and_tackle_3x3,
}


def run_scenario(name: str, **kwargs) -> TensionResult:
    """
    Run a scenario by name with optional keyword overrides.

    Args:
        name: Scenario key from SCENARIOS registry.
        **kwargs: Passed directly to the scenario function
                  (e.g. gravity=1.62, friction=0.05).

    Returns:
        TensionResult from the selected scenario.

    Raises:
        ValueError: If scenario name is not found in registry.
    """
    if name not in SCENARIOS:
        available = ", ".join(SCENARIOS.keys())
        raise ValueError(f"Unknown scenario '{name}'. Available: {available}")
    return SCENARIOS[name](**kwargs)


def list_scenarios() -> list[str]:
    """Return all registered scenario names."""
    return list(SCENARIOS.keys())


# ---------------------------------------------------------------------------
# Scene registry (unsolved scenes, same names as SCENARIOS)
# ---------------------------------------------------------------------------

SCENE_BUILDERS: dict[str, callable] = {
    "fixed_pulley":          fixed_pulley.build,
    "movable_pulley":        movable_pulley.build,
    "block_and_tackle_2x2":  lambda **kwargs: block_and_tackle.build(pairs=2, **kwargs),
    "block_and_tackle_3x3":  lambda **kwargs: block_and_tackle.build(pairs=3, **kwargs),
}


def build_scene(name: str, **kwargs) -> RopeScene:
    """
    Build the reference scene behind a scenario without solving it.

    Args:
        name: Scenario key from SCENE_BUILDERS registry.
        **kwargs: Passed to the scene's build() (e.g. mass=250.0, friction=0.05).

    Raises:
        ValueError: If scenario name is not found in registry.
    """
    if name not in SCENE_BUILDERS:
        available = ", ".join(SCENE_BUILDERS.keys())
        raise ValueError(f"Unknown scenario '{name}'. Available: {available}")
    return SCENE_BUILDERS[name](**kwargs)
