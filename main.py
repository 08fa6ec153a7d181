"""
main.py
=======
Entry point for the rope statics solver.

Usage:
    python main.py                                   # runs default scenario (block_and_tackle_2x2)
    python main.py --scenario fixed_pulley
    python main.py --scenario block_and_tackle_3x3 --friction 0.05
    python main.py --scene my_scene.json --gravity 1.62
    python main.py --scenario block_and_tackle_2x2 --sweep 0 0.05 0.1 0.2
    python main.py --list                            # list available scenarios

Arguments:
    --scenario  : Scenario name from the registry (default: block_and_tackle_2x2)
    --scene     : Path to a scene JSON payload (overrides --scenario)
    --gravity   : Gravitational acceleration in m/s² (default: 9.81)
    --friction  : Friction coefficient applied to every pulley (default: scene value)
    --sweep     : Friction coefficients to sweep over instead of a single solve
                  (cannot be combined with --friction)
    --verbose   : Enable debug logging
    --list      : Print available scenarios and exit
"""

import argparse
import logging
import sys

from core.exceptions import RopeSystemError
from core.logging_config import setup_logging
from core.models import RopeScene, TensionResult
from rigging.loader import load_scene
from rigging.scenes.variants import with_pulley_friction
from simulation.scenarios import STANDARD_GRAVITY, build_scene, list_scenarios
from simulation.sweep import friction_sweep
from solver.equilibrium import compute_tensions


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI arguments, solve the selected scene, and print the report.

    Returns:
        Process exit status: 0 on success, 1 if the scene could not be
        loaded or solved.
    """
    args = _parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.list:
        print("Available scenarios:")
        for name in list_scenarios():
            print(f"  {name}")
        return 0

    try:
        scene = _select_scene(args)

        if args.sweep:
            points = friction_sweep(scene, args.sweep, args.gravity)
            _print_sweep(scene, points)
            return 0

        if args.friction is not None:
            scene = with_pulley_friction(scene, args.friction)

        result = compute_tensions(scene, args.gravity)
    except (RopeSystemError, ValueError, OSError) as exc:
        print(f"Error: {exc}")
        return 1

    _print_result(scene, result)
    return 0


def _select_scene(args: argparse.Namespace) -> RopeScene:
    """Load the scene from --scene, or build the one named by --scenario."""
    if args.scene:
        return load_scene(args.scene)
    return build_scene(args.scenario)


def _print_result(scene: RopeScene, result: TensionResult) -> None:
    print(f"Scene              : {scene.label or result.scene_id}")
    print(f"  Gravity          : {result.gravity:.3f} m/s²")
    print(f"  Load force       : {result.load_force:.2f} N")
    print(f"  Input force      : {result.input_force:.2f} N")
    print(f"  Mech. advantage  : {result.mechanical_advantage:.4f}")
    print(f"  Support segments : {result.n_support_segments}")
    print()

    print(f"  {'#':>3}  {'from':<12} {'to':<12} {'load':<5} {'mult':>8} {'friction':>9} {'tension [N]':>12}")
    for seg in result.segments:
        print(
            f"  {seg.index:>3}  {seg.from_anchor_id:<12} {seg.to_anchor_id:<12} "
            f"{'yes' if seg.supports_load else 'no':<5} {seg.multiplier:>8.4f} "
            f"{seg.friction_factor:>9.4f} {seg.tension:>12.2f}"
        )

    if result.validation.warnings:
        print()
        print("  Warnings:")
        for warning in result.validation.warnings:
            print(f"    - {warning}")


def _print_sweep(scene: RopeScene, points) -> None:
    print(f"Friction sweep     : {scene.label or scene.id}")
    print(f"  {'mu':>8}  {'input [N]':>12}  {'MA':>8}")
    for point in points:
        print(
            f"  {point.friction_coefficient:>8.4f}  {point.input_force:>12.2f}  "
            f"{point.mechanical_advantage:>8.4f}"
        )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Define and parse CLI arguments.

    Returns:
        Parsed argparse.Namespace object.
    """
    parser = argparse.ArgumentParser(
        description="Rope statics solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--scenario", type=str, default="block_and_tackle_2x2",
        help="Scenario name to solve (default: block_and_tackle_2x2)"
    )
    parser.add_argument(
        "--scene", type=str, default=None,
        help="Path to a scene JSON file (overrides --scenario)"
    )
    parser.add_argument(
        "--gravity", type=float, default=STANDARD_GRAVITY,
        help=f"Gravitational acceleration in m/s² (default: {STANDARD_GRAVITY})"
    )
    parser.add_argument(
        "--friction", type=float, default=None,
        help="Friction coefficient applied to every pulley"
    )
    parser.add_argument(
        "--sweep", type=float, nargs="+", default=None, metavar="MU",
        help="Solve once per friction coefficient and print a table (not with --friction)"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List available scenarios and exit"
    )
    args = parser.parse_args(argv)
    if args.sweep and args.friction is not None:
        parser.error("--friction cannot be combined with --sweep")
    return args


if __name__ == "__main__":
    sys.exit(main())
