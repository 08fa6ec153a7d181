"""
tests/test_phase7_loader_cli.py
================================
Phase 7: Scene payload conversion and the command-line entry point.

Checks:
  - A camelCase payload converts into the expected RopeScene
  - scene_to_dict output converts back to an equal scene
  - Malformed payloads raise ScenePayloadError
  - load_scene reads a JSON file from disk
  - NaN read from a JSON file is rejected by validation
  - main() prints a report and returns 0, or prints the error and returns 1
  - --friction together with --sweep is a usage error
"""

import sys
import os
import io
import json
import math
import tempfile
from contextlib import redirect_stderr, redirect_stdout
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
from core.exceptions import ScenePayloadError, SceneValidationError
from core.models import AnchorKind
from rigging.loader import scene_from_dict, scene_to_dict, load_scene
from rigging.scenes import block_and_tackle
from solver.equilibrium import compute_tensions
import main as cli

MOVABLE_PAYLOAD = {
    "id": "movable-pulley",
    "label": "Movable pulley",
    "anchors": [
        {"id": "input", "type": "fixed", "label": "Free end"},
        {"id": "moving", "type": "pulley", "frictionCoefficient": 0,
         "defaultWrapAngle": math.pi, "attachedToLoad": True},
        {"id": "support", "type": "fixed"},
    ],
    "path": [
        {"anchorId": "input"},
        {"anchorId": "moving", "wrapAngle": math.pi},
        {"anchorId": "support"},
    ],
    "load": {"mass": 100, "anchorIds": ["moving"]},
}


def test_scene_from_dict():
    """Payload keys map onto the scene model."""
    scene = scene_from_dict(MOVABLE_PAYLOAD)
    assert scene.id == "movable-pulley"
    moving = scene.find_anchor("moving")
    assert moving.kind is AnchorKind.PULLEY
    assert moving.attached_to_load == True
    assert moving.default_wrap_angle == math.pi
    assert scene.path[1].wrap_angle == math.pi
    assert scene.path[0].wrap_angle is None
    assert scene.load.mass == 100.0
    result = compute_tensions(scene, 9.81)
    assert np.isclose(result.mechanical_advantage, 2.0)
    print("  PASS: scene_from_dict")


def test_load_anchor_payload():
    """Load anchors require and keep their mass."""
    payload = dict(MOVABLE_PAYLOAD)
    payload["anchors"] = MOVABLE_PAYLOAD["anchors"] + [{"id": "w", "type": "load", "mass": 12.5}]
    scene = scene_from_dict(payload)
    assert scene.find_anchor("w").mass == 12.5
    print("  PASS: Load anchor payload")


def test_dict_conversion_is_stable():
    """scene_to_dict output converts back to an equal scene."""
    scene = block_and_tackle.build(pairs=2, friction=0.05)
    payload = scene_to_dict(scene)
    assert payload["anchors"][2]["attachedToLoad"] == True
    assert "wrapAngle" not in payload["path"][0]
    assert scene_from_dict(json.loads(json.dumps(payload))) == scene
    print("  PASS: Dict conversion is stable")


def _expect_payload_error(payload):
    try:
        scene_from_dict(payload)
        assert False, "Should have raised ScenePayloadError"
    except ScenePayloadError as e:
        return str(e)


def test_malformed_payloads():
    """Shape problems raise ScenePayloadError with a useful message."""
    assert "Missing required key 'path'" in _expect_payload_error(
        {k: v for k, v in MOVABLE_PAYLOAD.items() if k != "path"})

    bad_type = dict(MOVABLE_PAYLOAD, anchors=[{"id": "x", "type": "winch"}])
    assert "Unknown anchor type 'winch'" in _expect_payload_error(bad_type)

    bad_mass = dict(MOVABLE_PAYLOAD, load={"mass": "heavy", "anchorIds": ["moving"]})
    assert "'mass' must be a number" in _expect_payload_error(bad_mass)

    bool_wrap = dict(MOVABLE_PAYLOAD, path=[{"anchorId": "input", "wrapAngle": True}])
    assert "'wrapAngle' must be a number" in _expect_payload_error(bool_wrap)

    _expect_payload_error(dict(MOVABLE_PAYLOAD, anchors="input"))
    _expect_payload_error(dict(MOVABLE_PAYLOAD, load=[]))
    _expect_payload_error(["not", "a", "scene"])
    _expect_payload_error(dict(MOVABLE_PAYLOAD, anchors=[{"id": "w", "type": "load"}]))

    string_flag = dict(MOVABLE_PAYLOAD, anchors=[
        {"id": "moving", "type": "pulley", "attachedToLoad": "false"}])
    assert "'attachedToLoad' must be true or false" in _expect_payload_error(string_flag)

    for bad_id in (None, 7):
        bad_ids = dict(MOVABLE_PAYLOAD, load={"mass": 100, "anchorIds": ["moving", bad_id]})
        assert "'anchorIds' must be a string" in _expect_payload_error(bad_ids)
    print("  PASS: Malformed payloads rejected")


def test_load_scene_from_file():
    """load_scene reads a JSON payload from disk."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "scene.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(MOVABLE_PAYLOAD, fh)
        scene = load_scene(path)
    assert scene.id == "movable-pulley"
    print("  PASS: load_scene")


def test_load_scene_invalid_json():
    """Broken JSON is reported as a ScenePayloadError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "broken.json")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("{not json")
        try:
            load_scene(path)
            assert False, "Should have raised ScenePayloadError"
        except ScenePayloadError as e:
            print(f"  PASS: ScenePayloadError raised correctly: {e}")


def test_load_scene_non_finite_number():
    """A NaN literal in a JSON file loads, then fails validation before solving."""
    payload = dict(MOVABLE_PAYLOAD, path=[
        {"anchorId": "input"},
        {"anchorId": "moving", "wrapAngle": float("nan")},
        {"anchorId": "support"},
    ])
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "nan.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(payload, fh)
        scene = load_scene(path)
    assert math.isnan(scene.path[1].wrap_angle)
    try:
        compute_tensions(scene, 9.81)
        assert False, "Should have raised SceneValidationError"
    except SceneValidationError as e:
        assert e.validation.errors == ["Wrap angle must be a finite number (pass 1)."]
        print(f"  PASS: SceneValidationError raised correctly: {e}")


def _run_cli(*argv):
    out = io.StringIO()
    with redirect_stdout(out):
        status = cli.main(list(argv))
    return status, out.getvalue()


def test_cli_default_scenario():
    """The default run prints the 2x2 report."""
    status, output = _run_cli()
    assert status == 0
    assert "Mech. advantage  : 4.0000" in output
    assert "Input force      : 245.25 N" in output
    print("  PASS: CLI default scenario")


def test_cli_list():
    """--list prints every scenario name."""
    status, output = _run_cli("--list")
    assert status == 0
    assert "block_and_tackle_3x3" in output
    print("  PASS: CLI --list")


def test_cli_friction_and_sweep():
    """--friction lowers MA; --sweep prints one row per coefficient."""
    status, output = _run_cli("--scenario", "movable_pulley", "--friction", "0.1")
    assert status == 0
    assert "Mech. advantage  : 2.0000" not in output

    status, output = _run_cli("--scenario", "fixed_pulley", "--sweep", "0", "0.1", "0.2")
    assert status == 0
    assert output.count("\n") == 5
    print("  PASS: CLI friction and sweep")


def test_cli_scene_file():
    """--scene solves a JSON payload."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "scene.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(MOVABLE_PAYLOAD, fh)
        status, output = _run_cli("--scene", path, "--gravity", "10")
    assert status == 0
    assert "Input force      : 500.00 N" in output
    print("  PASS: CLI scene file")


def test_cli_errors():
    """Errors print a message, no readouts, and exit status 1."""
    status, output = _run_cli("--scenario", "nonexistent")
    assert status == 1
    assert output.startswith("Error:")

    bad = dict(MOVABLE_PAYLOAD, path=[{"anchorId": "input"}])
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, "bad.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(bad, fh)
        status, output = _run_cli("--scene", path)
    assert status == 1
    assert "Scene is inconsistent" in output
    assert "Input force" not in output

    status, output = _run_cli("--gravity", "0")
    assert status == 1

    err = io.StringIO()
    try:
        with redirect_stderr(err):
            _run_cli("--friction", "0.1", "--sweep", "0", "0.2")
        assert False, "Should have exited with a usage error"
    except SystemExit as e:
        assert e.code == 2
    assert "--friction cannot be combined with --sweep" in err.getvalue()
    print("  PASS: CLI errors")


if __name__ == "__main__":
    print("=== Phase 7: Loader and CLI ===")
    test_scene_from_dict()
    test_load_anchor_payload()
    test_dict_conversion_is_stable()
    test_malformed_payloads()
    test_load_scene_from_file()
    test_load_scene_invalid_json()
    test_load_scene_non_finite_number()
    test_cli_default_scenario()
    test_cli_list()
    test_cli_friction_and_sweep()
    test_cli_scene_file()
    test_cli_errors()
    print("All Phase 7 tests passed.\n")
