"""
rigging/loader.py
=================
Converts between RopeScene and the JSON-like payload scenes are stored as.

Payload shape (camelCase keys, optional keys may be omitted):

    {
      "id": "block-tackle-2x2",
      "label": "...",
      "anchors": [
        {"id": "input", "type": "fixed"},
        {"id": "top2", "type": "pulley", "frictionCoefficient": 0.0,
         "defaultWrapAngle": 3.14159, "attachedToLoad": false},
        {"id": "weight", "type": "load", "mass": 100}
      ],
      "path": [{"anchorId": "input"}, {"anchorId": "top2", "wrapAngle": 3.14159}],
      "load": {"mass": 100, "anchorIds": ["bottom1", "bottom2"]}
    }

Only the shape is checked here. Physical consistency (positive mass,
resolvable references, ...) is the job of solver/validator.py.
"""

import json
import logging
import os
from typing import Any

from core.exceptions import ScenePayloadError
from core.models import (
    Anchor,
    AnchorKind,
    FixedAnchor,
    LoadAnchor,
    PulleyAnchor,
    RopeLoad,
    RopePass,
    RopeScene,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Payload -> RopeScene
# ---------------------------------------------------------------------------

def scene_from_dict(payload: dict[str, Any]) -> RopeScene:
    """
    Build a RopeScene from its JSON-like payload.

    Args:
        payload: Decoded scene payload.

    Returns:
        RopeScene (not validated).

    Raises:
        ScenePayloadError: If the payload does not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise ScenePayloadError("Scene payload must be an object.")

    anchors = [_anchor_from_dict(item, i) for i, item in enumerate(_require_list(payload, "anchors"))]
    path = [_pass_from_dict(item, i) for i, item in enumerate(_require_list(payload, "path"))]

    load = _require(payload, "load")
    if not isinstance(load, dict):
        raise ScenePayloadError("'load' must be an object.")
    anchor_ids = _require_list(load, "anchorIds")

    return RopeScene(
        id=_require_str(payload, "id"),
        label=_optional_str(payload, "label"),
        anchors=anchors,
        path=path,
        load=RopeLoad(
            mass=_require_number(load, "mass"),
            anchor_ids=[_to_str(anchor_id, "anchorIds") for anchor_id in anchor_ids]
        )
    )


def load_scene(path: str | os.PathLike) -> RopeScene:
    """
    Read a scene payload from a JSON file.

    Raises:
        ScenePayloadError: If the file is not valid JSON or the payload is malformed.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as fh:
        try:
            payload = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ScenePayloadError(f"Invalid JSON in {path}: {exc}") from exc

    scene = scene_from_dict(payload)
    logger.info("Loaded scene '%s' from %s (%d anchors, %d passes)",
                scene.id, path, len(scene.anchors), len(scene.path))
    return scene


def _anchor_from_dict(item: Any, position: int) -> Anchor:
    if not isinstance(item, dict):
        raise ScenePayloadError(f"Anchor at position {position} must be an object.")

    common = {
        "id": _require_str(item, "id"),
        "label": _optional_str(item, "label"),
        "friction_coefficient": _optional_number(item, "frictionCoefficient"),
        "default_wrap_angle": _optional_number(item, "defaultWrapAngle"),
    }

    raw_type = _require(item, "type")
    try:
        kind = AnchorKind(raw_type)
    except ValueError:
        raise ScenePayloadError(
            f"Unknown anchor type '{raw_type}' at position {position}."
        ) from None

    if kind is AnchorKind.FIXED:
        return FixedAnchor(**common)
    elif kind is AnchorKind.PULLEY:
        return PulleyAnchor(**common, attached_to_load=_optional_bool(item, "attachedToLoad"))
    elif kind is AnchorKind.LOAD:
        return LoadAnchor(**common, mass=_require_number(item, "mass"))
    raise ScenePayloadError(f"Unhandled anchor kind: '{kind}'.")


def _pass_from_dict(item: Any, position: int) -> RopePass:
    if not isinstance(item, dict):
        raise ScenePayloadError(f"Pass {position} must be an object.")
    return RopePass(
        anchor_id=_require_str(item, "anchorId"),
        wrap_angle=_optional_number(item, "wrapAngle"),
        friction_coefficient=_optional_number(item, "frictionCoefficient"),
        label=_optional_str(item, "label")
    )


# ---------------------------------------------------------------------------
# RopeScene -> Payload
# ---------------------------------------------------------------------------

def scene_to_dict(scene: RopeScene) -> dict[str, Any]:
    """
    Convert a RopeScene to its JSON-like payload.

    Unset optional fields are omitted.
    """
    payload: dict[str, Any] = {"id": scene.id}
    if scene.label is not None:
        payload["label"] = scene.label
    payload["anchors"] = [_anchor_to_dict(anchor) for anchor in scene.anchors]
    payload["path"] = [_pass_to_dict(rope_pass) for rope_pass in scene.path]
    payload["load"] = {"mass": scene.load.mass, "anchorIds": list(scene.load.anchor_ids)}
    return payload


def _anchor_to_dict(anchor: Anchor) -> dict[str, Any]:
    data: dict[str, Any] = {"id": anchor.id, "type": anchor.kind.value}
    _put_optional(data, "label", anchor.label)
    _put_optional(data, "frictionCoefficient", anchor.friction_coefficient)
    _put_optional(data, "defaultWrapAngle", anchor.default_wrap_angle)

    if anchor.kind is AnchorKind.PULLEY:
        if anchor.attached_to_load:
            data["attachedToLoad"] = True
    elif anchor.kind is AnchorKind.LOAD:
        data["mass"] = anchor.mass
    return data


def _pass_to_dict(rope_pass: RopePass) -> dict[str, Any]:
    data: dict[str, Any] = {"anchorId": rope_pass.anchor_id}
    _put_optional(data, "wrapAngle", rope_pass.wrap_angle)
    _put_optional(data, "frictionCoefficient", rope_pass.friction_coefficient)
    _put_optional(data, "label", rope_pass.label)
    return data


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _put_optional(data: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        data[key] = value


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ScenePayloadError(f"Missing required key '{key}'.")
    return data[key]


def _require_list(data: dict[str, Any], key: str) -> list:
    value = _require(data, key)
    if not isinstance(value, list):
        raise ScenePayloadError(f"'{key}' must be a list.")
    return value


def _require_str(data: dict[str, Any], key: str) -> str:
    return _to_str(_require(data, key), key)


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return _to_str(value, key)


def _optional_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ScenePayloadError(f"'{key}' must be true or false, got {value!r}.")
    return value


def _require_number(data: dict[str, Any], key: str) -> float:
    return _to_float(_require(data, key), key)


def _optional_number(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    return _to_float(value, key)


def _to_float(value: Any, key: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScenePayloadError(f"'{key}' must be a number, got {value!r}.")
    return float(value)


def _to_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise ScenePayloadError(f"'{key}' must be a string, got {value!r}.")
    return value
