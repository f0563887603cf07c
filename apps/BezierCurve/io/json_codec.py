"""JSON payloads for the curve pipeline and CLI.

A curve payload may pull shared settings from other files through an
``__include__`` key, a path or list of paths relative to the including
file. The bundled ``curve_input.example.json`` includes
``curve_constants.example.json`` for its canvas size and handle layout and
only adds the ``curve`` and ``meta`` sections itself. Fragments are applied
in list order and the including file is applied last, so a case can
override a single key such as ``canvas.height`` without restating the rest.
"""

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

INCLUDE_KEY = "__include__"


def load_json(path: str | Path) -> Dict[str, Any]:
    return _load_payload(Path(path).resolve(), chain=())


def _load_payload(path: Path, chain: tuple) -> Dict[str, Any]:
    if path in chain:
        cycle = " -> ".join(p.name for p in (*chain, path))
        raise ValueError(f"Circular {INCLUDE_KEY} detected for {path}: {cycle}")

    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object")

    fragments = [
        _load_payload(include, (*chain, path))
        for include in _include_paths(path, payload.pop(INCLUDE_KEY, []))
    ]
    merged: Dict[str, Any] = {}
    for fragment in (*fragments, payload):
        merged = merge_dicts(merged, fragment)
    return merged


def _include_paths(path: Path, includes: str | List[str]) -> List[Path]:
    if isinstance(includes, str):
        includes = [includes]
    return [(path.parent / include).resolve() for include in includes]


def save_json(path: str | Path, payload: Dict[str, Any]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(to_jsonable(payload), indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )


def to_jsonable(obj: Any) -> Any:
    """Convert numpy arrays, enums and dataclasses into plain JSON values."""
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj):
        return to_jsonable(asdict(obj))
    if isinstance(obj, dict):
        return {str(key): to_jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(value) for value in obj]
    return obj


def merge_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Recursive merge where ``overlay`` wins; neither input is modified."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_dicts(current, value)
        merged[key] = value
    return merged
