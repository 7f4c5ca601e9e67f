"""Total, typed accessors over parsed JSON values.

Every function here returns the caller's default instead of raising when the
key is missing, the node is not a mapping, or the value has the wrong shape.
Provider payloads routinely omit optional fields, so the builders rely on this
for every leaf.
"""
from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

_MISSING = object()


# ---------------------------------------------------------------------------
# Scalar coercion
# ---------------------------------------------------------------------------

# Plain decimal/exponent numbers only; rejects "1_000", "nan", "inf", "0x10"
_NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")


def _as_float(value: Any) -> Optional[float]:
    # bool is an int subclass; JSON true/false is not a number here
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not _NUMBER_RE.fullmatch(value):
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        f = float(value)
    except (OverflowError, ValueError):
        # ints beyond float range
        return None
    return f if math.isfinite(f) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # over the interpreter's int string-length limit
            pass
    f = _as_float(value)
    return int(f) if f is not None else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, float) and math.isfinite(value):
        return value != 0
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("true", "yes", "1"):
            return True
        if v in ("false", "no", "0"):
            return False
    return None


# ---------------------------------------------------------------------------
# Key accessors
# ---------------------------------------------------------------------------

def get_value(node: Any, key: str, default: Any = None) -> Any:
    if not isinstance(node, Mapping):
        return default
    value = node.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    return value


def get_str(node: Any, key: str, default: str = "") -> str:
    value = get_value(node, key)
    return value if isinstance(value, str) else default


def get_int(node: Any, key: str, default: int = 0) -> int:
    value = _as_int(get_value(node, key))
    return default if value is None else value


def get_float(node: Any, key: str, default: float = 0.0) -> float:
    value = _as_float(get_value(node, key))
    return default if value is None else value


def get_bool(node: Any, key: str, default: bool = False) -> bool:
    value = _as_bool(get_value(node, key))
    return default if value is None else value


def get_dict(node: Any, key: str, default: Optional[Dict[str, Any]] = None) -> Mapping[str, Any]:
    value = get_value(node, key)
    if isinstance(value, Mapping):
        return value
    return {} if default is None else default


def get_list(node: Any, key: str, default: Optional[List[Any]] = None) -> List[Any]:
    value = get_value(node, key)
    if isinstance(value, list):
        return value
    return [] if default is None else default


# ---------------------------------------------------------------------------
# Dotted path accessors ("polyline.points")
# ---------------------------------------------------------------------------

def get_path(node: Any, path: str, default: Any = None) -> Any:
    """Walk nested mappings by dot-separated keys."""
    current = node
    for key in path.split("."):
        current = get_value(current, key, _MISSING)
        if current is _MISSING:
            return default
    return current


def _parent_and_key(node: Any, path: str) -> Tuple[Any, str]:
    head, _, last = path.rpartition(".")
    parent = get_path(node, head) if head else node
    return parent, last


def get_str_path(node: Any, path: str, default: str = "") -> str:
    parent, key = _parent_and_key(node, path)
    return get_str(parent, key, default)


def get_int_path(node: Any, path: str, default: int = 0) -> int:
    parent, key = _parent_and_key(node, path)
    return get_int(parent, key, default)


def get_float_path(node: Any, path: str, default: float = 0.0) -> float:
    parent, key = _parent_and_key(node, path)
    return get_float(parent, key, default)


def get_dict_path(node: Any, path: str, default: Optional[Dict[str, Any]] = None) -> Mapping[str, Any]:
    parent, key = _parent_and_key(node, path)
    return get_dict(parent, key, default)


def get_list_path(node: Any, path: str, default: Optional[List[Any]] = None) -> List[Any]:
    parent, key = _parent_and_key(node, path)
    return get_list(parent, key, default)
