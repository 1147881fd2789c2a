from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import re
from typing import Any, Iterable


Accessor = Callable[[Any], Any]


class _Missing:
    """Marker for "no value", distinct from a datum value of ``None``."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_PATH_TOKEN = re.compile(r"[^.\[\]]+")


def resolve_accessor(key: Any) -> Accessor:
    """Turn an accessor key into a ``datum -> value`` callable.

    A callable is returned as-is. ``None``/``MISSING`` yields a function that
    always returns ``MISSING``. Anything else is an index, a key, a dotted or
    bracketed path string (``"a.b[0]"``), or a list/tuple of path segments.
    Unresolvable paths return ``MISSING`` instead of raising.
    """
    if callable(key):
        return key
    if key is None or key is MISSING:
        return _missing_value
    path = _to_path(key)
    return lambda datum: get_path(datum, path)


create_accessor = resolve_accessor


def get_path(datum: Any, path: Sequence[Any]) -> Any:
    value = datum
    for segment in path:
        value = _get_segment(value, segment)
        if value is MISSING:
            return MISSING
    return value


def get_current_axis(axis: str, horizontal: bool | None) -> str:
    """Swap x and y for horizontal layouts."""
    if not horizontal:
        return axis
    other = {"x": "y", "y": "x"}
    return other.get(axis, axis)


def remove_undefined(values: Iterable[Any]) -> list[Any]:
    return [v for v in values if v is not None and v is not MISSING]


def _missing_value(datum: Any) -> Any:
    return MISSING


def _to_path(key: Any) -> tuple[Any, ...]:
    if isinstance(key, (list, tuple)):
        return tuple(key)
    if isinstance(key, str):
        if re.fullmatch(r"\w*", key):
            return (key,)
        return tuple(_PATH_TOKEN.findall(key))
    return (key,)


def _get_segment(value: Any, segment: Any) -> Any:
    if value is None or value is MISSING or isinstance(value, (str, bytes)):
        return MISSING
    if isinstance(value, Mapping):
        if segment in value:
            return value[segment]
        alt = _alternate_key(segment)
        if alt is not MISSING and alt in value:
            return value[alt]
        return MISSING
    index = _as_index(segment)
    if index is not None and _is_indexable(value):
        try:
            return value[index]
        except (IndexError, KeyError, TypeError):
            return MISSING
    if isinstance(segment, str) and not segment.startswith("_") and hasattr(value, segment):
        return getattr(value, segment)
    return MISSING


def _alternate_key(segment: Any) -> Any:
    if isinstance(segment, str) and segment.lstrip("-").isdigit():
        return int(segment)
    if isinstance(segment, int) and not isinstance(segment, bool):
        return str(segment)
    return MISSING


def _as_index(segment: Any) -> int | None:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


def _is_indexable(value: Any) -> bool:
    if isinstance(value, Sequence):
        return True
    # numpy arrays are not registered as Sequence.
    return hasattr(value, "__getitem__") and hasattr(value, "__len__") and hasattr(value, "shape")
