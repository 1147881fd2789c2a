from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from luvatrix_data.config import DataConfig, coerce_config


SCALE_TYPES: tuple[str, ...] = ("linear", "log", "sqrt", "pow", "time")
DEFAULT_SCALE_TYPE = "linear"

# Unset domains mirror the usual scale defaults: log scales cannot start at zero.
_DEFAULT_DOMAINS: dict[str, tuple[float, float]] = {
    "linear": (0.0, 1.0),
    "log": (1.0, 10.0),
    "sqrt": (0.0, 1.0),
    "pow": (0.0, 1.0),
    "time": (0.0, 1.0),
}


@dataclass(frozen=True)
class BaseScale:
    scale_type: str
    bounds: tuple[float, float]

    def domain(self) -> tuple[float, float]:
        return self.bounds


def get_scale_type(config: DataConfig | Mapping[str, Any] | None, axis: str) -> str:
    scale = _scale_for_axis(config, axis)
    if scale is None:
        return DEFAULT_SCALE_TYPE
    if isinstance(scale, str):
        return scale if scale in SCALE_TYPES else DEFAULT_SCALE_TYPE
    declared = getattr(scale, "scale_type", None)
    if isinstance(declared, str) and declared in SCALE_TYPES:
        return declared
    if hasattr(scale, "base"):
        return "log"
    return DEFAULT_SCALE_TYPE


def get_base_scale(config: DataConfig | Mapping[str, Any] | None, axis: str) -> Any:
    """Return an object exposing ``domain()`` for the axis.

    A scale object supplied in the config is returned as-is when it already
    has a ``domain`` method; otherwise a ``BaseScale`` with the default
    domain of the resolved scale type is built.
    """
    scale = _scale_for_axis(config, axis)
    if scale is not None and callable(getattr(scale, "domain", None)):
        return scale
    scale_type = get_scale_type(config, axis)
    return BaseScale(scale_type=scale_type, bounds=_DEFAULT_DOMAINS[scale_type])


def _scale_for_axis(config: DataConfig | Mapping[str, Any] | None, axis: str) -> Any:
    scale = coerce_config(config).scale
    if isinstance(scale, Mapping):
        return scale.get(axis)
    return scale
