from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
import math
import os
from typing import Any

import numpy as np

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_POINTS = 1000


@dataclass(frozen=True)
class DownsamplePolicy:
    max_points: int = DEFAULT_MAX_POINTS

    @classmethod
    def from_env(cls, *, env_var: str = "LUVATRIX_DATA_MAX_POINTS") -> "DownsamplePolicy":
        return cls(max_points=_parse_max_points(env_var))


def downsample(data: Sequence[Any], max_points: int | None = None, starting_index: int = 0) -> list[Any]:
    """Keep at most ``max_points`` records of an already sorted series.

    ``starting_index`` is the position of ``data[0]`` in the full series. The
    stride is a power of two and the modulo is taken on the absolute index,
    so a sliding zoom window keeps the same underlying points.
    """
    if max_points is None:
        max_points = DownsamplePolicy.from_env().max_points
    if max_points <= 0:
        raise ValueError("max_points must be > 0")
    if starting_index < 0:
        raise ValueError("starting_index must be >= 0")

    length = len(data)
    if length <= max_points:
        return list(data)

    k = 2 ** math.ceil(math.log2(length / max_points))
    keep = np.flatnonzero((np.arange(length, dtype=np.int64) + starting_index) % k == 0)
    LOGGER.debug("downsampling %d points with stride %d (offset %d)", length, k, starting_index)
    return [data[int(i)] for i in keep]


def downsample_visible(
    data: Sequence[Any],
    domain: Sequence[float],
    max_points: int | None = None,
) -> list[Any]:
    """Downsample the records of a full ``_x``-sorted series that fall inside ``domain``."""
    lo, hi = min(domain), max(domain)
    xs = np.asarray([datum["_x"] for datum in data], dtype=np.float64)
    start = int(np.searchsorted(xs, lo, side="left"))
    end = int(np.searchsorted(xs, hi, side="right"))
    return downsample(data[start:end], max_points, starting_index=start)


def _parse_max_points(env_var: str) -> int:
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return DEFAULT_MAX_POINTS
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_MAX_POINTS
    if value <= 0:
        return DEFAULT_MAX_POINTS
    return value
