from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
import math
import numbers
from typing import Any

import numpy as np

from luvatrix_data.config import DataConfig, coerce_config
from luvatrix_data.errors import InvalidDomainError
from luvatrix_data.scales import get_base_scale

LOGGER = logging.getLogger(__name__)

DEFAULT_SAMPLES = 1


def generate_data(config: DataConfig | Mapping[str, Any] | None = None) -> list[dict[str, float]]:
    """Evenly stepped ``{"x", "y"}`` points spanning the configured domain.

    An axis whose domain collapses to a single value repeats that value so
    the series keeps the length of the other axis.
    """
    cfg = coerce_config(config)
    x_values = generate_data_array(cfg, "x")
    y_values = generate_data_array(cfg, "y")
    if len(x_values) == 1:
        x_values = x_values * len(y_values)
    elif len(y_values) == 1:
        y_values = y_values * len(x_values)
    if len(x_values) != len(y_values):
        LOGGER.warning(
            "synthetic x/y series differ in length (%d != %d); extra points dropped",
            len(x_values),
            len(y_values),
        )
    return [{"x": x, "y": y} for x, y in zip(x_values, y_values)]


def generate_data_array(config: DataConfig | Mapping[str, Any] | None, axis: str) -> list[float]:
    cfg = coerce_config(config)
    domain_min, domain_max = resolve_domain(cfg, axis)
    samples = _resolve_samples(cfg.samples)
    if domain_min == domain_max:
        return [domain_max]

    if isinstance(samples, int):
        values = np.linspace(domain_min, domain_max, samples, endpoint=False, dtype=np.float64).tolist()
    else:
        step = (domain_max - domain_min) / samples
        values = np.arange(domain_min, domain_max, step, dtype=np.float64).tolist()
    if values[-1] == domain_max:
        return values
    return values + [domain_max]


def resolve_domain(config: DataConfig | Mapping[str, Any] | None, axis: str) -> tuple[float, float]:
    """Per-axis domain, then the shared domain, then the base scale's domain."""
    cfg = coerce_config(config)
    domain = cfg.domain.get(axis) if isinstance(cfg.domain, Mapping) else cfg.domain
    if domain is None or (isinstance(domain, Sequence) and len(domain) == 0):
        domain = get_base_scale(cfg, axis).domain()
    return _coerce_bounds(domain, axis)


def _coerce_bounds(domain: Any, axis: str) -> tuple[float, float]:
    try:
        bounds = [float(v) for v in domain]
    except (TypeError, ValueError) as exc:
        raise InvalidDomainError(f"{axis} domain must be a pair of numbers: {domain!r}") from exc
    if len(bounds) < 2:
        raise InvalidDomainError(f"{axis} domain needs a min and a max: {domain!r}")
    if not all(math.isfinite(v) for v in bounds):
        raise InvalidDomainError(f"{axis} domain must be finite: {domain!r}")
    return (min(bounds), max(bounds))


def _resolve_samples(samples: Any) -> int | float:
    """Sample count as an int, or a float when it is fractional."""
    if samples is None:
        return DEFAULT_SAMPLES
    if isinstance(samples, bool) or not isinstance(samples, numbers.Real):
        raise InvalidDomainError(f"samples must be a number: {samples!r}")
    if not math.isfinite(samples) or samples <= 0:
        raise InvalidDomainError(f"samples must be finite and > 0: {samples!r}")
    if float(samples).is_integer():
        return int(samples)
    return float(samples)
