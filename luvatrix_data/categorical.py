from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from luvatrix_data.accessors import MISSING, get_current_axis, remove_undefined, resolve_accessor
from luvatrix_data.adapters.containers import is_dataset, iter_data, parse_datum
from luvatrix_data.config import DataConfig, coerce_config


StringMap = dict[str, int]


def create_string_map(config: DataConfig | Mapping[str, Any], axis: str) -> StringMap | None:
    """Map every string seen for ``axis`` to a 1-based integer.

    Strings are collected from tick values, categories and the raw data, in
    that order, and numbered by first appearance. ``None`` means the axis has
    no categorical values at all.
    """
    cfg = coerce_config(config)
    all_strings = _unique(
        [
            *get_strings_from_axes(cfg, axis),
            *get_strings_from_categories(cfg, axis),
            *get_strings_from_data(cfg, axis),
        ]
    )
    if not all_strings:
        return None
    return {value: index + 1 for index, value in enumerate(all_strings)}


def get_strings_from_axes(config: DataConfig | Mapping[str, Any], axis: str) -> list[str]:
    cfg = coerce_config(config)
    tick_values = cfg.tick_values
    tick_format = cfg.tick_format
    if isinstance(tick_values, Mapping):
        values = tick_values.get(axis)
    elif _is_list_like(tick_values):
        values = tick_values
    else:
        values = None
    if not _is_list_like(values):
        values = tick_format if _is_list_like(tick_format) else []
    return [v for v in values if isinstance(v, str)]


def get_categories(config: DataConfig | Mapping[str, Any], axis: str) -> Any:
    cfg = coerce_config(config)
    categories = cfg.categories
    if isinstance(categories, Mapping):
        return categories.get(get_current_axis(axis, cfg.horizontal))
    return categories


def get_strings_from_categories(config: DataConfig | Mapping[str, Any], axis: str) -> list[str]:
    cfg = coerce_config(config)
    if cfg.categories is None:
        return []
    categories = get_categories(cfg, axis)
    if not _is_list_like(categories):
        return []
    return remove_undefined(v for v in categories if isinstance(v, str))


def get_strings_from_data(config: DataConfig | Mapping[str, Any], axis: str) -> list[str]:
    cfg = coerce_config(config)
    if not is_dataset(cfg.data):
        return []
    override = cfg.accessor_override(axis)
    accessor = resolve_accessor(axis if override is MISSING else override)
    values = (accessor(parse_datum(datum)) for datum in iter_data(cfg.data))
    return _unique(v for v in values if isinstance(v, str))


def _unique(values: Any) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return list(seen)


def _is_list_like(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
