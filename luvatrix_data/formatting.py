from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import logging
import numbers
from typing import Any

from luvatrix_data.accessors import MISSING, Accessor, resolve_accessor
from luvatrix_data.adapters.containers import is_dataset, iter_data, parse_datum
from luvatrix_data.categorical import StringMap, create_string_map
from luvatrix_data.config import DataConfig, coerce_config
from luvatrix_data.scales import get_scale_type

LOGGER = logging.getLogger(__name__)

DEFAULT_EXPECTED_KEYS: tuple[str, ...] = ("x", "y", "y0")

# Formatting renames x/y, so bare sort keys are pointed at the formatted fields.
_SORT_KEY_ALIASES = {"x": "_x", "y": "_y"}


def format_data(
    dataset: Any,
    config: DataConfig | Mapping[str, Any] | None = None,
    expected_keys: Sequence[str] | None = None,
) -> list[dict[Any, Any]]:
    """Apply accessors and string maps to every datum, then sort and clean.

    Each record gets ``_x``/``_y``/``_y0`` (or ``_<key>`` for other expected
    keys), ``_<key>Name`` for strings resolved through a string map, and the
    fields of the original datum merged on top.
    """
    cfg = coerce_config(config)
    if not is_dataset(dataset):
        LOGGER.debug("format_data ignoring non-sequence input: %s", type(dataset).__name__)
        return []

    keys = tuple(expected_keys) if expected_keys else DEFAULT_EXPECTED_KEYS
    y_map = create_string_map(cfg, "y")
    string_maps: dict[str, StringMap | None] = {
        "x": create_string_map(cfg, "x"),
        "y": y_map,
        "y0": y_map,
    }
    accessors = {key: _accessor_for(cfg, key) for key in keys}

    data: list[dict[Any, Any]] = []
    for index, raw in enumerate(iter_data(dataset)):
        datum = parse_datum(raw)
        formatted = _format_datum(datum, index, keys, accessors, string_maps)
        if formatted:
            data.append(formatted)

    sorted_data = sort_data(data, cfg.sort_key, cfg.sort_order)
    return clean_data(sorted_data, cfg)


def sort_data(data: Sequence[Any], sort_key: Any, sort_order: str | None = "ascending") -> list[Any]:
    """Stable sort by one key (or a list of keys); only "descending" reverses."""
    if not sort_key:
        return list(data)
    keys = list(sort_key) if isinstance(sort_key, (list, tuple)) else [sort_key]
    accessors = [resolve_accessor(_SORT_KEY_ALIASES.get(k, k) if isinstance(k, str) else k) for k in keys]

    def sort_value(datum: Any) -> tuple[tuple[int, Any], ...]:
        return tuple(_comparable(accessor(datum)) for accessor in accessors)

    return sorted(data, key=sort_value, reverse=sort_order == "descending")


def clean_data(data: Sequence[Any], config: DataConfig | Mapping[str, Any] | None = None) -> list[Any]:
    """Drop records a log scale cannot place (zero on a log axis)."""
    cfg = coerce_config(config)
    scale_type = {"x": get_scale_type(cfg, "x"), "y": get_scale_type(cfg, "y")}
    if scale_type["x"] != "log" and scale_type["y"] != "log":
        return list(data)

    log_fields = []
    if scale_type["x"] == "log":
        log_fields.append("_x")
    if scale_type["y"] == "log":
        log_fields.extend(["_y", "_y0"])

    cleaned = [datum for datum in data if not any(_is_zero(datum.get(name)) for name in log_fields)]
    if len(cleaned) != len(data):
        LOGGER.debug("removed %d zero-valued records for log scale", len(data) - len(cleaned))
    return cleaned


def _accessor_for(cfg: DataConfig, key: str) -> Accessor:
    override = cfg.accessor_override(key)
    return resolve_accessor(key if override is MISSING else override)


def _format_datum(
    datum: Any,
    index: int,
    keys: Sequence[str],
    accessors: Mapping[str, Callable[[Any], Any]],
    string_maps: Mapping[str, StringMap | None],
) -> dict[Any, Any]:
    fallback = {"x": index, "y": datum}
    out: dict[Any, Any] = {}
    for key in keys:
        value = accessors[key](datum)
        if value is MISSING:
            value = fallback.get(key, MISSING)
        if value is MISSING:
            continue
        string_map = string_maps.get(key)
        if isinstance(value, str) and string_map:
            out[f"_{key}Name"] = value
            # Strings outside the map (y0 values only seen on y0) keep just their name.
            if value in string_map:
                out[f"_{key}"] = string_map[value]
        else:
            out[f"_{key}"] = value
    if isinstance(datum, Mapping):
        out.update(datum)
    return out


def _comparable(value: Any) -> tuple[int, Any]:
    if value is None or value is MISSING:
        return (3, 0)
    if isinstance(value, numbers.Real):
        if value != value:
            return (3, 0)
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    return (2, value)


def _is_zero(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool) and value == 0
