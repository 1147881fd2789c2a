from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from luvatrix_data.accessors import MISSING, resolve_accessor
from luvatrix_data.adapters.containers import get_length
from luvatrix_data.config import DataConfig, coerce_config
from luvatrix_data.formatting import format_data
from luvatrix_data.generate import generate_data


def get_data(config: DataConfig | Mapping[str, Any] | None = None) -> list[dict[Any, Any]]:
    """Formatted, sorted, cleaned and event-keyed records for a chart.

    Explicit ``data`` is formatted as given (an empty dataset gives ``[]``);
    without it a synthetic series is generated from the domain and samples.
    """
    cfg = coerce_config(config)
    if cfg.data is not None:
        if get_length(cfg.data) == 0:
            return []
        data = format_data(cfg.data, cfg)
    else:
        data = format_data(generate_data(cfg), cfg)
    return add_event_keys(cfg, data)


def add_event_keys(config: DataConfig | Mapping[str, Any] | None, data: Sequence[Mapping[Any, Any]]) -> list[dict[Any, Any]]:
    cfg = coerce_config(config)
    accessor = resolve_accessor(cfg.event_key)
    keyed = []
    for index, datum in enumerate(data):
        event_key = datum.get("eventKey") or _or_none(accessor(datum)) or index
        keyed.append({"eventKey": event_key, **datum})
    return keyed


def _or_none(value: Any) -> Any:
    return None if value is MISSING else value
