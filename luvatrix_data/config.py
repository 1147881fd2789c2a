from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from luvatrix_data.accessors import MISSING


# Props-style (camelCase) names accepted by ``DataConfig.from_mapping``.
_PROP_ALIASES: dict[str, str] = {
    "tickValues": "tick_values",
    "tickFormat": "tick_format",
    "sortKey": "sort_key",
    "sortOrder": "sort_order",
    "eventKey": "event_key",
}


@dataclass(frozen=True)
class DataConfig:
    data: Any = None
    x: Any = MISSING
    y: Any = MISSING
    y0: Any = MISSING
    accessors: Mapping[str, Any] = field(default_factory=dict)
    domain: Any = None
    samples: int | None = None
    scale: Any = None
    categories: Any = None
    tick_values: Any = None
    tick_format: Any = None
    sort_key: Any = None
    sort_order: str = "ascending"
    event_key: Any = None
    horizontal: bool = False

    @classmethod
    def from_mapping(cls, props: Mapping[str, Any]) -> "DataConfig":
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        accessors: dict[str, Any] = dict(props.get("accessors") or {})
        for key, value in props.items():
            name = _PROP_ALIASES.get(key, key)
            if name == "accessors":
                continue
            if name in known:
                kwargs[name] = value
            else:
                accessors[key] = value
        if kwargs.get("sort_order") is None:
            kwargs.pop("sort_order", None)
        return cls(accessors=accessors, **kwargs)

    def accessor_override(self, name: str) -> Any:
        """Override for an expected key, or ``MISSING`` when none was given."""
        if name in ("x", "y", "y0"):
            return getattr(self, name)
        return self.accessors.get(name, MISSING)


def coerce_config(config: DataConfig | Mapping[str, Any] | None) -> DataConfig:
    if config is None:
        return DataConfig()
    if isinstance(config, DataConfig):
        return config
    if isinstance(config, Mapping):
        return DataConfig.from_mapping(config)
    raise TypeError(f"unsupported config type: {type(config)!r}")
