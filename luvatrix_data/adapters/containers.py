from __future__ import annotations

from collections.abc import Iterator, Sequence
from types import MappingProxyType
from typing import Any

import numpy as np
import pandas as pd


# Fields whose container values are handed on untouched (error bars keep their own structure).
IMMUTABLE_DATUM_WHITELIST = frozenset({"errorX", "errorY"})


def is_iterable(value: Any) -> bool:
    """True for external containers that hold a whole dataset."""
    return isinstance(value, (pd.DataFrame, pd.Series))


def is_immutable(value: Any) -> bool:
    """True for external record types that must be converted before use."""
    return isinstance(value, (pd.Series, MappingProxyType))


def is_dataset(value: Any) -> bool:
    if is_iterable(value) or isinstance(value, np.ndarray):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def get_length(data: Any) -> int | None:
    if isinstance(data, np.ndarray):
        return int(data.shape[0]) if data.ndim > 0 else None
    if is_dataset(data):
        return len(data)
    return None


def iter_data(data: Any) -> Iterator[Any]:
    if isinstance(data, pd.DataFrame):
        for _, row in data.iterrows():
            yield row
        return
    if isinstance(data, pd.Series):
        yield from data.tolist()
        return
    yield from data


def shallow_to_plain(record: Any, whitelist: frozenset[str] | set[str] = frozenset()) -> dict[Any, Any]:
    items = record.items()
    return {key: (value if key in whitelist else to_plain(value)) for key, value in items}


def to_plain(value: Any) -> Any:
    if isinstance(value, pd.DataFrame):
        return value.to_dict(orient="records")
    if isinstance(value, pd.Series):
        return value.to_dict()
    if isinstance(value, MappingProxyType):
        return dict(value)
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


def parse_datum(datum: Any) -> Any:
    """Unwrap external records into plain dicts; anything else is returned unchanged."""
    if is_immutable(datum):
        return shallow_to_plain(datum, IMMUTABLE_DATUM_WHITELIST)
    return datum
