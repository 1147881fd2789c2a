from luvatrix_data.adapters.containers import (
    IMMUTABLE_DATUM_WHITELIST,
    get_length,
    is_dataset,
    is_immutable,
    is_iterable,
    iter_data,
    parse_datum,
    shallow_to_plain,
)

__all__ = [
    "IMMUTABLE_DATUM_WHITELIST",
    "get_length",
    "is_dataset",
    "is_immutable",
    "is_iterable",
    "iter_data",
    "parse_datum",
    "shallow_to_plain",
]
