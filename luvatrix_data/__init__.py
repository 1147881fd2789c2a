from luvatrix_data.accessors import MISSING, create_accessor, get_current_axis, remove_undefined, resolve_accessor
from luvatrix_data.adapters import get_length, parse_datum
from luvatrix_data.api import add_event_keys, get_data
from luvatrix_data.categorical import (
    create_string_map,
    get_categories,
    get_strings_from_axes,
    get_strings_from_categories,
    get_strings_from_data,
)
from luvatrix_data.config import DataConfig, coerce_config
from luvatrix_data.downsample import DownsamplePolicy, downsample, downsample_visible
from luvatrix_data.errors import ChartDataError, InvalidDomainError
from luvatrix_data.formatting import clean_data, format_data, sort_data
from luvatrix_data.generate import generate_data, generate_data_array
from luvatrix_data.scales import get_base_scale, get_scale_type

__all__ = [
    "ChartDataError",
    "DataConfig",
    "DownsamplePolicy",
    "InvalidDomainError",
    "MISSING",
    "add_event_keys",
    "clean_data",
    "coerce_config",
    "create_accessor",
    "create_string_map",
    "downsample",
    "downsample_visible",
    "format_data",
    "generate_data",
    "generate_data_array",
    "get_base_scale",
    "get_categories",
    "get_current_axis",
    "get_data",
    "get_length",
    "get_scale_type",
    "get_strings_from_axes",
    "get_strings_from_categories",
    "get_strings_from_data",
    "parse_datum",
    "remove_undefined",
    "resolve_accessor",
    "sort_data",
]
