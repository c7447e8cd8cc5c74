"""Utility modules."""
from authoring.utils.json_utils import (
    json_dump,
    json_dump_compact,
    json_load,
    json_load_dict,
)
from authoring.utils.time_utils import utc_now

__all__ = [
    "json_dump",
    "json_dump_compact",
    "json_load",
    "json_load_dict",
    "utc_now",
]
