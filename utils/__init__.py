"""Shared utilities for the backend."""
from utils.case import dict_keys_to_camel, iso, row_to_camel, to_camel_key
from utils.dates import as_utc, utc_now
from utils.responses import failure, success
from utils.slug import slugify

__all__ = [
    "to_camel_key",
    "dict_keys_to_camel",
    "iso",
    "row_to_camel",
    "success",
    "failure",
    "slugify",
    "as_utc",
    "utc_now",
]
