"""Common utilities for rendering."""

from .validation import (
    is_finite_number,
    require_finite,
    require_rgba,
    validate_image_buffer,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_array_info,
    get_array_stats,
)

__all__ = [
    # Validation
    "is_finite_number",
    "require_finite",
    "require_rgba",
    "validate_image_buffer",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_array_info",
    "get_array_stats",
]
