"""In-place editor components."""

from .editable_field import safe_in_place_editor_field
from .editor import build_js_options, csrf_token_for, safe_in_place_editor

__all__ = [
    "safe_in_place_editor_field",
    "safe_in_place_editor",
    "build_js_options",
    "csrf_token_for",
]
