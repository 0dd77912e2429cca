"""Markup primitives for the in-place editor helpers."""

from typing import Any, Mapping

from django.forms.utils import flatatt
from django.templatetags.static import static
from django.utils.html import escapejs
from markupsafe import Markup, escape

from .naming import boolean_text

SUPPORT_SCRIPT = "safe_in_place_editing/safe_in_place_editing.js"


def format_value(value: Any, escape_html: bool = True) -> str:
    """Text shown for an attribute value: Yes/No for booleans, '' for None, escaped otherwise."""
    if isinstance(value, bool):
        return boolean_text(value)
    if value is None:
        return ""
    if escape_html:
        return str(escape(value))
    return str(value)


def js_string(value: Any) -> str:
    """Single-quoted JavaScript string literal."""
    return f"'{escapejs(str(value))}'"


def options_for_javascript(options: Mapping[str, str]) -> str:
    """Render a JS object literal from already-rendered values, keys sorted."""
    return "{" + ", ".join(sorted(f"{key}:{value}" for key, value in options.items())) + "}"


def content_tag(name: str, content: str, attrs: Mapping[str, Any] | None = None) -> Markup:
    """Render an HTML element; content is inserted as is."""
    return Markup(f"<{name}{flatatt(attrs or {})}>{content}</{name}>")


def javascript_tag(code: str) -> Markup:
    return Markup(
        '<script type="text/javascript">\n'
        "//<![CDATA[\n"
        f"{code}\n"
        "//]]>\n"
        "</script>"
    )


def javascript_include_tag(path: str = SUPPORT_SCRIPT) -> Markup:
    """Script tag loading a static file, by default the editor support callbacks."""
    return Markup(f'<script type="text/javascript" src="{escape(static(path))}"></script>')
