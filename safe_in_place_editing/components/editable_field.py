"""Editable field component - a value span wired to an in-place editor."""

from typing import Any, Mapping

from django.http import HttpRequest
from django.urls import reverse
from markupsafe import Markup

from ..conf import DEFAULT_WITH, EditorOptions
from ..exceptions import UnboundObjectError
from ..naming import boolean_text, dom_id, lock_var_name, object_name_for, url_name
from ..store import has_lock_version, lock_version_of
from ..ui import content_tag, format_value, js_string
from .editor import safe_in_place_editor


def _bind_object(obj: Any, context: Mapping[str, Any] | None) -> tuple[Any, str]:
    """Return (instance, object name) for an instance or a name bound in context."""
    if not isinstance(obj, str):
        return obj, object_name_for(obj)
    instance = context.get(obj) if context is not None else None
    if instance is None:
        raise UnboundObjectError(obj)
    return instance, obj


def safe_in_place_editor_field(
    obj: Any,
    attribute: str,
    tag_options: Mapping[str, Any] | None = None,
    editor_options: EditorOptions | Mapping[str, Any] | None = None,
    no_escape: bool = False,
    *,
    context: Mapping[str, Any] | None = None,
    request: HttpRequest | None = None,
) -> Markup:
    """
    Render an attribute as a span plus the script making it editable in place.

    Args:
        obj: A model instance, or the name of one bound in context
        attribute: Attribute to show and edit
        tag_options: Extra span attributes, overriding id and class
        editor_options: EditorOptions (or a dict of them) for the editor
        no_escape: Insert the value without HTML escaping. Only for values
            that are meant to contain HTML.
        context: Mapping (e.g. a template context) to look named objects up in
        request: Current request, used for the CSRF token

    Objects with a lock_version take part in optimistic locking: the lock
    version is tracked in a window variable shared by the whole row (override
    with editor option lock_var) and sent as the lock_version parameter with
    every edit. Boolean values get a Yes/No picker unless is_boolean says
    otherwise.

    The update URL defaults to the set_<object>_<attribute> URL pattern with
    the object's primary key as id.
    """
    obj, object_name = _bind_object(obj, context)
    options = EditorOptions.coerce(editor_options)

    if has_lock_version(obj):
        lock_var = options.lock_var or lock_var_name(object_name, obj.pk)
        options = options.merge(
            lock_version=lock_version_of(obj),
            lock_var=lock_var,
            with_=(options.with_ or DEFAULT_WITH) + f" + '&lock_version=' + window[{js_string(lock_var)}]",
        )

    value = getattr(obj, attribute)
    is_boolean = bool(options.is_boolean) or isinstance(value, bool)

    if is_boolean:
        options = options.merge(start_value=bool(value))
        display = boolean_text(value)
    else:
        display = format_value(value, escape_html=not no_escape)

    attrs = {
        "id": dom_id(object_name, attribute, obj.pk),
        "class": "in_place_editor_field",
    }
    attrs.update(tag_options or {})

    if options.url is None:
        options = options.merge(url=reverse(url_name(object_name, attribute), kwargs={"id": obj.pk}))

    if options.is_boolean is None:
        options = options.merge(is_boolean=is_boolean)

    return content_tag("span", display, attrs) + safe_in_place_editor(attrs["id"], options, request=request)
