"""Template tags for safe in-place editing.

    {% load safe_in_place_editing %}
    {% safe_in_place_editing_js %}
    {% safe_in_place_editor_field post "title" rows=3 save_text="Save" %}
    {% safe_in_place_editor_field "post" "published" %}
    {% safe_in_place_editor "custom_element" url="/set_post_body/1/" %}
"""

from django import template

from ..components import safe_in_place_editor, safe_in_place_editor_field
from ..ui import javascript_include_tag

register = template.Library()


@register.simple_tag
def safe_in_place_editing_js():
    """Script tag for the client callbacks used by the editors."""
    return javascript_include_tag()


@register.simple_tag(takes_context=True, name="safe_in_place_editor_field")
def safe_in_place_editor_field_tag(context, obj, attribute, **options):
    """
    Render an editable span for obj.attribute.

    obj is a model instance or the name of a context variable holding one.
    Keyword arguments are editor options, except no_escape, tag_id,
    tag_class and tag_options (a dict of span attributes).
    """
    no_escape = bool(options.pop("no_escape", False))
    tag_options = dict(options.pop("tag_options", None) or {})
    if "tag_id" in options:
        tag_options["id"] = options.pop("tag_id")
    if "tag_class" in options:
        tag_options["class"] = options.pop("tag_class")

    return safe_in_place_editor_field(
        obj,
        attribute,
        tag_options,
        options,
        no_escape,
        context=context,
        request=context.get("request"),
    )


@register.simple_tag(takes_context=True, name="safe_in_place_editor")
def safe_in_place_editor_tag(context, field_id, **options):
    """Make an existing element editable in place; url is required."""
    return safe_in_place_editor(field_id, options, request=context.get("request"))
