"""Names shared by the update views and the editor helpers."""

from typing import Any

from django.utils.text import camel_case_to_spaces

from .conf import get_setting


def object_name_for(obj: Any) -> str:
    """Underscored class name of a model class or instance, e.g. BlogPost -> blog_post."""
    cls = obj if isinstance(obj, type) else type(obj)
    return camel_case_to_spaces(cls.__name__).replace(" ", "_")


def action_name(object_name: str, attribute: str) -> str:
    return f"set_{object_name}_{attribute}"


def url_name(object_name: str, attribute: str) -> str:
    """URL pattern name of an update action, namespaced when URL_NAMESPACE is set."""
    name = action_name(object_name, attribute)
    namespace = get_setting("URL_NAMESPACE")
    if namespace:
        return f"{namespace}:{name}"
    return name


def dom_id(object_name: str, attribute: str, pk: Any) -> str:
    return f"{object_name}_{attribute}_{pk}_in_place_editor"


def lock_var_name(object_name: str, pk: Any) -> str:
    # Shared by every field of the row so each edit keeps the others in step
    return f"{object_name}_{pk}_safeInPlaceEditorLockVersion"


def boolean_text(value: Any) -> str:
    return get_setting("TRUE_TEXT") if value else get_setting("FALSE_TEXT")
