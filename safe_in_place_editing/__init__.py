"""
Safe in-place editing - lockable AJAX editing of single Django model attributes.

Provides, for the Prototype/Scriptaculous Ajax.InPlaceEditor widget:
- Update views that HTML-escape returned values and report errors as plain text
- Optimistic locking through a lock_version counter checked on every update
- Template helpers rendering the editable span and the editor script

Usage:
    1. Add "safe_in_place_editing" to INSTALLED_APPS and give models that
       need optimistic locking a lock version:

        from safe_in_place_editing.models import LockVersionMixin

        class Post(LockVersionMixin):
            title = models.CharField(max_length=200)
            published = models.BooleanField(default=False)

    2. Route an update view per editable attribute:

        from safe_in_place_editing import edit_path

        urlpatterns = [
            edit_path(Post, "title"),      # set_post_title/<id>/
            edit_path(Post, "published"),
        ]

    3. Render editors in templates (Prototype and Scriptaculous must be loaded):

        {% load safe_in_place_editing %}
        {% safe_in_place_editing_js %}
        {% safe_in_place_editor_field post "title" %}
"""

from .conf import EditorOptions, get_setting
from .exceptions import (
    ModelResolutionError,
    SafeInPlaceEditingError,
    StaleObjectError,
    UnboundObjectError,
)
from .store import DjangoRecordStore, get_store, resolve_model
from .views import InPlaceEditView, edit_path, get_registered_actions, safe_in_place_edit_for
from .components import safe_in_place_editor, safe_in_place_editor_field

__all__ = [
    "EditorOptions",
    "get_setting",
    "SafeInPlaceEditingError",
    "ModelResolutionError",
    "StaleObjectError",
    "UnboundObjectError",
    "DjangoRecordStore",
    "get_store",
    "resolve_model",
    "InPlaceEditView",
    "edit_path",
    "get_registered_actions",
    "safe_in_place_edit_for",
    "safe_in_place_editor",
    "safe_in_place_editor_field",
]
