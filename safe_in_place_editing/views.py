"""Update views generated per (model, attribute) pair."""

import logging
from typing import Any, Callable

from django.core.exceptions import ValidationError
from django.http import HttpRequest, HttpResponse, HttpResponseServerError
from django.urls import URLPattern, path
from django.utils.text import camel_case_to_spaces
from django.views import View

from .exceptions import StaleObjectError
from .naming import action_name, object_name_for
from .signals import in_place_edit_conflict, in_place_edit_saved
from .store import get_store
from .ui import format_value

logger = logging.getLogger(__name__)

PLAIN_TEXT = "text/plain; charset=utf-8"

# (object_name, attribute) -> view function
_registered_actions: dict[tuple[str, str], Callable] = {}


def get_registered_actions() -> dict[tuple[str, str], Callable]:
    """Get the registered update views, keyed by (object name, attribute)."""
    return dict(_registered_actions)


def _request_param(request: HttpRequest, name: str) -> str | None:
    if name in request.POST:
        return request.POST[name]
    return request.GET.get(name)


def _failure_message(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(error.messages)
    return str(error) or error.__class__.__name__


class InPlaceEditView(View):
    """
    Apply one in-place edit to one attribute of one record.

    Request parameters:
        id: Primary key of the record (taken from the URL when routed with <id>)
        value: The new attribute value
        lock_version: Optional lock version last seen by the client

    Responds with the new value as plain text (HTML-escaped, booleans as
    Yes/No) or with a 500 plain text error message.
    """

    model: Any = None
    attribute: str | None = None
    queryset = None
    http_method_names = ["post"]

    def post(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        store = get_store(self.model)
        item_id = kwargs.get("id")
        if item_id is None:
            item_id = _request_param(request, "id")
        item = store.get_item_by_id(item_id, self.queryset)

        lock_version = _request_param(request, "lock_version")

        try:
            item = store.set_field_value(
                item,
                self.attribute,
                _request_param(request, "value"),
                lock_version=lock_version,
                queryset=self.queryset,
            )
        except StaleObjectError as error:
            logger.info(
                "Rejected stale edit of %s %s.%s: client lock version %s, stored %s",
                store.verbose_name, item.pk, self.attribute, error.expected, error.actual,
            )
            in_place_edit_conflict.send(
                sender=store.model, instance=item, attribute=self.attribute,
                request=request, lock_version=lock_version,
            )
            return self.render_error(str(error))
        except Exception as error:
            logger.warning(
                "Unable to save %s %s.%s: %s", store.verbose_name, item.pk, self.attribute, error,
            )
            return self.render_error(_failure_message(error))

        in_place_edit_saved.send(
            sender=store.model, instance=item, attribute=self.attribute, request=request,
        )
        return HttpResponse(
            format_value(store.get_field_value(item, self.attribute)), content_type=PLAIN_TEXT
        )

    def render_error(self, message: str) -> HttpResponse:
        return HttpResponseServerError(message, content_type=PLAIN_TEXT)


def _object_name(model: Any) -> str:
    if isinstance(model, type):
        return object_name_for(model)
    name = str(model)
    if "." in name:
        return camel_case_to_spaces(name.rsplit(".", 1)[1]).replace(" ", "_")
    return name


def safe_in_place_edit_for(model: Any, attribute: str, **options) -> Callable:
    """
    Register and return the update view for one model attribute.

    The view is named set_<object>_<attribute>, the name the editor helpers
    reverse by default. Registering the same pair again replaces the view.

    Args:
        model: Model class, "app_label.ModelName" label or object name ("post")
        attribute: Name of the model field to update
        **options: InPlaceEditView attributes, e.g. queryset

    Example:
        # blog/urls.py
        urlpatterns = [
            path("set_post_title/<id>/", safe_in_place_edit_for(Post, "title"),
                 name="set_post_title"),
        ]
    """
    object_name = _object_name(model)
    name = action_name(object_name, attribute)

    view = InPlaceEditView.as_view(model=model, attribute=attribute, **options)
    view.__name__ = name
    view.__qualname__ = name

    _registered_actions[(object_name, attribute)] = view
    logger.debug("Registered in-place edit action %s", name)
    return view


def edit_path(model: Any, attribute: str, **options) -> URLPattern:
    """URL pattern routing set_<object>_<attribute>/<id>/ to a new update view."""
    view = safe_in_place_edit_for(model, attribute, **options)
    return path(f"{view.__name__}/<str:id>/", view, name=view.__name__)
