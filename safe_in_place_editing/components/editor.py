"""Script block instantiating a client-side in-place editor."""

from typing import Any, Mapping

from django.conf import settings
from django.http import HttpRequest
from django.middleware.csrf import get_token
from django.shortcuts import resolve_url
from markupsafe import Markup

from ..conf import EditorOptions
from ..naming import boolean_text
from ..ui import javascript_tag, js_string, options_for_javascript

CSRF_MIDDLEWARE = "django.middleware.csrf.CsrfViewMiddleware"

# One masked token per request keeps every editor on a page identical across renders
_CSRF_TOKEN_ATTR = "_safe_in_place_editing_csrf_token"


def csrf_protection_active() -> bool:
    return CSRF_MIDDLEWARE in getattr(settings, "MIDDLEWARE", ())


def csrf_token_for(request: HttpRequest | None) -> str | None:
    """CSRF token to send with editor requests, or None when protection is off."""
    if request is None or not csrf_protection_active():
        return None
    token = getattr(request, _CSRF_TOKEN_ATTR, None)
    if token is None:
        token = get_token(request)
        setattr(request, _CSRF_TOKEN_ATTR, token)
    return token


def _collection(start_value: bool | None) -> str:
    true_choice = f"['true',{js_string(boolean_text(True))}]"
    false_choice = f"['false',{js_string(boolean_text(False))}]"
    if start_value:
        return f"[{true_choice},{false_choice}]"
    return f"[{false_choice},{true_choice}]"


def build_js_options(options: EditorOptions, callback_expression: str) -> dict[str, str]:
    """
    Map editor options onto Ajax.InPlaceEditor constructor options.

    Values are rendered JavaScript source. Text values become string
    literals; callbacks and ajax_options are inserted verbatim.
    """
    js_options = {}

    if options.rows:
        js_options["rows"] = str(int(options.rows))
    if options.cols:
        js_options["cols"] = str(int(options.cols))
    if options.size:
        js_options["size"] = str(int(options.size))
    if options.ajax_options:
        js_options["ajaxOptions"] = options.ajax_options
    if options.script:
        js_options["htmlResponse"] = "false"

    texts = {
        "cancelText": options.cancel_text,
        "okText": options.save_text,
        "loadingText": options.loading_text,
        "savingText": options.saving_text,
        "clickToEditText": options.click_to_edit_text,
        "textBetweenControls": options.text_between_controls,
        "externalControl": options.external_control,
    }
    for key, text in texts.items():
        if text:
            js_options[key] = js_string(text)

    if options.load_text_url:
        js_options["loadTextURL"] = js_string(resolve_url(options.load_text_url))

    js_options["callback"] = f"function(form) {{ return {callback_expression}; }}"

    if options.is_boolean:
        js_options["collection"] = _collection(options.start_value)

    js_options["onFailure"] = options.on_failure

    if options.lock_var is not None:
        js_options["onComplete"] = (
            "function(transport, element) "
            f"{{{options.on_complete}(transport,element,{js_string(options.lock_var)});}}"
        )
    else:
        js_options["onComplete"] = options.on_complete

    return js_options


def safe_in_place_editor(
    field_id: str,
    options: EditorOptions | Mapping[str, Any] | None = None,
    request: HttpRequest | None = None,
) -> Markup:
    """
    Make the element with DOM id field_id an in-place editor.

    When the user clicks the element a form replaces it; on submit the form
    is serialized and POSTed to options.url, and the element content is
    replaced with the response body. Failures go to the on_failure callback,
    completed requests to on_complete, which also receives the lock variable
    name when lock tracking is on so it can follow the server's increment.

    Args:
        field_id: DOM id of the element to make editable
        options: EditorOptions (or a dict of them); url is required
        request: Current request, used for the CSRF token

    Returns:
        The script block as Markup.
    """
    options = EditorOptions.coerce(options).with_defaults()
    if options.url is None:
        raise ValueError("safe_in_place_editor needs a url option")

    callback_expression = options.with_
    token = csrf_token_for(request)
    if token:
        callback_expression += f" + '&csrfmiddlewaretoken=' + encodeURIComponent({js_string(token)})"

    function = ""
    if options.lock_var is not None:
        lock_version = int(options.lock_version or 0)
        function = f"window[{js_string(options.lock_var)}]={lock_version};"

    editor_class = "InPlaceCollectionEditor" if options.is_boolean else "InPlaceEditor"
    function += f"new Ajax.{editor_class}("
    function += f"{js_string(field_id)}, {js_string(resolve_url(options.url))}"
    function += ", " + options_for_javascript(build_js_options(options, callback_expression))
    function += ")"

    return javascript_tag(function)
