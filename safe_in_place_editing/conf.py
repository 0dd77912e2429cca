"""Configuration for safe in-place editors."""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from django.conf import settings

DEFAULTS = {
    "SAVE_TEXT": "OK",
    "CANCEL_TEXT": "Cancel",
    "ON_COMPLETE": "safeInPlaceEditorOnComplete",
    "ON_FAILURE": "safeInPlaceEditorOnFailure",
    "URL_NAMESPACE": None,
    "TRUE_TEXT": "Yes",
    "FALSE_TEXT": "No",
}

# Serializes the editor form; '+' is swapped for '%20' so spaces survive the round trip
DEFAULT_WITH = "Form.serialize(form).replace(/\\+/g,'%20')"


def get_setting(name: str) -> Any:
    """Read one key of the SAFE_IN_PLACE_EDITING setting, falling back to DEFAULTS."""
    user_settings = getattr(settings, "SAFE_IN_PLACE_EDITING", None) or {}
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]


@dataclass(frozen=True)
class EditorOptions:
    """
    Options for one client-side in-place editor.

    Attributes map onto the Ajax.InPlaceEditor options of the same meaning:
        url: Where the edited value is POSTed (URL, view name or model)
        rows: Number of rows (more than 1 uses a TEXTAREA)
        cols: Characters the text input should span
        size: Synonym for cols for a single line input
        ajax_options: Raw JS object passed through to Ajax.Updater
        script: Evaluate the response as JavaScript instead of HTML
        cancel_text / save_text / loading_text / saving_text: Display texts
        click_to_edit_text: Hover text on the editable element
        text_between_controls: Text between the save and cancel controls
        external_control: DOM id of an external control entering edit mode
        load_text_url: URL the initial editor content is loaded from
        with_: JS expression building the request body, `form` is in scope
        on_complete / on_failure: Names of the JS callback functions
        is_boolean: Offer a Yes/No picker instead of a text field
        start_value: Which boolean value the picker starts with
        lock_var: Name of the window variable tracking the lock version
        lock_version: Initial value of the lock variable
    """

    url: Any = None
    rows: int | None = None
    cols: int | None = None
    size: int | None = None
    ajax_options: str | None = None
    script: bool | None = None
    cancel_text: str | None = None
    save_text: str | None = None
    loading_text: str | None = None
    saving_text: str | None = None
    click_to_edit_text: str | None = None
    text_between_controls: str | None = None
    external_control: str | None = None
    load_text_url: Any = None
    with_: str | None = None
    on_complete: str | None = None
    on_failure: str | None = None
    is_boolean: bool | None = None
    start_value: bool | None = None
    lock_var: str | None = None
    lock_version: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "EditorOptions":
        """Build options from a dict, accepting 'with' as an alias of 'with_'."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            if key == "with":
                key = "with_"
            if key not in known:
                raise TypeError(f"Unknown in-place editor option: {key!r}")
            kwargs[key] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, options: "EditorOptions | Mapping[str, Any] | None") -> "EditorOptions":
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)

    def merge(self, **changes: Any) -> "EditorOptions":
        """Return a copy with the given options replaced."""
        return replace(self, **changes)

    def with_defaults(self) -> "EditorOptions":
        """Fill the options that have settings-driven defaults, keeping explicit values."""
        return replace(
            self,
            with_=self.with_ or DEFAULT_WITH,
            on_complete=self.on_complete or get_setting("ON_COMPLETE"),
            on_failure=self.on_failure or get_setting("ON_FAILURE"),
            save_text=self.save_text or get_setting("SAVE_TEXT"),
            cancel_text=self.cancel_text or get_setting("CANCEL_TEXT"),
        )
