"""Exceptions raised by safe in-place editing."""


class SafeInPlaceEditingError(Exception):
    """Base class for all safe in-place editing errors."""


class ModelResolutionError(SafeInPlaceEditingError):
    """A model reference could not be resolved to exactly one model class."""


class UnboundObjectError(SafeInPlaceEditingError, LookupError):
    """A named object reference has no instance bound in the template context."""

    def __init__(self, object_name: str):
        self.object_name = object_name
        super().__init__(
            f"If passing '{object_name}' to safe_in_place_editor_field, "
            f"'{object_name}' must refer to the object for which the field is being built"
        )


class StaleObjectError(SafeInPlaceEditingError):
    """The client's lock version does not match the record's current lock version."""

    def __init__(self, verbose_name: str, expected: str, actual: str | None):
        self.verbose_name = verbose_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Somebody else already edited this {verbose_name}. "
            "Reload the page to obtain the updated version."
        )
