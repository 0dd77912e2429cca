from django.apps import AppConfig


class SafeInPlaceEditingConfig(AppConfig):
    name = "safe_in_place_editing"
    verbose_name = "Safe in-place editing"
