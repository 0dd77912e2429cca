"""Django-backed record store for in-place updates."""

import logging
from typing import Any, Type

from django import forms
from django.apps import apps
from django.core.exceptions import FieldDoesNotExist, ValidationError
from django.db import models, transaction
from django.http import Http404

from .exceptions import ModelResolutionError, StaleObjectError
from .naming import object_name_for

logger = logging.getLogger(__name__)


def resolve_model(model: Any) -> Type[models.Model]:
    """
    Resolve a model reference to a model class.

    Accepts a model class, an "app_label.ModelName" label, or an object name
    such as "post" or "blog_post" matched against every installed model.
    """
    if isinstance(model, type) and issubclass(model, models.Model):
        return model

    name = str(model)
    if "." in name:
        try:
            return apps.get_model(name)
        except (LookupError, ValueError) as error:
            raise ModelResolutionError(f"No installed model is labelled {name!r}") from error

    matches = [
        candidate for candidate in apps.get_models()
        if name in (object_name_for(candidate), candidate._meta.model_name)
    ]
    if not matches:
        raise ModelResolutionError(f"No installed model is named {name!r}")
    if len(matches) > 1:
        labels = ", ".join(sorted(m._meta.label for m in matches))
        raise ModelResolutionError(
            f"Model name {name!r} is ambiguous ({labels}); use an 'app_label.ModelName' label"
        )
    return matches[0]


def has_lock_version(item: Any) -> bool:
    return hasattr(item, "lock_version")


def lock_version_of(item: Any) -> str | None:
    """The item's lock version as a string, or None if it has none.

    An unset version counts as 0, the value it is bumped from.
    """
    if not has_lock_version(item):
        return None
    return str(item.lock_version or 0)


class DjangoRecordStore:
    """
    Record access for one model, backed by the Django ORM.

    Provides:
    - Lazy model resolution (models may be referenced before the app registry is ready)
    - Record lookup by primary key
    - Single attribute updates guarded by the lock version
    """

    def __init__(self, model: Any):
        self._model_ref = model
        self._model: Type[models.Model] | None = None

    @property
    def model(self) -> Type[models.Model]:
        if self._model is None:
            self._model = resolve_model(self._model_ref)
        return self._model

    @property
    def verbose_name(self) -> str:
        return str(self.model._meta.verbose_name).lower()

    def get_queryset(self, queryset: models.QuerySet | None = None) -> models.QuerySet:
        if queryset is not None:
            return queryset.all()
        return self.model._default_manager.all()

    def get_item_by_id(self, item_id: Any, queryset: models.QuerySet | None = None) -> models.Model:
        """Find an item by its ID, raising Http404 when there is none."""
        try:
            return self.get_queryset(queryset).get(pk=item_id)
        except (self.model.DoesNotExist, ValueError, ValidationError):
            raise Http404(f"No {self.verbose_name} matches id {item_id!r}")

    def get_field_value(self, item: models.Model, field_name: str) -> Any:
        return getattr(item, field_name)

    def set_field_value(
        self,
        item: models.Model,
        field_name: str,
        value: Any,
        lock_version: str | None = None,
        queryset: models.QuerySet | None = None,
    ) -> models.Model:
        """
        Write one attribute and return the freshly saved item.

        When lock_version is given it must equal the stored lock version,
        otherwise StaleObjectError is raised and nothing is written. The
        row is locked for the duration of the check and the write. Items
        with a lock version always get it incremented, also when the value
        did not change.
        """
        with transaction.atomic():
            current = self.get_queryset(queryset).select_for_update().get(pk=item.pk)

            current_version = lock_version_of(current)
            if lock_version is not None and lock_version != current_version:
                raise StaleObjectError(self.verbose_name, lock_version, current_version)

            field = current._meta.get_field(field_name)
            if isinstance(field, models.BooleanField):
                # The collection editor posts "true" / "false"
                value = forms.NullBooleanField().to_python(value)
            setattr(current, field.attname, field.to_python(value))

            update_fields = {field.name}
            update_fields.update(
                f.name for f in current._meta.concrete_fields if getattr(f, "auto_now", False)
            )
            if current_version is not None and not getattr(current, "auto_lock_version", False):
                update_fields = self._bump_lock_version(current, update_fields)

            current.save(update_fields=update_fields)

        logger.debug(
            "Updated %s.%s of %s %s", self.model._meta.label, field_name, self.verbose_name, current.pk
        )
        return current

    @staticmethod
    def _bump_lock_version(item: models.Model, update_fields: set[str]) -> set[str]:
        from .models import bump_lock_version

        try:
            item._meta.get_field("lock_version")
        except FieldDoesNotExist:
            # A computed lock version cannot be persisted
            return update_fields
        return bump_lock_version(item, update_fields)


# Stores keyed by the model reference they were created for
_stores: dict[Any, DjangoRecordStore] = {}


def get_store(model: Any) -> DjangoRecordStore:
    """Get or create a store for a model reference."""
    if model not in _stores:
        _stores[model] = DjangoRecordStore(model)
    return _stores[model]
