"""Model support for optimistic locking."""

from django.db import models


def bump_lock_version(instance, update_fields=None):
    """
    Increment the instance's lock version ahead of a save.

    Returns the update_fields to pass on to save(), extended with
    'lock_version' when a restricted field list was given.
    """
    instance.lock_version = (instance.lock_version or 0) + 1
    if update_fields is not None:
        update_fields = set(update_fields) | {"lock_version"}
    return update_fields


class LockVersionMixin(models.Model):
    """
    Abstract model adding a lock version counter.

    The counter starts at 0 and is incremented on every save of an existing
    row, so any update (through an in-place editor, the admin or code) makes
    lock versions held by other clients stale.

    Example:
        class Post(LockVersionMixin):
            title = models.CharField(max_length=200)
    """

    lock_version = models.PositiveIntegerField(default=0, editable=False)

    # save() increments lock_version itself
    auto_lock_version = True

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self._state.adding:
            kwargs["update_fields"] = bump_lock_version(self, kwargs.get("update_fields"))
        super().save(*args, **kwargs)
