"""Signals sent by the in-place update views."""

from django.dispatch import Signal

# Sent after a successful update.
# Arguments: sender (model class), instance, attribute, request
in_place_edit_saved = Signal()

# Sent when an update is rejected because the client's lock version is stale.
# Arguments: sender (model class), instance, attribute, request, lock_version
in_place_edit_conflict = Signal()
