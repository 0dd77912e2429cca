"""Tests for the generated in-place update views"""

import logging
from datetime import timedelta

import pytest
from django.http import Http404
from django.test import Client
from django.utils import timezone

from blog.models import Comment, Note, Post
from safe_in_place_editing import get_registered_actions, safe_in_place_edit_for
from safe_in_place_editing.signals import in_place_edit_conflict, in_place_edit_saved


@pytest.mark.django_db
class TestUpdateWithoutLockVersion:
    """Records without a lock version: last write wins."""

    def test_value_is_saved_and_echoed(self, client: Client, note) -> None:
        response = client.post("/set_note_title/42/", {"value": "Hello"})

        assert response.status_code == 200
        assert response.content == b"Hello"
        assert response["Content-Type"].startswith("text/plain")
        note.refresh_from_db()
        assert note.title == "Hello"

    def test_returned_value_is_html_escaped(self, client: Client, note) -> None:
        response = client.post("/set_note_title/42/", {"value": "<b>bold</b> & more"})

        assert response.content == b"&lt;b&gt;bold&lt;/b&gt; &amp; more"
        note.refresh_from_db()
        assert note.title == "<b>bold</b> & more"

    def test_value_is_coerced_by_the_model_field(self, client: Client, note) -> None:
        response = client.post("/set_note_priority/42/", {"value": "5"})

        assert response.status_code == 200
        assert response.content == b"5"
        note.refresh_from_db()
        assert note.priority == 5

    def test_boolean_rendered_as_yes_or_no(self, client: Client, note) -> None:
        response = client.post("/set_note_done/42/", {"value": "true"})
        assert response.content == b"Yes"

        response = client.post("/set_note_done/42/", {"value": "false"})
        assert response.content == b"No"
        note.refresh_from_db()
        assert note.done is False

    def test_lock_version_param_without_lock_version_is_a_conflict(self, client: Client, note) -> None:
        response = client.post("/set_note_title/42/", {"value": "Hello", "lock_version": "1"})

        assert response.status_code == 500
        assert "Somebody else already edited this note" in response.content.decode()
        note.refresh_from_db()
        assert note.title == "Scratch"


@pytest.mark.django_db
class TestUpdateWithLockVersion:
    """Records with a lock version are checked against the client's copy."""

    def test_stale_lock_version_blocks_write(self, client: Client, locked_post) -> None:
        response = client.post("/set_post_title/42/", {"value": "Hijacked", "lock_version": "2"})

        assert response.status_code == 500
        assert response["Content-Type"].startswith("text/plain")
        assert response.content.decode() == (
            "Somebody else already edited this post. Reload the page to obtain the updated version."
        )
        locked_post.refresh_from_db()
        assert locked_post.title == "Draft"
        assert locked_post.lock_version == 3

    def test_matching_lock_version_writes_and_increments(self, client: Client, locked_post) -> None:
        response = client.post("/set_post_title/42/", {"value": "Final", "lock_version": "3"})

        assert response.status_code == 200
        assert response.content == b"Final"
        locked_post.refresh_from_db()
        assert locked_post.title == "Final"
        assert locked_post.lock_version == 4

    def test_unchanged_value_still_increments(self, client: Client, locked_post) -> None:
        """The client always assumes an increment, so the server must make one."""
        response = client.post("/set_post_title/42/", {"value": "Draft", "lock_version": "3"})

        assert response.status_code == 200
        locked_post.refresh_from_db()
        assert locked_post.lock_version == 4

    def test_consecutive_edits_follow_the_counter(self, client: Client, post) -> None:
        for version, title in enumerate(["One", "Two", "Three"]):
            response = client.post("/set_post_title/42/", {"value": title, "lock_version": str(version)})
            assert response.status_code == 200

        post.refresh_from_db()
        assert post.title == "Three"
        assert post.lock_version == 3

    def test_missing_lock_version_param_skips_the_check(self, client: Client, locked_post) -> None:
        response = client.post("/set_post_title/42/", {"value": "Unchecked"})

        assert response.status_code == 200
        locked_post.refresh_from_db()
        assert locked_post.title == "Unchecked"
        assert locked_post.lock_version == 4

    def test_auto_now_fields_are_touched(self, client: Client, post) -> None:
        past = timezone.now() - timedelta(days=1)
        Post.objects.filter(pk=42).update(updated_at=past)

        client.post("/set_post_title/42/", {"value": "Draft", "lock_version": "0"})

        post.refresh_from_db()
        assert post.updated_at > past

    def test_boolean_scenario(self, client: Client, post) -> None:
        response = client.post("/set_post_published/42/", {"value": "true", "lock_version": "0"})

        assert response.content == b"Yes"
        post.refresh_from_db()
        assert post.published is True

    def test_plain_lock_version_column_is_incremented(self, client: Client, comment) -> None:
        response = client.post("/set_comment_text/7/", {"value": "Edited", "lock_version": "0"})

        assert response.status_code == 200
        comment.refresh_from_db()
        assert comment.text == "Edited"
        assert comment.lock_version == 1

    def test_plain_lock_version_column_conflict(self, client: Client, comment) -> None:
        response = client.post("/set_comment_text/7/", {"value": "Edited", "lock_version": "5"})

        assert response.status_code == 500
        assert "this comment" in response.content.decode()
        assert Comment.objects.get(pk=7).text == "Nice post"


@pytest.mark.django_db
class TestUpdateFailures:
    """Failures are reported as plain text, never as a server crash page."""

    def test_invalid_value_reports_validation_message(self, client: Client, note, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="safe_in_place_editing"):
            response = client.post("/set_note_priority/42/", {"value": "lots"})

        assert response.status_code == 500
        assert "must be an integer" in response.content.decode()
        assert "Unable to save note 42.priority" in caplog.text
        note.refresh_from_db()
        assert note.priority == 1

    def test_database_error_is_reported(self, client: Client, note) -> None:
        # No value at all: NULL violates the NOT NULL title column
        response = client.post("/set_note_title/42/", {})

        assert response.status_code == 500
        assert response.content
        assert Note.objects.get(pk=42).title == "Scratch"

    def test_unknown_record_is_404(self, client: Client, db) -> None:
        response = client.post("/set_note_title/999/", {"value": "Hello"})
        assert response.status_code == 404

    def test_non_numeric_id_is_404(self, client: Client, db) -> None:
        response = client.post("/set_note_title/abc/", {"value": "Hello"})
        assert response.status_code == 404

    def test_get_is_not_allowed(self, client: Client, note) -> None:
        response = client.get("/set_note_title/42/", {"value": "Hello"})

        assert response.status_code == 405
        assert Note.objects.get(pk=42).title == "Scratch"

    def test_csrf_token_is_required(self, note) -> None:
        client = Client(enforce_csrf_checks=True)
        response = client.post("/set_note_title/42/", {"value": "Hello"})

        assert response.status_code == 403
        assert Note.objects.get(pk=42).title == "Scratch"

    def test_conflict_is_logged(self, client: Client, locked_post, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="safe_in_place_editing"):
            client.post("/set_post_title/42/", {"value": "Late", "lock_version": "1"})

        assert "Rejected stale edit of post 42.title" in caplog.text


@pytest.mark.django_db
class TestUpdateSignals:
    """Signals sent by the update views"""

    def test_saved_signal(self, client: Client, post) -> None:
        received = []

        def handler(sender, instance, attribute, **kwargs):
            received.append((sender, instance.title, attribute))

        in_place_edit_saved.connect(handler)
        try:
            client.post("/set_post_title/42/", {"value": "Signalled", "lock_version": "0"})
        finally:
            in_place_edit_saved.disconnect(handler)

        assert received == [(Post, "Signalled", "title")]

    def test_conflict_signal(self, client: Client, locked_post) -> None:
        received = []

        def handler(sender, lock_version, **kwargs):
            received.append((sender, lock_version))

        in_place_edit_conflict.connect(handler)
        try:
            client.post("/set_post_title/42/", {"value": "Late", "lock_version": "1"})
        finally:
            in_place_edit_conflict.disconnect(handler)

        assert received == [(Post, "1")]


@pytest.mark.django_db
class TestRegistration:
    """safe_in_place_edit_for builds one named view per model attribute"""

    def test_view_is_named_after_the_action(self) -> None:
        view = safe_in_place_edit_for(Note, "title")
        assert view.__name__ == "set_note_title"

    def test_label_and_name_references(self) -> None:
        assert safe_in_place_edit_for("blog.Note", "done").__name__ == "set_note_done"
        assert safe_in_place_edit_for("post", "body").__name__ == "set_post_body"

    def test_registered_actions_include_routed_views(self, client: Client) -> None:
        # Resolving any URL loads the URLconf and with it the edit_path() calls
        client.get("/")
        actions = get_registered_actions()

        assert ("post", "title") in actions
        assert ("note", "priority") in actions

    def test_id_from_request_parameter(self, rf, note) -> None:
        view = safe_in_place_edit_for(Note, "title")
        response = view(rf.post("/", {"id": "42", "value": "From params"}))

        assert response.content == b"From params"

    def test_queryset_restricts_editable_records(self, rf, post) -> None:
        view = safe_in_place_edit_for(Post, "title", queryset=Post.objects.filter(published=True))

        with pytest.raises(Http404):
            view(rf.post("/", {"value": "Nope"}), id="42")
        assert Post.objects.get(pk=42).title == "Draft"

    def test_model_name_resolved_at_request_time(self, rf, note) -> None:
        view = safe_in_place_edit_for("note", "title")
        response = view(rf.post("/", {"value": "Lazy"}), id="42")

        assert response.status_code == 200
        assert Note.objects.get(pk=42).title == "Lazy"
