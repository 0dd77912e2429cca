import pytest

from blog.models import Comment, Note, Post


@pytest.fixture
def post(db):
    return Post.objects.create(pk=42, title="Draft", body="First words", published=False)


@pytest.fixture
def locked_post(post):
    """Post #42 as stored after three earlier edits."""
    Post.objects.filter(pk=post.pk).update(lock_version=3)
    post.refresh_from_db()
    return post


@pytest.fixture
def note(db):
    return Note.objects.create(pk=42, title="Scratch", priority=1)


@pytest.fixture
def comment(post):
    return Comment.objects.create(pk=7, post=post, text="Nice post")
