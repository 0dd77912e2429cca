"""Django models for the blog demo."""

from django.db import models

from safe_in_place_editing.models import LockVersionMixin


class Post(LockVersionMixin):
    """A blog post, edited with optimistic locking."""

    title = models.CharField(max_length=200)
    body = models.TextField(blank=True)
    published = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.title


class Comment(models.Model):
    """A comment on a post, with a hand-rolled lock version column."""

    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="comments")
    text = models.TextField()
    lock_version = models.IntegerField(default=0)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.text[:40]


class Note(models.Model):
    """A scratch note without a lock version; last write wins."""

    title = models.CharField(max_length=200)
    priority = models.PositiveSmallIntegerField(default=0)
    done = models.BooleanField(default=False)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.title
