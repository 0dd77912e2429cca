"""Django admin configuration for the blog demo."""

from django.contrib import admin

from .models import Comment, Note, Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("title", "published", "lock_version", "updated_at")
    search_fields = ("title", "body")
    readonly_fields = ("lock_version", "updated_at")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("post", "text", "lock_version")


@admin.register(Note)
class NoteAdmin(admin.ModelAdmin):
    list_display = ("title", "priority", "done")
