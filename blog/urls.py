"""URL routes for the blog demo, including one update view per editable attribute."""

from django.urls import path

from safe_in_place_editing import edit_path

from . import views
from .models import Comment, Note, Post

urlpatterns = [
    path("", views.post_list, name="post_list"),
    path("posts/<int:pk>/", views.post_detail, name="post_detail"),
    edit_path(Post, "title"),
    edit_path(Post, "body"),
    edit_path(Post, "published"),
    edit_path(Comment, "text"),
    edit_path(Note, "title"),
    edit_path(Note, "priority"),
    edit_path("blog.Note", "done"),
]
