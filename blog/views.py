"""Pages showing in-place editors for the blog demo."""

from django.shortcuts import get_object_or_404, render

from .models import Note, Post


def post_list(request):
    return render(request, "blog/post_list.html", {
        "posts": Post.objects.prefetch_related("comments"),
        "notes": Note.objects.all(),
    })


def post_detail(request, pk):
    # Bound by name so the template can use {% safe_in_place_editor_field "post" ... %}
    return render(request, "blog/post_detail.html", {"post": get_object_or_404(Post, pk=pk)})
