"""Main entry point for the safe in-place editing demo."""

import os
import sys

# Add current directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Initialize Django BEFORE importing models
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'settings')
import django
django.setup()

from django.core.management import call_command
from django.core.wsgi import get_wsgi_application
from django.urls import get_resolver
from starlette.applications import Starlette
from starlette.middleware.wsgi import WSGIMiddleware
from starlette.routing import Mount
from starlette.staticfiles import StaticFiles
import uvicorn

from safe_in_place_editing import get_registered_actions


def seed_demo_data():
    """Create a few posts and notes on first start."""
    from blog.models import Comment, Note, Post

    if Post.objects.exists():
        return
    welcome = Post.objects.create(title="Welcome", body="Click any value to edit it.", published=True)
    Comment.objects.create(post=welcome, text="Edits from two browsers are checked against the lock version.")
    Post.objects.create(title="Draft <em>escaped</em>", body="Markup in values is shown, not rendered.")
    Note.objects.create(title="Notes have no lock version", priority=2)
    print("[safe_in_place_editing] Seeded demo data")


def create_app():
    """Create the ASGI application: support scripts plus Django behind WSGI."""
    call_command("migrate", "--noinput", "--run-syncdb", verbosity=0)
    seed_demo_data()

    django_wsgi_app = get_wsgi_application()

    app = Starlette(routes=[
        # Support script of the editors, served straight from the package
        Mount("/static", StaticFiles(packages=[("safe_in_place_editing", "static")]), name="static"),
        Mount("/", WSGIMiddleware(django_wsgi_app)),
    ])

    # Importing the URLconf registers the update actions
    get_resolver().url_patterns
    for object_name, attribute in sorted(get_registered_actions()):
        print(f"[safe_in_place_editing] Update action for {object_name}.{attribute}")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
