"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app

Bookmarks are cached per process, so run a single worker.
"""

from lotto_report import create_app

app = create_app()
