"""Core package for personhub.

A small FastAPI service exposing the ``Person`` resource as HTML pages and a
JSON API. :func:`personhub.api.main.create_app` builds the application.
"""

__version__ = "0.1.0"
