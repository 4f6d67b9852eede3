"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The message database lives in ``services`` (the store
that loads and caches it, and the service that queries it), the
domain types in ``models``, response payloads in ``schemas`` and the
HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
