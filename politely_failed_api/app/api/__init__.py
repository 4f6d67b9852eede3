"""
API package containing the service routes.

``health`` holds the unversioned operational routes (``/`` and
``/health``); versioned routes live under ``v1``.
"""
