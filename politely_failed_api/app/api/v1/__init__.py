"""
Version 1 of the API.

This subpackage bundles all endpoints mounted under ``/api/v1``.
Breaking changes should be introduced in a new version subpackage.
"""
