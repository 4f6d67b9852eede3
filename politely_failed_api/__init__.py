"""
Top‑level package for the Politely Failed API.

This file makes ``politely_failed_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``politely_failed_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
