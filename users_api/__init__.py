"""
Top‑level package for the Users API.

This file makes ``users_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``users_api.app.main``.  The CSV pipe helper used by
``csv_to_text.py`` also lives here, next to ``app``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
