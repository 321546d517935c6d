"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Storage back ends live in ``stores``, validation schemas
in ``schemas``, business logic in ``services`` and HTTP routing under
``api/<version>/``.
"""

from .main import app  # noqa: F401
