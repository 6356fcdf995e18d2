"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Storage backends live in ``stores``, request and response
models in ``schemas`` and HTTP routes in ``api/v1/endpoints``.
Versioning is handled by grouping routers under the ``api/<version>/``
hierarchy.
"""

from .main import app  # noqa: F401
