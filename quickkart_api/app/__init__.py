"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each store layout entity (items, aisles, checkout lanes,
maps and inventories) has its own schema module and service class.
The same services back two transports: the GraphQL schema mounted at
``/quickkart`` and the versioned REST routes under ``/api/v1``.
"""

from .main import app  # noqa: F401
