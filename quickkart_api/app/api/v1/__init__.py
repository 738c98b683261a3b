"""
Version 1 of the REST API.

The routes mirror the GraphQL operations for clients that prefer
plain JSON over HTTP.  Breaking changes belong in a new version
subpackage (e.g. ``v2``).
"""
