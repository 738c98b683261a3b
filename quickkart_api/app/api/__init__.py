"""
API package.

``graphql`` holds the GraphQL schema served under the configured path
suffix (``/quickkart`` by default).  ``v1`` holds the versioned REST
routes that expose the same services.
"""
