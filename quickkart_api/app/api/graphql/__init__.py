"""
GraphQL schema for the store layout API.

The schema is built with strawberry and mounted on the FastAPI
application through ``create_graphql_router``.
"""

from .schema import Mutation, Query, create_graphql_router, schema

__all__ = ["Query", "Mutation", "schema", "create_graphql_router"]
