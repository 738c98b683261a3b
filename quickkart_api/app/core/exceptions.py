"""
Error types raised by the service layer.

Both transports rely on these classes: GraphQL resolvers let them
propagate so the message reaches the client in the ``errors`` list,
while REST endpoints translate them into HTTP status codes.  Failures
of the document store itself are not wrapped; they surface as
``pymongo.errors.PyMongoError`` subclasses.
"""


class StoreLayoutError(Exception):
    """Base class for errors raised by the store layout services."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(StoreLayoutError):
    """Client input violates a rule (duplicate title, bounds, ...)."""


class ReferenceNotFoundError(StoreLayoutError):
    """A record needed to complete an operation does not exist."""
