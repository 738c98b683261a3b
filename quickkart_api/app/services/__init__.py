"""
Service layer.

Each service encapsulates the logic for one entity and talks to
MongoDB through the shared ``DocumentStore``.  GraphQL resolvers and
REST endpoints both call these classes, so validation and error
messages are identical across transports.
"""
