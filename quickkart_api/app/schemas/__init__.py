"""
Pydantic schema definitions for API payloads.

Each entity (items, aisles, checkout lanes, maps, inventories) defines
its own models for create requests and read responses.  Field names
are snake_case in Python and camelCase on the wire and in MongoDB
(``xStartVal``), matching the documents already stored by clients.
"""
