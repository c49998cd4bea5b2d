"""
Pydantic schema definitions for API payloads and stored records.

Each civic domain defines its own models: a ``*Create`` schema for
request bodies and a record schema (with ``id``) for what the store
holds and the API returns.  Field names are snake_case in Python and
camelCase on the wire.
"""
