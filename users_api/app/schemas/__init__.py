"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage back ends to decouple the API
representation (the client view) from the stored record.
"""
