"""
Service layer abstraction.

The user service encapsulates business rules (visibility, duplicate
logins, soft deletion) on top of a ``UserStore`` so the in-memory
table can be swapped for SQLite without changing API handlers.
"""
