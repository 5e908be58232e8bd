"""
High-level use cases for the Projects API.

Each service module orchestrates a record store to implement business rules.
Routers (FastAPI endpoints) call these services instead of touching the
database directly.
"""
