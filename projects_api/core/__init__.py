"""
Core utilities shared across the Projects API.

This package hosts configuration helpers (env vars, store backend
selection) and cross-cutting concerns such as logging setup.

Services and repositories depend on these primitives instead of reading
os.environ or configuring handlers themselves.
"""
