"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks both features use (settings, DB
pool, error envelope, middleware). Keep feature-specific SQL and business
logic in the corresponding feature package (`auth/`, `posts/`).
"""
