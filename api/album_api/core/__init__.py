"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that feature packages use (DB wiring,
settings, errors, logging). Feature-specific SQL and business logic live in
the feature package (e.g. `albums/`).
"""
