"""
JSON HTTP API over the `recordings.album` table.
"""
