"""
db/ - Database Layer
====================
PostgreSQL connection pool and schema for the `about`, `contact` and
`projects` tables. Lowest layer; depends only on config and utils.
"""
