"""
Venue and menu ingestion package.

Responsibilities:
- Split the comma-separated exports into raw field rows.
- Normalize venue rows into the canonical Venue schema.
- Normalize menu rows into MenuItem records joined to their venue.
"""
