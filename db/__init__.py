"""
db/ - Database Layer
====================
Handles all PostgreSQL connections and schema initialization.
This layer is the lowest in the architecture; it only relies on config and utils.
"""
