"""
db/ - Database Layer
====================
Handles parameter retrieval, database bootstrap, the PostgreSQL connection
pool, schema initialization and the startup retry sequence.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
