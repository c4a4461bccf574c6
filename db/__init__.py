"""
db/ - Database Layer
====================
Handles the PostgreSQL connection pool, schema initialization and the
store gateway that executes every parameterized statement.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
