"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories run their statements through the StoreGateway and return
domain model objects.
"""
