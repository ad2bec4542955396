"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories are handed the shared ConnectionPool and return rows as dicts.
"""
