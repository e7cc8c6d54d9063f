"""Catalog API.

HTTP CRUD service over the ``products`` and ``users`` tables, backed by a
connection-pooled SQL database.
"""

__version__ = "0.1.0"
