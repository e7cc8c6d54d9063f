"""Entities organized by business concept.

Each entity package contains:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .errors import DuplicateProductCodeError
from .product import Product, ProductData, ProductRepository, ProductTable
from .user import User, UserCreate, UserRepository, UserTable

__all__ = [
    "DuplicateProductCodeError",
    "Product",
    "ProductData",
    "ProductRepository",
    "ProductTable",
    "User",
    "UserCreate",
    "UserRepository",
    "UserTable",
]
