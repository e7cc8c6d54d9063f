"""Entity package: Product."""

from .entity import Product, ProductData
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductData", "ProductRepository", "ProductTable"]
