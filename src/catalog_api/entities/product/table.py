"""Product database table model."""

from sqlalchemy import Double
from sqlmodel import Field

from catalog_api.entities._base import EntityTable

from .entity import PRODUCT_CODE_MAX_LENGTH, PRODUCT_NAME_MAX_LENGTH


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    The unique index on ``product_code`` is what keeps two concurrent
    inserts of the same code from both succeeding.
    """

    __tablename__ = "products"

    product_code: str = Field(max_length=PRODUCT_CODE_MAX_LENGTH, unique=True, index=True)
    name: str = Field(max_length=PRODUCT_NAME_MAX_LENGTH)
    # Double precision; a plain Float is single precision on MySQL
    price: float = Field(sa_type=Double)
    product_quantity: int
