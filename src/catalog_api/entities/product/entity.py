"""Entity: Product."""

from pydantic import BaseModel, Field

from catalog_api.entities._base import Entity

PRODUCT_CODE_MAX_LENGTH = 64
PRODUCT_NAME_MAX_LENGTH = 255


class ProductData(BaseModel):
    """Writable product fields, as accepted by create and update.

    All four fields are required. Zero is a valid ``price`` or
    ``product_quantity``; an empty string is not a valid code or name.
    Numbers are taken as sent: no booleans, numeric strings or non-finite
    prices.
    """

    product_code: str = Field(
        min_length=1, max_length=PRODUCT_CODE_MAX_LENGTH, description="Business identifier, unique"
    )
    name: str = Field(min_length=1, max_length=PRODUCT_NAME_MAX_LENGTH, description="Display name")
    price: float = Field(strict=True, allow_inf_nan=False, description="Unit price")
    product_quantity: int = Field(strict=True, description="Units in stock")


class Product(Entity):
    """Product entity representing a row of the ``products`` table."""

    product_code: str = Field(description="Business identifier, unique")
    name: str = Field(description="Display name")
    price: float = Field(description="Unit price")
    product_quantity: int = Field(description="Units in stock")
