"""Response envelopes for the write endpoints."""

from pydantic import BaseModel

from catalog_api.entities import Product, User


class ProductResponse(BaseModel):
    message: str
    product: Product


class UserResponse(BaseModel):
    message: str
    user: User
