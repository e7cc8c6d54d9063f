"""User domain entity."""

from pydantic import BaseModel, Field

from catalog_api.entities._base import Entity


class UserCreate(BaseModel):
    """Fields accepted when registering a user."""

    username: str = Field(min_length=1, max_length=255, description="Login name")
    email: str = Field(min_length=1, max_length=255, description="Contact email address")
    password: str = Field(min_length=1, description="Plaintext password, hashed before storage")


class User(Entity):
    """User entity as exposed by the API.

    The stored password hash is not part of this model.
    """

    username: str = Field(description="Login name")
    email: str = Field(description="Contact email address")
