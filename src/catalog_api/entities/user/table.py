"""User database table model."""

from sqlmodel import Field

from catalog_api.entities._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    ``password`` holds the output of ``hash_password``, never plaintext.
    """

    __tablename__ = "users"

    username: str = Field(max_length=255)
    email: str = Field(max_length=255)
    password: str = Field(max_length=255)
