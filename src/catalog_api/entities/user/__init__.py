"""User entity module.

- User / UserCreate: Domain models
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User, UserCreate
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserCreate", "UserRepository", "UserTable"]
