"""User repository."""

from sqlmodel import Session, select

from catalog_api.core.security import hash_password

from .entity import User, UserCreate
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[User]:
        rows = self._session.exec(select(UserTable).order_by(UserTable.id)).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, data: UserCreate) -> User:
        row = UserTable(
            username=data.username,
            email=data.email,
            password=hash_password(data.password),
        )
        self._session.add(row)
        self._session.flush()
        return User.model_validate(row, from_attributes=True)

    def delete(self, user_id: int) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
