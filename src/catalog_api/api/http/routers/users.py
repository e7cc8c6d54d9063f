"""User API router."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from catalog_api.api.http.deps import get_session, get_user_repository
from catalog_api.api.http.schemas import UserResponse
from catalog_api.entities import User, UserCreate, UserRepository

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[User])
def list_users(
    repository: UserRepository = Depends(get_user_repository),
) -> list[User]:
    """List all users, without password hashes."""
    try:
        return repository.list_all()
    except SQLAlchemyError:
        logger.exception("Error getting users")
        raise HTTPException(status_code=500, detail="Error getting users")


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
) -> User:
    """Get a user by ID."""
    try:
        user = repository.get(user_id)
    except SQLAlchemyError:
        logger.exception("Error getting user")
        raise HTTPException(status_code=500, detail="Error getting user")

    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserCreate,
    session: Session = Depends(get_session),
    repository: UserRepository = Depends(get_user_repository),
) -> UserResponse:
    """Register a user. The password is stored hashed and never echoed."""
    try:
        created = repository.create(user)
        session.commit()
    except SQLAlchemyError:
        logger.exception("Error inserting user")
        raise HTTPException(status_code=500, detail="Error inserting user")

    logger.info("Created user {}", created.id)
    return UserResponse(message="User created successfully", user=created)


@router.delete("/{user_id}", response_class=PlainTextResponse)
def delete_user(
    user_id: int,
    session: Session = Depends(get_session),
    repository: UserRepository = Depends(get_user_repository),
) -> str:
    """Delete a user."""
    try:
        deleted = repository.delete(user_id)
        if not deleted:
            raise HTTPException(status_code=404, detail="User not found")
        session.commit()
    except SQLAlchemyError:
        logger.exception("Error deleting user")
        raise HTTPException(status_code=500, detail="Error deleting user")

    return "User deleted successfully"
