"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from catalog_api.api.http.app_data import ApplicationDependencies
from catalog_api.core.services import DbSessionService
from catalog_api.entities import ProductRepository, UserRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service created at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped session; handlers commit explicitly."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(session: Session = Depends(get_session)) -> ProductRepository:
    return ProductRepository(session)


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)
