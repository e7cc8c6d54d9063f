"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from catalog_api.api.http.deps import get_product_repository, get_session
from catalog_api.api.http.schemas import ProductResponse
from catalog_api.entities import (
    DuplicateProductCodeError,
    Product,
    ProductData,
    ProductRepository,
)

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[Product])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    """List all products."""
    try:
        return repository.list_all()
    except SQLAlchemyError:
        logger.exception("Error getting products")
        raise HTTPException(status_code=500, detail="Error getting products")


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductData,
    session: Session = Depends(get_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    """Create a new product; ``product_code`` must not be taken."""
    try:
        created = repository.create(product)
        session.commit()
    except DuplicateProductCodeError:
        raise HTTPException(
            status_code=400, detail="Product with this product_code already exists"
        )
    except SQLAlchemyError:
        logger.exception("Error inserting product")
        raise HTTPException(status_code=500, detail="Error inserting product")

    logger.info("Created product {} ({})", created.id, created.product_code)
    return ProductResponse(message="Product created successfully", product=created)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_update: ProductData,
    session: Session = Depends(get_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    """Replace every field of a product."""
    try:
        updated = repository.update(product_id, product_update)
        if updated is None:
            raise HTTPException(status_code=404, detail="Product not found")
        session.commit()
    except DuplicateProductCodeError:
        raise HTTPException(
            status_code=400, detail="Product with this product_code already exists"
        )
    except SQLAlchemyError:
        logger.exception("Error updating product")
        raise HTTPException(status_code=500, detail="Error updating product")

    return ProductResponse(message="Product updated successfully", product=updated)


@router.delete("/{product_id}", response_class=PlainTextResponse)
def delete_product(
    product_id: int,
    session: Session = Depends(get_session),
    repository: ProductRepository = Depends(get_product_repository),
) -> str:
    """Delete a product."""
    try:
        deleted = repository.delete(product_id)
        if not deleted:
            raise HTTPException(status_code=404, detail="Product not found")
        session.commit()
    except SQLAlchemyError:
        logger.exception("Error deleting product")
        raise HTTPException(status_code=500, detail="Error deleting product")

    return "Product deleted successfully"
