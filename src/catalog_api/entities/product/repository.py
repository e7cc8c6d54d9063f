"""Product repository."""

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from catalog_api.entities.errors import DuplicateProductCodeError

from .entity import Product, ProductData
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable).order_by(ProductTable.id)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def create(self, data: ProductData) -> Product:
        """Insert a product.

        Raises:
            DuplicateProductCodeError: ``product_code`` is already taken.
        """
        row = ProductTable(**data.model_dump())
        self._session.add(row)
        self._flush_or_conflict(data.product_code)
        return Product.model_validate(row, from_attributes=True)

    def update(self, product_id: int, data: ProductData) -> Product | None:
        """Overwrite every field of a product.

        Returns None when no product has ``product_id``.

        Raises:
            DuplicateProductCodeError: the new ``product_code`` belongs to another product.
        """
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None

        for field, value in data.model_dump().items():
            setattr(row, field, value)
        self._session.add(row)
        self._flush_or_conflict(data.product_code)
        return Product.model_validate(row, from_attributes=True)

    def delete(self, product_id: int) -> bool:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def _flush_or_conflict(self, product_code: str) -> None:
        try:
            self._session.flush()
        except IntegrityError as e:
            self._session.rollback()
            if _is_product_code_conflict(e):
                raise DuplicateProductCodeError(product_code) from e
            raise


def _is_product_code_conflict(error: IntegrityError) -> bool:
    """True when ``error`` comes from the unique index on ``product_code``.

    SQLite reports ``UNIQUE constraint failed: products.product_code``, MySQL
    ``Duplicate entry ... for key 'ix_products_product_code'``.
    """
    message = str(error.orig).lower()
    return "product_code" in message and ("unique" in message or "duplicate" in message)
