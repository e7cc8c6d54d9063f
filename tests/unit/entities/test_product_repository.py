"""Product entity and repository tests against in-memory SQLite."""

import math

import pytest
from pydantic import ValidationError
from sqlalchemy import Double
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from catalog_api.entities import (
    DuplicateProductCodeError,
    Product,
    ProductData,
    ProductRepository,
    ProductTable,
)


class TestProductData:
    """Validation of writable product fields."""

    def test_accepts_zero_price_and_quantity(self):
        """Zero is a value, not an absence."""
        data = ProductData(product_code="SKU-0", name="Free sample", price=0, product_quantity=0)

        assert data.price == 0
        assert data.product_quantity == 0

    @pytest.mark.parametrize("field", ["product_code", "name", "price", "product_quantity"])
    def test_every_field_is_required(self, product_payload, field):
        del product_payload[field]

        with pytest.raises(ValidationError) as exc_info:
            ProductData(**product_payload)

        assert exc_info.value.errors()[0]["type"] == "missing"

    def test_rejects_empty_product_code(self, product_payload):
        product_payload["product_code"] = ""

        with pytest.raises(ValidationError):
            ProductData(**product_payload)

    def test_rejects_non_numeric_price(self, product_payload):
        product_payload["price"] = "cheap"

        with pytest.raises(ValidationError):
            ProductData(**product_payload)

    @pytest.mark.parametrize("price", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite_price(self, product_payload, price):
        product_payload["price"] = price

        with pytest.raises(ValidationError) as exc_info:
            ProductData(**product_payload)

        assert exc_info.value.errors()[0]["type"] == "finite_number"

    @pytest.mark.parametrize("field", ["price", "product_quantity"])
    def test_rejects_booleans(self, product_payload, field):
        product_payload[field] = True

        with pytest.raises(ValidationError):
            ProductData(**product_payload)

    def test_integer_price_accepted(self, product_payload):
        product_payload["price"] = 20

        assert ProductData(**product_payload).price == 20.0

    def test_rejects_code_longer_than_column(self, product_payload):
        product_payload["product_code"] = "x" * 65

        with pytest.raises(ValidationError) as exc_info:
            ProductData(**product_payload)

        assert exc_info.value.errors()[0]["type"] == "string_too_long"


class TestProductTable:
    def test_price_is_double_precision_on_mysql(self):
        price_type = ProductTable.__table__.c.price.type

        assert isinstance(price_type, Double)
        assert price_type.compile(dialect=mysql.dialect()) == "DOUBLE"

    def test_price_keeps_cents_on_large_values(self, session: Session, product_data: ProductData):
        created = ProductRepository(session).create(
            product_data.model_copy(update={"price": 123456.78})
        )
        session.commit()
        session.expire_all()

        assert ProductRepository(session).get(created.id).price == 123456.78


class TestProductRepository:
    """Data access for the products table."""

    def test_create_assigns_generated_id(self, session: Session, product_data: ProductData):
        repository = ProductRepository(session)

        created = repository.create(product_data)
        session.commit()

        assert isinstance(created, Product)
        assert created.id is not None
        assert created.product_code == product_data.product_code
        assert repository.get(created.id) == created

    def test_list_all_returns_rows_in_id_order(self, session: Session, product_data: ProductData):
        repository = ProductRepository(session)
        first = repository.create(product_data)
        second = repository.create(product_data.model_copy(update={"product_code": "SKU-002"}))
        session.commit()

        assert [p.id for p in repository.list_all()] == [first.id, second.id]

    def test_list_all_empty(self, session: Session):
        assert ProductRepository(session).list_all() == []

    def test_duplicate_code_raises_and_keeps_count(
        self, session: Session, product_data: ProductData
    ):
        repository = ProductRepository(session)
        repository.create(product_data)
        session.commit()

        with pytest.raises(DuplicateProductCodeError) as exc_info:
            repository.create(product_data.model_copy(update={"name": "Other"}))

        assert exc_info.value.product_code == product_data.product_code
        assert len(repository.list_all()) == 1

    def test_update_overwrites_all_fields(self, session: Session, product_data: ProductData):
        repository = ProductRepository(session)
        created = repository.create(product_data)
        session.commit()

        new_data = ProductData(
            product_code="SKU-NEW", name="Decaf beans", price=0, product_quantity=0
        )
        updated = repository.update(created.id, new_data)
        session.commit()

        assert updated == Product(id=created.id, **new_data.model_dump())
        assert repository.get(created.id) == updated

    def test_update_missing_returns_none(self, session: Session, product_data: ProductData):
        assert ProductRepository(session).update(999, product_data) is None

    def test_update_to_taken_code_raises(self, session: Session, product_data: ProductData):
        repository = ProductRepository(session)
        repository.create(product_data)
        other = repository.create(product_data.model_copy(update={"product_code": "SKU-002"}))
        session.commit()

        with pytest.raises(DuplicateProductCodeError):
            repository.update(other.id, product_data)

    def test_delete(self, session: Session, product_data: ProductData):
        repository = ProductRepository(session)
        created = repository.create(product_data)
        session.commit()

        assert repository.delete(created.id) is True
        session.commit()
        assert repository.get(created.id) is None
        assert repository.list_all() == []

    def test_delete_missing_returns_false(self, session: Session):
        assert ProductRepository(session).delete(42) is False

    def test_other_integrity_errors_are_not_conflicts(self, session: Session):
        incomplete = ProductData.model_construct(
            product_code="SKU-NULL", name="No price", price=None, product_quantity=1
        )

        with pytest.raises(IntegrityError):
            ProductRepository(session).create(incomplete)
