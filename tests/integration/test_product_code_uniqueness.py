"""Duplicate product codes cannot both commit, whatever each writer has seen."""

import threading

import pytest
from sqlmodel import Session, SQLModel, create_engine

from catalog_api.entities import (
    DuplicateProductCodeError,
    ProductData,
    ProductRepository,
    ProductTable,
)


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'catalog.db'}",
        connect_args={"check_same_thread": False, "timeout": 20},
    )
    SQLModel.metadata.create_all(engine, tables=[ProductTable.__table__])
    yield engine
    engine.dispose()


def test_interleaved_writers(engine, product_data: ProductData):
    """Both writers see no row before inserting; only the first commit wins."""
    with Session(engine) as first, Session(engine) as second:
        assert ProductRepository(first).list_all() == []
        assert ProductRepository(second).list_all() == []
        first.rollback()
        second.rollback()

        ProductRepository(first).create(product_data)
        first.commit()

        with pytest.raises(DuplicateProductCodeError):
            ProductRepository(second).create(product_data)

    with Session(engine) as check:
        assert len(ProductRepository(check).list_all()) == 1


def test_concurrent_threads(engine, product_data: ProductData):
    barrier = threading.Barrier(2)
    outcomes: list[str] = []
    lock = threading.Lock()

    def _insert() -> None:
        with Session(engine) as session:
            barrier.wait()
            try:
                ProductRepository(session).create(product_data)
                session.commit()
                result = "created"
            except DuplicateProductCodeError:
                result = "duplicate"
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=_insert) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(outcomes) == ["created", "duplicate"]
    with Session(engine) as check:
        assert len(ProductRepository(check).list_all()) == 1
