"""Tests for the SQLAlchemy product repository."""

from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from catalog import models
from catalog.domain.catalog.entities.product import Product
from catalog.domain.common.value_objects.ids import ProductId
from catalog.exceptions import StoreUnavailableError
from catalog.infrastructure.catalog.repositories import ProductRepository


class TestProductRepository:
    """Test suite for ProductRepository against a seeded SQLite database."""

    def test_find_seeded_product(self, session_factory: sessionmaker[Session]) -> None:
        product = ProductRepository(session_factory).find_by_id(ProductId(1))

        assert product is not None
        assert product.id == ProductId(1)
        assert product.name == "Laptop"
        assert product.description == "High performance laptop"
        assert product.price == Decimal("1200.50")

    def test_find_missing_product_returns_none(
        self, session_factory: sessionmaker[Session]
    ) -> None:
        assert ProductRepository(session_factory).find_by_id(ProductId(9999)) is None

    def test_insert_assigns_next_id(self, session_factory: sessionmaker[Session]) -> None:
        repository = ProductRepository(session_factory)
        saved = repository.insert(
            Product.create(name="Webcam", description="1080p webcam", price=Decimal("49.99"))
        )

        assert saved.id == ProductId(5)
        assert saved.name == "Webcam"

    def test_insert_is_committed(self, session_factory: sessionmaker[Session]) -> None:
        saved = ProductRepository(session_factory).insert(
            Product.create(name="Dock", description="USB-C dock", price=Decimal("120.00"))
        )

        with session_factory() as db:
            row = db.get(models.Product, saved.id.value)
            assert row is not None
            assert row.name == "Dock"
            assert row.price == Decimal("120.00")

    def test_round_trip(self, session_factory: sessionmaker[Session]) -> None:
        repository = ProductRepository(session_factory)
        saved = repository.insert(
            Product.create(name="Tablet", description="10-inch tablet", price=Decimal("329.95"))
        )

        fetched = repository.find_by_id(saved.id)

        assert fetched is not None
        assert (fetched.name, fetched.description, fetched.price) == (
            "Tablet",
            "10-inch tablet",
            Decimal("329.95"),
        )

    def test_insert_rounds_price_to_cents(self, session_factory: sessionmaker[Session]) -> None:
        repository = ProductRepository(session_factory)
        saved = repository.insert(
            Product.create(name="Adapter", description="USB-C adapter", price=Decimal("19.999"))
        )

        fetched = repository.find_by_id(saved.id)

        assert fetched is not None
        assert saved.price == fetched.price == Decimal("20.00")


class TestProductRepositoryStoreUnavailable:
    """The repository reports unreachable databases as StoreUnavailableError."""

    @pytest.fixture
    def unreachable_factory(self, tmp_path: Path) -> sessionmaker[Session]:
        engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}")
        return sessionmaker(bind=engine)

    def test_insert(self, unreachable_factory: sessionmaker[Session]) -> None:
        repository = ProductRepository(unreachable_factory)
        with pytest.raises(StoreUnavailableError, match="unable to open database file"):
            repository.insert(Product.create(name="X", description="Y", price=Decimal("1")))

    def test_find_by_id(self, unreachable_factory: sessionmaker[Session]) -> None:
        repository = ProductRepository(unreachable_factory)
        with pytest.raises(StoreUnavailableError):
            repository.find_by_id(ProductId(1))
