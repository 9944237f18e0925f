"""Pytest configuration and fixtures."""

from collections.abc import Generator
from itertools import count
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from catalog.application.catalog import (
    CreateProductCommand,
    CreateProductHandler,
    GetProductByIdHandler,
    GetProductByIdQuery,
)
from catalog.application.common.dispatcher import Dispatcher
from catalog.config import Settings
from catalog.database import (
    dispose_engine,
    get_engine,
    get_session_factory,
    initialize_database,
)
from catalog.domain.catalog.entities.product import Product
from catalog.domain.common.value_objects.ids import ProductId
from catalog.exceptions import StoreUnavailableError
from catalog.init_db import init_db
from catalog.main import create_app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"


class InMemoryProductRepository:
    """Product repository backed by a dict, for handler tests."""

    def __init__(self) -> None:
        self.products: dict[int, Product] = {}
        self._ids = count(1)

    def insert(self, product: Product) -> Product:
        saved = Product.create_with_id(
            id=ProductId(next(self._ids)),
            name=product.name,
            description=product.description,
            price=product.price,
        )
        self.products[saved.id.value] = saved
        return saved

    def find_by_id(self, product_id: ProductId) -> Product | None:
        return self.products.get(product_id.value)


class UnavailableProductRepository:
    """Product repository whose store is always unreachable."""

    def insert(self, product: Product) -> Product:
        raise StoreUnavailableError("connection refused")

    def find_by_id(self, product_id: ProductId) -> Product | None:
        raise StoreUnavailableError("connection refused")


def build_dispatcher(repository: object) -> Dispatcher:
    """Dispatcher wired to the given repository."""
    return Dispatcher(
        {
            CreateProductCommand: CreateProductHandler(repository),  # type: ignore[arg-type]
            GetProductByIdQuery: GetProductByIdHandler(repository),  # type: ignore[arg-type]
        }
    )


def make_settings(database_url: str = TEST_DATABASE_URL, **overrides: object) -> Settings:
    """Settings isolated from the environment's .env file."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        DATABASE_URL=database_url,
        ENVIRONMENT="test",
        **overrides,  # type: ignore[arg-type]
    )


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory, seeded database."""
    return make_settings()


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Create a test client; startup creates and seeds the database."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(settings: Settings) -> Generator[sessionmaker[Session], None, None]:
    """Session factory for a fresh seeded in-memory database."""
    initialize_database(settings)
    init_db(get_engine(), seed=True)
    try:
        yield get_session_factory()
    finally:
        dispose_engine()


@pytest.fixture
def file_settings(tmp_path: Path) -> Settings:
    """Settings for a file-backed SQLite database, usable from several threads."""
    return make_settings(f"sqlite:///{tmp_path / 'catalog.db'}")


@pytest.fixture
def repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()
