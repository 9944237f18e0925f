"""Tests for schema creation and seeding."""

from collections.abc import Generator
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from catalog import models
from catalog.config import Settings
from catalog.database import dispose_engine, get_engine, initialize_database
from catalog.init_db import SEED_PRODUCTS, init_db


@pytest.fixture
def engine(settings: Settings) -> Generator[Engine, None, None]:
    initialize_database(settings)
    try:
        yield get_engine()
    finally:
        dispose_engine()


def count_products(engine: Engine) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count(models.Product.id))).scalar_one()


def test_seeds_fixture_products(engine: Engine) -> None:
    init_db(engine, seed=True)

    with engine.connect() as conn:
        rows = conn.execute(select(models.Product).order_by(models.Product.id)).all()

    assert [(r.id, r.name, r.price) for r in rows] == [
        (1, "Laptop", Decimal("1200.50")),
        (2, "Smartphone", Decimal("800.00")),
        (3, "Headphones", Decimal("199.99")),
        (4, "Monitor", Decimal("350.75")),
    ]


def test_seeding_is_idempotent(engine: Engine) -> None:
    init_db(engine, seed=True)
    init_db(engine, seed=True)

    assert count_products(engine) == len(SEED_PRODUCTS)


def test_seed_disabled_creates_empty_table(engine: Engine) -> None:
    init_db(engine, seed=False)

    assert count_products(engine) == 0
