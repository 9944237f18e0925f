"""Transient input objects for the catalog use cases."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductInput:
    """Fields supplied by a client when creating a product."""

    name: str
    description: str
    price: Decimal
