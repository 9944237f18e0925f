"""
Query and QueryHandler base classes.

Queries represent requests for information without side effects.
They are named descriptively: GetProductById, ListProducts, etc.

Example:
    @dataclass(frozen=True)
    class GetProductByIdQuery(Query[Result[Product, CatalogError]]):
        product_id: int

    class GetProductByIdHandler(
        QueryHandler[GetProductByIdQuery, Result[Product, CatalogError]]
    ):
        def handle(self, query: GetProductByIdQuery) -> Result[Product, CatalogError]:
            product = self._repository.find_by_id(ProductId(query.product_id))
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

TResponse = TypeVar("TResponse", covariant=True)
# Input type (the query)
TQuery = TypeVar("TQuery", bound="Query")
# Output type (the result of the query)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query(Generic[TResponse]):
    """
    Base class for Queries.

    Queries are immutable and read-only; handling one never modifies state.
    """


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Base class for Query Handlers.

    Each query type has exactly one handler. Query handlers don't open
    write transactions.
    """

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        """Handle the query and return the result."""
        raise NotImplementedError
