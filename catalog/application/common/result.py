"""
Result type for handler outcomes.

A handler returns either a Success carrying a payload and a message, or a
Failure carrying an error. A Success always has a payload and a Failure
never has one, so callers branch on the variant instead of checking for
missing data.

Example:
    def handle(self, query: GetProductByIdQuery) -> Result[Product, CatalogError]:
        product = self._repository.find_by_id(ProductId(query.product_id))
        if product is None:
            return Failure(ProductNotFoundError(query.product_id))
        return Success(product, "Product retrieved successfully")

    # Usage
    result = dispatcher.send(query)
    if result.is_success:
        print(f"{result.message}: {result.unwrap()}")
    else:
        print(f"Error: {result.message}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Represents a successful result containing a value."""

    value: T
    message: str = ""

    @property
    def is_success(self) -> bool:
        """Always True for Success."""
        return True

    @property
    def is_failure(self) -> bool:
        """Always False for Success."""
        return False

    def unwrap(self) -> T:
        """Get the success value."""
        return self.value

    def unwrap_error(self) -> None:
        """Raises ValueError - Success has no error."""
        raise ValueError("Cannot get error from Success result")

    def value_or(self, default: T) -> T:
        """Get the value (default is ignored for Success)."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Apply a function to the success value, keeping the message."""
        return Success(fn(self.value), self.message)

    def map_error(self, fn: Callable[[E], U]) -> "Success[T]":
        """No-op for Success - returns self."""
        return self

    def __repr__(self) -> str:
        return f"Success({self.value!r}, message={self.message!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    @property
    def is_success(self) -> bool:
        """Always False for Failure."""
        return False

    @property
    def is_failure(self) -> bool:
        """Always True for Failure."""
        return True

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        return str(self.error)

    def unwrap(self) -> None:
        """Raises ValueError - Failure has no value."""
        raise ValueError("Cannot get value from Failure result")

    def unwrap_error(self) -> E:
        """Get the error."""
        return self.error

    def value_or(self, default: T) -> T:
        """Return the default value for Failure."""
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        """No-op for Failure - returns self."""
        return self

    def map_error(self, fn: Callable[[E], U]) -> "Failure[U]":
        """Apply a function to the error value."""
        return Failure(fn(self.error))

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for Result - a union of Success and Failure
Result = Success[T] | Failure[E]
