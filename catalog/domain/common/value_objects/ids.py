from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class ProductId(EntityId):
    """Strongly-typed product identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("ProductId must be non-negative")
