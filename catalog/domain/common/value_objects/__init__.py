from .ids import ProductId

__all__ = ["ProductId"]
