"""Common response wrapper schemas for API responses."""

from collections.abc import Callable
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, model_validator

from catalog.application.common.result import Result

T = TypeVar("T")


class ResultEnvelope(BaseModel, Generic[T]):
    """
    Uniform body of every product endpoint response.

    A failed envelope never carries data.
    """

    success: bool
    message: str
    data: T | None = None

    @model_validator(mode="after")
    def check_failure_has_no_data(self) -> Self:
        """Reject failure envelopes that carry a payload."""
        if not self.success and self.data is not None:
            raise ValueError("A failure envelope cannot carry data")
        return self

    @classmethod
    def from_result(cls, result: Result[Any, Any], to_data: Callable[[Any], T]) -> Self:
        """
        Build an envelope from a handler result.

        Args:
            result: Success or Failure returned by a handler
            to_data: Converts the success value into the response payload
        """
        if result.is_success:
            return cls(success=True, message=result.message, data=to_data(result.unwrap()))
        return cls.failure(result.message)

    @classmethod
    def failure(cls, message: str) -> Self:
        """Build a failure envelope with no data."""
        return cls(success=False, message=message, data=None)
