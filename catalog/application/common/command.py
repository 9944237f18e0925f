"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: CreateProduct, not ProductCreation.

Example:
    @dataclass(frozen=True)
    class CreateProductCommand(Command[Result[Product, CatalogError]]):
        product: ProductInput

    class CreateProductHandler(
        CommandHandler[CreateProductCommand, Result[Product, CatalogError]]
    ):
        def __init__(self, repository: ProductRepositoryProtocol) -> None:
            self._repository = repository

        def handle(self, command: CreateProductCommand) -> Result[Product, CatalogError]:
            product = self._repository.insert(Product.create(...))
            return Success(product, "Product created successfully")
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Output type declared by the command, so the dispatcher can return it typed
TResponse = TypeVar("TResponse", covariant=True)
# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command(Generic[TResponse]):
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form
    - Carry all data needed to execute the operation
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Each command type has exactly one handler, and a handler performs at
    most one store operation.
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return the result.

        Raises:
            CatalogError: When the operation cannot be expressed as a Result
        """
        raise NotImplementedError
