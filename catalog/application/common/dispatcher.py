"""
Request dispatcher (mediator).

Callers hand a command or query to the dispatcher instead of constructing
handlers themselves. Handlers are registered by exact request type; the
registry is a plain dict, so resolving is a single lookup on type(request)
and subclasses of a registered request are not matched.

Example:
    dispatcher = Dispatcher({
        CreateProductCommand: CreateProductHandler(repository),
        GetProductByIdQuery: GetProductByIdHandler(repository),
    })
    dispatcher.ensure_registered(CreateProductCommand, GetProductByIdQuery)

    result = dispatcher.send(GetProductByIdQuery(product_id=1))
"""

from collections.abc import Mapping
from typing import Any, TypeVar, overload

import structlog

from .command import Command, CommandHandler
from .query import Query, QueryHandler

logger = structlog.get_logger(__name__)

R = TypeVar("R")

Request = Command[Any] | Query[Any]
Handler = CommandHandler[Any, Any] | QueryHandler[Any, Any]


class HandlerNotFoundError(Exception):
    """Raised when no handler is registered for a request type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        super().__init__(f"No handler registered for {request_type.__name__}")


class HandlerAlreadyRegisteredError(Exception):
    """Raised when a second handler is registered for the same request type."""

    def __init__(self, request_type: type) -> None:
        self.request_type = request_type
        super().__init__(f"A handler is already registered for {request_type.__name__}")


class Dispatcher:
    """
    Routes each request to the single handler registered for its type.

    The dispatcher keeps no per-request state, so one instance serves all
    requests for the lifetime of the process.
    """

    def __init__(self, handlers: Mapping[type, Handler] | None = None) -> None:
        self._handlers: dict[type, Handler] = {}
        for request_type, handler in (handlers or {}).items():
            self.register(request_type, handler)

    def register(self, request_type: type, handler: Handler) -> None:
        """
        Register the handler for a request type.

        Args:
            request_type: Command or Query subclass handled by ``handler``
            handler: Handler instance

        Raises:
            TypeError: If request_type is not a Command or Query subclass
            HandlerAlreadyRegisteredError: If the type already has a handler
        """
        if not isinstance(request_type, type) or not issubclass(request_type, Command | Query):
            raise TypeError(f"{request_type!r} is not a Command or Query type")
        if request_type in self._handlers:
            raise HandlerAlreadyRegisteredError(request_type)
        self._handlers[request_type] = handler

    def resolve(self, request_type: type) -> Handler:
        """
        Get the handler registered for a request type.

        Raises:
            HandlerNotFoundError: If nothing is registered for the type
        """
        try:
            return self._handlers[request_type]
        except KeyError:
            raise HandlerNotFoundError(request_type) from None

    def ensure_registered(self, *request_types: type) -> None:
        """
        Check at startup that every request type has a handler.

        Raises:
            HandlerNotFoundError: For the first request type without a handler
        """
        for request_type in request_types:
            self.resolve(request_type)

    @overload
    def send(self, request: Command[R]) -> R: ...

    @overload
    def send(self, request: Query[R]) -> R: ...

    def send(self, request: Request) -> Any:
        """
        Invoke the handler registered for the request and return its result.

        Exceptions raised by the handler propagate unchanged.

        Raises:
            HandlerNotFoundError: If nothing is registered for type(request)
        """
        handler = self.resolve(type(request))
        logger.debug(
            "dispatching_request",
            request_type=type(request).__name__,
            handler=type(handler).__name__,
        )
        return handler.handle(request)

    def __contains__(self, request_type: object) -> bool:
        return request_type in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
