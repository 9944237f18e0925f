"""
Application common module.

Contains base classes for the application layer:
- Command: Base class for write operations
- Query: Base class for read operations
- CommandHandler / QueryHandler: Execute exactly one request type
- Dispatcher: Routes a request to its registered handler
- Result: Tagged success/failure outcome of a handler
"""

from .command import Command, CommandHandler
from .dispatcher import (
    Dispatcher,
    HandlerAlreadyRegisteredError,
    HandlerNotFoundError,
)
from .query import Query, QueryHandler
from .result import Failure, Result, Success

__all__ = [
    "Command",
    "CommandHandler",
    "Dispatcher",
    "Failure",
    "HandlerAlreadyRegisteredError",
    "HandlerNotFoundError",
    "Query",
    "QueryHandler",
    "Result",
    "Success",
]
