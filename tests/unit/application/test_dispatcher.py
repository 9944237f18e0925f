"""Tests for the request dispatcher."""

from dataclasses import dataclass

import pytest

from catalog.application.common.command import Command, CommandHandler
from catalog.application.common.dispatcher import (
    Dispatcher,
    HandlerAlreadyRegisteredError,
    HandlerNotFoundError,
)
from catalog.application.common.query import Query, QueryHandler


@dataclass(frozen=True)
class Ping(Query[str]):
    text: str


@dataclass(frozen=True)
class LoudPing(Ping):
    pass


@dataclass(frozen=True)
class Record(Command[int]):
    value: int


class PingHandler(QueryHandler[Ping, str]):
    def handle(self, query: Ping) -> str:
        return f"pong: {query.text}"


class RecordHandler(CommandHandler[Record, int]):
    def __init__(self) -> None:
        self.recorded: list[int] = []

    def handle(self, command: Record) -> int:
        self.recorded.append(command.value)
        return len(self.recorded)


class FailingHandler(QueryHandler[Ping, str]):
    def handle(self, query: Ping) -> str:
        raise RuntimeError("handler exploded")


class TestDispatcher:
    """Test suite for Dispatcher."""

    def test_send_routes_query_to_handler(self) -> None:
        dispatcher = Dispatcher({Ping: PingHandler()})
        assert dispatcher.send(Ping("hello")) == "pong: hello"

    def test_send_routes_command_to_handler(self) -> None:
        handler = RecordHandler()
        dispatcher = Dispatcher({Record: handler})

        assert dispatcher.send(Record(5)) == 1
        assert dispatcher.send(Record(6)) == 2
        assert handler.recorded == [5, 6]

    def test_unregistered_type_raises(self) -> None:
        dispatcher = Dispatcher({Ping: PingHandler()})
        with pytest.raises(HandlerNotFoundError, match="Record") as exc_info:
            dispatcher.send(Record(1))
        assert exc_info.value.request_type is Record

    def test_subclass_is_not_matched(self) -> None:
        dispatcher = Dispatcher({Ping: PingHandler()})
        with pytest.raises(HandlerNotFoundError):
            dispatcher.send(LoudPing("hi"))

    def test_second_registration_rejected(self) -> None:
        dispatcher = Dispatcher({Ping: PingHandler()})
        with pytest.raises(HandlerAlreadyRegisteredError):
            dispatcher.register(Ping, PingHandler())

    def test_register_rejects_non_request_types(self) -> None:
        dispatcher = Dispatcher()
        with pytest.raises(TypeError):
            dispatcher.register(str, PingHandler())

    def test_ensure_registered(self) -> None:
        dispatcher = Dispatcher({Ping: PingHandler()})
        dispatcher.ensure_registered(Ping)
        with pytest.raises(HandlerNotFoundError):
            dispatcher.ensure_registered(Ping, Record)

    def test_handler_exceptions_propagate(self) -> None:
        dispatcher = Dispatcher({Ping: FailingHandler()})
        with pytest.raises(RuntimeError, match="handler exploded"):
            dispatcher.send(Ping("x"))

    def test_contains_and_len(self) -> None:
        dispatcher = Dispatcher({Ping: PingHandler(), Record: RecordHandler()})
        assert Ping in dispatcher
        assert LoudPing not in dispatcher
        assert len(dispatcher) == 2
