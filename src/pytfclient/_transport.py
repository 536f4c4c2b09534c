"""Structural interfaces for the rosbridge-style connection.

The client only needs two primitives from the connection: a request/response
service call and a publish/subscribe topic. Having protocols here makes it easy
to pass test doubles while keeping any production transport concrete and
outside this library.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol

MessageCallback = Callable[[Mapping[str, Any]], None]


class ServiceHandle(Protocol):
    """A named remote service bound to a connection."""

    async def call(self, request: Mapping[str, Any]) -> Mapping[str, Any]:
        ...


class TopicHandle(Protocol):
    """A named topic bound to a connection.

    ``subscribe`` must deliver decoded messages on the event loop's thread.
    ``unsubscribe`` stops delivery and releases any server-side resource.
    """

    @property
    def name(self) -> str:
        ...

    def subscribe(self, callback: MessageCallback) -> None:
        ...

    def unsubscribe(self) -> None:
        ...


class Connection(Protocol):
    """Connection handle to the middleware bridge."""

    def service(self, name: str, service_type: str) -> ServiceHandle:
        ...

    def topic(self, name: str, message_type: str) -> TopicHandle:
        ...
