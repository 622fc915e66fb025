"""Dispatch of stream messages to handlers by message type."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

Handler = Callable[[Any], None]


@dataclass
class SwitchDemux:
    """Send each message to the handler registered for its type.

    Every message goes to ``on_all`` first; messages with no registered
    handler for their type (or a base type) go to ``on_other``.
    """

    on_all: Optional[Handler] = None
    on_other: Optional[Handler] = None
    handlers: dict[type, Handler] = field(default_factory=dict)

    def register(self, message_type: type, handler: Handler) -> SwitchDemux:
        """Register ``handler`` for messages of ``message_type``."""
        self.handlers[message_type] = handler
        return self

    def handle(self, message: Any) -> None:
        """Dispatch a single message."""
        if self.on_all is not None:
            self.on_all(message)
        for cls in type(message).__mro__:
            handler = self.handlers.get(cls)
            if handler is not None:
                handler(message)
                return
        if self.on_other is not None:
            self.on_other(message)

    def handle_all(self, messages: Iterable[Any]) -> None:
        """Dispatch messages until the iterable is exhausted."""
        for message in messages:
            self.handle(message)