"""Stub implementation of EventSinkProtocol for testing.

Captures emitted events in order for test assertions.

Usage in tests:
    sink = EventSinkStub()
    registry = EntityRegistryService(..., event_sink=sink)

    await registry.create_plant(...)

    assert sink.kinds() == ["plant.registered"]
"""

from __future__ import annotations

from plantcert.application.ports.event_sink import EventSinkProtocol
from plantcert.domain.events.registry_event import RegistryEvent


class EventSinkStub(EventSinkProtocol):
    """In-memory event sink.

    Attributes:
        events: All events emitted so far, in emission order.
        fail_exception: If set, emit raises this exception instead of recording.
        fail_on_kind: Restricts fail_exception to events of this kind.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty state."""
        self.events: list[RegistryEvent] = []
        self.fail_exception: Exception | None = None
        self.fail_on_kind: str | None = None

    async def emit(self, event: RegistryEvent) -> None:
        if self.fail_exception is not None and self.fail_on_kind in (None, event.kind):
            raise self.fail_exception
        self.events.append(event)

    def kinds(self) -> list[str]:
        """Event kinds in emission order."""
        return [event.kind for event in self.events]

    def of_kind(self, kind: str) -> list[RegistryEvent]:
        return [event for event in self.events if event.kind == kind]

    def clear(self) -> None:
        """Reset stub state for test isolation."""
        self.events.clear()
        self.fail_exception = None
        self.fail_on_kind = None
