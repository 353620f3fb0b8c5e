"""Event sink port.

The registry hands every audit event to an EventSinkProtocol exactly once,
after the mutation it describes has been applied. Implementations must
preserve the order in which events are emitted.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from plantcert.domain.events.registry_event import RegistryEvent


@runtime_checkable
class EventSinkProtocol(Protocol):
    """Protocol for receiving registry audit events.

    Example:
        sink = StructlogEventSink()
        await sink.emit(RegistryEvent(kind=PLANT_REGISTERED_EVENT, ...))
    """

    async def emit(self, event: RegistryEvent) -> None:
        """Record one event.

        Args:
            event: The event to record.

        Raises:
            Exception: Propagated to the caller; sinks never swallow errors.
        """
        ...
