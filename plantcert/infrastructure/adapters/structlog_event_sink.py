"""Audit event sink writing each registry event as a structured log line.

Events are logged at INFO under the "registry_event" event name. The
event time is written as occurred_at because structlog owns the
timestamp key.
"""

from __future__ import annotations

import structlog

from plantcert.application.ports.event_sink import EventSinkProtocol
from plantcert.domain.events.registry_event import RegistryEvent
from plantcert.infrastructure.observability.correlation import get_correlation_id
from plantcert.infrastructure.observability.logging import get_logger_for_service


class StructlogEventSink(EventSinkProtocol):
    """Writes registry events to structlog.

    Attributes:
        emitted_count: Number of events written since construction.
    """

    def __init__(self, logger: structlog.BoundLogger | None = None) -> None:
        """Initialize the sink.

        Args:
            logger: Optional logger to write to. Defaults to a logger bound
                with component="audit".
        """
        self._log = logger or get_logger_for_service(self.__class__.__name__, component="audit")
        self.emitted_count = 0

    async def emit(self, event: RegistryEvent) -> None:
        self._log.info(
            "registry_event",
            correlation_id=get_correlation_id(),
            kind=event.kind,
            entity_id=event.entity_id,
            actor=event.actor,
            occurred_at=event.timestamp.isoformat(),
            payload=dict(event.payload),
        )
        self.emitted_count += 1
