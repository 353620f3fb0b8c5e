"""Application ports (abstract interfaces implemented by infrastructure)."""

from plantcert.application.ports.event_sink import EventSinkProtocol
from plantcert.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "EventSinkProtocol",
    "TimeAuthorityProtocol",
]
