"""Infrastructure adapters implementing application ports."""

from plantcert.infrastructure.adapters.structlog_event_sink import StructlogEventSink
from plantcert.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["StructlogEventSink", "SystemTimeAuthority"]
