"""In-memory stub implementations of application ports."""

from plantcert.infrastructure.stubs.event_sink_stub import EventSinkStub

__all__: list[str] = ["EventSinkStub"]
