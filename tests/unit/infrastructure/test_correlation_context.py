"""Unit tests for correlation ID management."""

import asyncio
import re

import pytest

from plantcert.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

UUID4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class TestCorrelationId:
    def test_generate_uuid4(self) -> None:
        assert UUID4.match(generate_correlation_id())

    def test_set_and_get(self) -> None:
        set_correlation_id("req-1")
        try:
            assert get_correlation_id() == "req-1"
        finally:
            set_correlation_id("")

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        results: dict[str, str] = {}

        async def task_with_id(name: str, correlation_id: str) -> None:
            set_correlation_id(correlation_id)
            await asyncio.sleep(0.01)
            results[name] = get_correlation_id()

        await asyncio.gather(task_with_id("a", "id-a"), task_with_id("b", "id-b"))
        assert results == {"a": "id-a", "b": "id-b"}


class TestProcessor:
    def test_adds_id_when_set(self) -> None:
        set_correlation_id("req-2")
        try:
            assert correlation_id_processor(None, "info", {"event": "x"}) == {
                "event": "x",
                "correlation_id": "req-2",
            }
        finally:
            set_correlation_id("")

    def test_leaves_event_alone_when_unset(self) -> None:
        set_correlation_id("")
        assert correlation_id_processor(None, "info", {"event": "x"}) == {"event": "x"}
