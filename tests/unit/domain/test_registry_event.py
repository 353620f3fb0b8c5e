"""Unit tests for RegistryEvent."""

from datetime import datetime, timezone

import pytest

from plantcert.domain.events.registry_event import (
    PLANT_REGISTERED_EVENT,
    REGISTRY_EVENT_KINDS,
    RegistryEvent,
)

T0 = datetime(2026, 1, 15, 10, 0, 0, tzinfo=timezone.utc)


class TestRegistryEvent:
    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown registry event kind"):
            RegistryEvent(kind="plant.deleted", entity_id=0, actor="0xa", timestamp=T0)

    def test_payload_is_read_only_copy(self) -> None:
        source = {"name": "Plant Alpha"}
        event = RegistryEvent(
            kind=PLANT_REGISTERED_EVENT,
            entity_id=0,
            actor="0xa",
            timestamp=T0,
            payload=source,
        )
        source["name"] = "changed"
        assert event.payload["name"] == "Plant Alpha"
        with pytest.raises(TypeError):
            event.payload["name"] = "x"  # type: ignore[index]

    def test_to_dict(self) -> None:
        event = RegistryEvent(
            kind=PLANT_REGISTERED_EVENT,
            entity_id=3,
            actor="0xa",
            timestamp=T0,
            payload={"name": "Plant Alpha"},
        )
        assert event.to_dict() == {
            "kind": "plant.registered",
            "entity_id": 3,
            "actor": "0xa",
            "timestamp": "2026-01-15T10:00:00+00:00",
            "payload": {"name": "Plant Alpha"},
        }

    def test_kind_catalogue(self) -> None:
        assert len(REGISTRY_EVENT_KINDS) == 12
        assert "integrity.verified" in REGISTRY_EVENT_KINDS
