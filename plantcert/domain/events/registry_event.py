"""Registry audit events.

Every successful registry mutation emits exactly one RegistryEvent, in
mutation order. Failed calls emit nothing. Events are frozen and carry a
kind-specific payload mapping that is safe to serialize as JSON.

Event kinds:
- plant.registered: a plant record was created
- equipment.registered: an equipment record was created
- equipment.ownership_bound: the soulbound owner was recorded
- document.submitted: a document was attached to equipment
- actor.registered: an actor record was created
- role.granted / role.revoked: role membership actually changed
- equipment.status_updated: lifecycle state moved
- equipment.certification_hash_set: final hash stored or cleared
- equipment.rejection_reason_set: rejection reason stored
- gateway.configured: the gateway principal was bound
- integrity.verified: an integrity check was performed (no mutation)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

PLANT_REGISTERED_EVENT: str = "plant.registered"
EQUIPMENT_REGISTERED_EVENT: str = "equipment.registered"
OWNERSHIP_BOUND_EVENT: str = "equipment.ownership_bound"
DOCUMENT_SUBMITTED_EVENT: str = "document.submitted"
ACTOR_REGISTERED_EVENT: str = "actor.registered"
ROLE_GRANTED_EVENT: str = "role.granted"
ROLE_REVOKED_EVENT: str = "role.revoked"
EQUIPMENT_STATUS_UPDATED_EVENT: str = "equipment.status_updated"
CERTIFICATION_HASH_SET_EVENT: str = "equipment.certification_hash_set"
REJECTION_REASON_SET_EVENT: str = "equipment.rejection_reason_set"
GATEWAY_CONFIGURED_EVENT: str = "gateway.configured"
INTEGRITY_VERIFIED_EVENT: str = "integrity.verified"

REGISTRY_EVENT_KINDS: frozenset[str] = frozenset(
    {
        PLANT_REGISTERED_EVENT,
        EQUIPMENT_REGISTERED_EVENT,
        OWNERSHIP_BOUND_EVENT,
        DOCUMENT_SUBMITTED_EVENT,
        ACTOR_REGISTERED_EVENT,
        ROLE_GRANTED_EVENT,
        ROLE_REVOKED_EVENT,
        EQUIPMENT_STATUS_UPDATED_EVENT,
        CERTIFICATION_HASH_SET_EVENT,
        REJECTION_REASON_SET_EVENT,
        GATEWAY_CONFIGURED_EVENT,
        INTEGRITY_VERIFIED_EVENT,
    }
)


@dataclass(frozen=True, eq=True)
class RegistryEvent:
    """A single audit record of a registry mutation.

    Attributes:
        kind: One of REGISTRY_EVENT_KINDS.
        entity_id: Id of the affected entity (None for role and gateway events).
        actor: Address that initiated the mutation.
        timestamp: When the mutation happened (UTC).
        payload: Kind-specific details.
    """

    kind: str
    entity_id: int | None
    actor: str
    timestamp: datetime
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.kind not in REGISTRY_EVENT_KINDS:
            raise ValueError(f"Unknown registry event kind: {self.kind}")
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging or transport."""
        return {
            "kind": self.kind,
            "entity_id": self.entity_id,
            "actor": self.actor,
            "timestamp": self.timestamp.isoformat(),
            "payload": dict(self.payload),
        }
