"""Domain events emitted by the certification registry."""

from plantcert.domain.events.registry_event import (
    ACTOR_REGISTERED_EVENT,
    CERTIFICATION_HASH_SET_EVENT,
    DOCUMENT_SUBMITTED_EVENT,
    EQUIPMENT_REGISTERED_EVENT,
    EQUIPMENT_STATUS_UPDATED_EVENT,
    GATEWAY_CONFIGURED_EVENT,
    INTEGRITY_VERIFIED_EVENT,
    OWNERSHIP_BOUND_EVENT,
    PLANT_REGISTERED_EVENT,
    REGISTRY_EVENT_KINDS,
    REJECTION_REASON_SET_EVENT,
    ROLE_GRANTED_EVENT,
    ROLE_REVOKED_EVENT,
    RegistryEvent,
)

__all__ = [
    "ACTOR_REGISTERED_EVENT",
    "CERTIFICATION_HASH_SET_EVENT",
    "DOCUMENT_SUBMITTED_EVENT",
    "EQUIPMENT_REGISTERED_EVENT",
    "EQUIPMENT_STATUS_UPDATED_EVENT",
    "GATEWAY_CONFIGURED_EVENT",
    "INTEGRITY_VERIFIED_EVENT",
    "OWNERSHIP_BOUND_EVENT",
    "PLANT_REGISTERED_EVENT",
    "REGISTRY_EVENT_KINDS",
    "REJECTION_REASON_SET_EVENT",
    "ROLE_GRANTED_EVENT",
    "ROLE_REVOKED_EVENT",
    "RegistryEvent",
]
