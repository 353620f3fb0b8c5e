"""Integrity verification of certified equipment.

Compares a candidate hash with the anchor stored at certification. The
check is constant-time and never mutates storage; check_and_log() also
emits an integrity.verified audit event recording who asked and what the
answer was.
"""

from __future__ import annotations

from plantcert.application.ports.event_sink import EventSinkProtocol
from plantcert.application.ports.time_authority import TimeAuthorityProtocol
from plantcert.application.services.base import LoggingMixin
from plantcert.application.services.certification_hash_service import (
    Blake3CertificationHashService,
)
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.domain.errors.validation import InvalidInputError
from plantcert.domain.events.registry_event import (
    INTEGRITY_VERIFIED_EVENT,
    RegistryEvent,
)
from plantcert.domain.models.address import Address
from plantcert.domain.models.certification_hash import (
    hash_to_hex,
    hashes_match,
    validate_hash,
)
from plantcert.domain.services.lifecycle_guard import ensure_verifiable


class IntegrityVerificationService(LoggingMixin):
    """Verifies candidate hashes against stored certification anchors."""

    def __init__(
        self,
        registry: EntityRegistryService,
        hash_service: Blake3CertificationHashService,
        event_sink: EventSinkProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._registry = registry
        self._hashes = hash_service
        self._events = event_sink
        self._time = time_authority
        self._init_logger(component="integrity")

    def verify(self, equipment_id: int, candidate_hash: bytes) -> bool:
        """Return whether candidate_hash equals the stored anchor.

        Raises:
            EquipmentNotFoundError: equipment_id does not exist.
            ActionNotAllowedInCurrentStepError: equipment is neither
                certified nor deprecated.
            InvalidInputError: candidate_hash is not 32 bytes.
        """
        equipment = self._registry.get_equipment(equipment_id)
        ensure_verifiable(equipment)
        try:
            candidate = validate_hash(candidate_hash)
        except ValueError as exc:
            raise InvalidInputError("candidate_hash", str(exc)) from None
        return hashes_match(equipment.final_certification_hash, candidate)

    async def check_and_log(
        self, verifier: Address, equipment_id: int, candidate_hash: bytes
    ) -> bool:
        """Verify and record the check as an integrity.verified event."""
        result = self.verify(equipment_id, candidate_hash)
        timestamp = self._time.utcnow()
        await self._events.emit(
            RegistryEvent(
                kind=INTEGRITY_VERIFIED_EVENT,
                entity_id=equipment_id,
                actor=verifier,
                timestamp=timestamp,
                payload={
                    "equipment_id": equipment_id,
                    "candidate_hash": hash_to_hex(candidate_hash),
                    "result": result,
                    "verifier": verifier,
                    "verified_at": timestamp.isoformat(),
                },
            )
        )
        log = self._log_operation(
            "check_and_log", verifier=verifier, equipment_id=equipment_id
        )
        if result:
            log.info("integrity_verified")
        else:
            log.warning("integrity_mismatch")
        return result

    def compute_bundle_hash(self, equipment_id: int) -> bytes:
        """Derive the bundle hash of the equipment's current documents.

        Raises:
            EquipmentNotFoundError: equipment_id does not exist.
        """
        equipment = self._registry.get_equipment(equipment_id)
        documents = [
            self._registry.get_document(doc_id)
            for doc_id in self._registry.equipment_document_ids(equipment_id)
        ]
        return self._hashes.hash_bundle(equipment, documents)
