"""BLAKE3 certification hash service.

Derives the 32-byte anchor a regulator passes to finalize_certification
from the equipment id and the ordered content ids of its documents.

Bundle encoding (all integers big-endian):

    b"plantcert.bundle.v1"
    equipment_id               8 bytes
    document count             4 bytes
    for each content id:
        byte length            4 bytes
        UTF-8 bytes

Length prefixes keep distinct bundles from colliding by concatenation.

Usage:
    service = Blake3CertificationHashService()
    anchor = service.hash_bundle(equipment, documents)
"""

from __future__ import annotations

from collections.abc import Sequence

import blake3

from plantcert.application.services.base import LoggingMixin
from plantcert.domain.models.document import Document
from plantcert.domain.models.equipment import Equipment

BUNDLE_DOMAIN_TAG: bytes = b"plantcert.bundle.v1"


class Blake3CertificationHashService(LoggingMixin):
    """BLAKE3 hashing of certification bundles."""

    def __init__(self) -> None:
        self._init_logger(component="integrity")

    def hash_bundle(self, equipment: Equipment, documents: Sequence[Document]) -> bytes:
        """Hash the equipment id and its documents' content ids, in order.

        Args:
            equipment: Equipment being certified.
            documents: Its documents in submission order.

        Returns:
            32-byte BLAKE3 digest.
        """
        hasher = blake3.blake3(BUNDLE_DOMAIN_TAG)
        hasher.update(equipment.id.to_bytes(8, "big"))
        hasher.update(len(documents).to_bytes(4, "big"))
        for document in documents:
            encoded = document.content_id.encode("utf-8")
            hasher.update(len(encoded).to_bytes(4, "big"))
            hasher.update(encoded)
        digest = hasher.digest()
        self._log_operation(
            "hash_bundle", equipment_id=equipment.id, document_count=len(documents)
        ).debug("bundle_hashed")
        return digest
