"""Not-found errors for registry entities.

Raised when an operation references a Plant, Equipment, Document or
Actor identifier that has never been allocated. Identifiers are never
reused or deleted, so a not-found error is always a caller mistake.
"""

from __future__ import annotations

from plantcert.domain.exceptions import CertificationRegistryError


class EntityNotFoundError(CertificationRegistryError):
    """Base error for references to unknown entities.

    Attributes:
        entity_kind: Human-readable entity kind ("plant", "equipment", ...).
        entity_id: The identifier that was not found.
    """

    entity_kind: str = "entity"

    def __init__(self, entity_id: int) -> None:
        """Initialize the error.

        Args:
            entity_id: The identifier that was not found.
        """
        self.entity_id = entity_id
        super().__init__(f"{self.entity_kind.capitalize()} {entity_id} not found")


class PlantNotFoundError(EntityNotFoundError):
    """Raised when a plant id does not exist."""

    entity_kind = "plant"


class EquipmentNotFoundError(EntityNotFoundError):
    """Raised when an equipment id does not exist."""

    entity_kind = "equipment"


class DocumentNotFoundError(EntityNotFoundError):
    """Raised when a document id does not exist."""

    entity_kind = "document"


class ActorNotFoundError(EntityNotFoundError):
    """Raised when an actor id does not exist."""

    entity_kind = "actor"
