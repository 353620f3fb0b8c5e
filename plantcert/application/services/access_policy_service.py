"""Document access policy service.

Answers "may this viewer read this document?" by combining the stored
document, the viewer's current roles and the fixed access matrix.
"""

from __future__ import annotations

from plantcert.application.services.base import LoggingMixin
from plantcert.application.services.entity_registry_service import (
    EntityRegistryService,
)
from plantcert.application.services.role_directory_service import RoleDirectoryService
from plantcert.domain.errors.authorization import UnauthorizedDocumentAccessError
from plantcert.domain.models.address import Address
from plantcert.domain.models.document import Document, DocumentType
from plantcert.domain.models.role import Role
from plantcert.domain.services.document_access_policy import (
    is_accessible_to_roles,
    is_visible,
    is_visible_to_viewer,
    resolve_viewer_role,
)


class AccessPolicyService(LoggingMixin):
    """Strict and permissive document visibility checks."""

    def __init__(
        self,
        registry: EntityRegistryService,
        role_directory: RoleDirectoryService,
    ) -> None:
        self._registry = registry
        self._roles = role_directory
        self._init_logger(component="access")

    def is_visible(self, doc_type: DocumentType, role: Role) -> bool:
        """Raw matrix lookup for one role."""
        return is_visible(doc_type, role)

    def resolve_viewer_role(self, viewer: Address) -> Role | None:
        """The single role that decides visibility for viewer, if any."""
        return resolve_viewer_role(self._roles.roles_of(viewer))

    def can_view(self, document_id: int, viewer: Address) -> bool:
        """Strict check: submitter, else first-matching role's matrix row.

        Raises:
            DocumentNotFoundError: document_id does not exist.
        """
        document = self._registry.get_document(document_id)
        return self._can_view(document, viewer)

    def get_if_authorized(self, document_id: int, viewer: Address) -> Document:
        """Return the document if viewer may read it.

        Raises:
            DocumentNotFoundError: document_id does not exist.
            UnauthorizedDocumentAccessError: viewer may not read it.
        """
        document = self._registry.get_document(document_id)
        if not self._can_view(document, viewer):
            self._log_operation(
                "get_if_authorized",
                document_id=document_id,
                viewer=viewer,
                doc_type=document.doc_type.value,
            ).warning("document_access_denied")
            raise UnauthorizedDocumentAccessError(document_id, viewer)
        return document

    def is_accessible_by(self, document_id: int, caller: Address) -> bool:
        """Permissive dashboard check.

        Submitter and oversight roles always pass; otherwise any held role
        whose extended row allows the type does.

        Raises:
            DocumentNotFoundError: document_id does not exist.
        """
        document = self._registry.get_document(document_id)
        if document.submitter == caller:
            return True
        return is_accessible_to_roles(document.doc_type, self._roles.roles_of(caller))

    def _can_view(self, document: Document, viewer: Address) -> bool:
        if document.submitter == viewer:
            return True
        return is_visible_to_viewer(document.doc_type, self._roles.roles_of(viewer))
