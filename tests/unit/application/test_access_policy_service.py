"""Unit tests for AccessPolicyService."""

import pytest

from plantcert.bootstrap.certification import CertificationSystem
from plantcert.domain.errors import DocumentNotFoundError, UnauthorizedDocumentAccessError
from plantcert.domain.models.document import Document, DocumentType
from plantcert.domain.models.equipment import Equipment
from plantcert.domain.models.role import Role
from tests.helpers.addresses import (
    LABORATORY,
    MANUFACTURER,
    OFFICER,
    OPERATOR,
    OUTSIDER,
    REGULATOR,
    SUPER_ADMIN,
)


async def _document(
    system: CertificationSystem, submitter: str, doc_type: DocumentType
) -> Document:
    return await system.lifecycle.register_document(
        submitter,
        0,
        doc_type=doc_type,
        name=doc_type.value.title(),
        description="evidence",
        content_id=f"bafy-{doc_type.value.lower()}",
    )


class TestStrictAccess:
    @pytest.mark.asyncio
    async def test_submitter_always_sees_own_document(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        document = await _document(staffed_system, MANUFACTURER, DocumentType.LAB_REPORT)
        assert staffed_system.access_policy.can_view(document.id, MANUFACTURER)

    @pytest.mark.asyncio
    async def test_matrix_decides_for_others(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        access = staffed_system.access_policy
        lab_report = await _document(staffed_system, LABORATORY, DocumentType.LAB_REPORT)
        compliance = await _document(staffed_system, OPERATOR, DocumentType.COMPLIANCE)

        assert not access.can_view(lab_report.id, MANUFACTURER)
        assert access.can_view(lab_report.id, OFFICER)
        assert access.can_view(compliance.id, REGULATOR)
        assert not access.can_view(compliance.id, OFFICER)
        assert not access.can_view(compliance.id, SUPER_ADMIN)
        assert not access.can_view(compliance.id, OUTSIDER)

    @pytest.mark.asyncio
    async def test_first_matching_role_decides(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        """A manufacturer who is also a laboratory is judged as a manufacturer."""
        await staffed_system.lifecycle.register_laboratory(OPERATOR, MANUFACTURER, 0, "Lab")
        lab_report = await _document(staffed_system, LABORATORY, DocumentType.LAB_REPORT)

        access = staffed_system.access_policy
        assert access.resolve_viewer_role(MANUFACTURER) is Role.MANUFACTURER
        assert not access.can_view(lab_report.id, MANUFACTURER)

    @pytest.mark.asyncio
    async def test_get_if_authorized(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        access = staffed_system.access_policy
        tech_file = await _document(staffed_system, MANUFACTURER, DocumentType.TECH_FILE)

        assert access.get_if_authorized(tech_file.id, OFFICER) == tech_file
        with pytest.raises(UnauthorizedDocumentAccessError) as exc_info:
            access.get_if_authorized(tech_file.id, LABORATORY)
        assert exc_info.value.document_id == tech_file.id
        assert exc_info.value.viewer == LABORATORY

    @pytest.mark.asyncio
    async def test_unknown_document(self, system: CertificationSystem) -> None:
        with pytest.raises(DocumentNotFoundError):
            system.access_policy.can_view(0, OPERATOR)

    @pytest.mark.asyncio
    async def test_raw_lookup(self, system: CertificationSystem) -> None:
        assert system.access_policy.is_visible(DocumentType.LAB_REPORT, Role.LABORATORY)
        assert not system.access_policy.is_visible(DocumentType.LAB_REPORT, Role.MANUFACTURER)


class TestPermissiveAccess:
    @pytest.mark.asyncio
    async def test_laboratory_reads_tech_files_on_dashboards(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        access = staffed_system.access_policy
        tech_file = await _document(staffed_system, MANUFACTURER, DocumentType.TECH_FILE)
        assert access.is_accessible_by(tech_file.id, LABORATORY)
        assert not access.can_view(tech_file.id, LABORATORY)

    @pytest.mark.asyncio
    async def test_oversight_sees_everything(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        compliance = await _document(staffed_system, OPERATOR, DocumentType.COMPLIANCE)
        assert staffed_system.access_policy.is_accessible_by(compliance.id, OFFICER)

    @pytest.mark.asyncio
    async def test_outsider_and_submitter(
        self, staffed_system: CertificationSystem, registered_equipment: Equipment
    ) -> None:
        access = staffed_system.access_policy
        review = await _document(staffed_system, REGULATOR, DocumentType.REGULATORY_REVIEW)
        assert access.is_accessible_by(review.id, REGULATOR)
        assert not access.is_accessible_by(review.id, OUTSIDER)
        assert not access.is_accessible_by(review.id, MANUFACTURER)
