"""Document domain model.

Documents are references to supporting evidence held in an external
content store. The registry records who submitted what, for which
equipment and of which type; it never fetches or interprets the content
itself (content_id is opaque).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from plantcert.domain.models.address import Address


class DocumentType(str, Enum):
    """Kind of supporting document."""

    CERTIFICATION = "CERTIFICATION"
    LAB_REPORT = "LAB_REPORT"
    TECH_FILE = "TECH_FILE"
    COMPLIANCE = "COMPLIANCE"
    REGULATORY_REVIEW = "REGULATORY_REVIEW"


class DocumentStatus(str, Enum):
    """Review status of a document. New documents are SUBMITTED."""

    SUBMITTED = "SUBMITTED"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    DEPRECATED = "DEPRECATED"


@dataclass(frozen=True, eq=True)
class Document:
    """A supporting document attached to one piece of equipment.

    Attributes:
        id: Registry-allocated identifier (starts at 0).
        name: Document title.
        description: Free-form description.
        doc_type: Kind of document, drives visibility.
        status: Review status.
        submitter: Address that submitted the document.
        submitted_at: Submission time (UTC).
        content_id: Opaque content identifier in the external store.
        equipment_id: Equipment the document supports.
    """

    id: int
    name: str
    description: str
    doc_type: DocumentType
    status: DocumentStatus
    submitter: Address
    submitted_at: datetime
    content_id: str
    equipment_id: int
