"""Document read API routes.

GET /v1/documents/{id} returns the document only if the caller passes the
strict visibility check; /access reports both the strict and the
permissive answers without disclosing the document.
"""

from fastapi import APIRouter, Depends, Request

from plantcert.api.auth.caller import get_caller_address
from plantcert.api.dependencies.certification import get_access_policy_service
from plantcert.api.errors import to_http_exception
from plantcert.api.models.certification import DocumentAccessResponse, DocumentResponse
from plantcert.api.models.common import ErrorResponse
from plantcert.application.services.access_policy_service import AccessPolicyService
from plantcert.domain.exceptions import CertificationRegistryError

router = APIRouter(prefix="/v1/documents", tags=["documents"])


@router.get(
    "/{document_id}",
    response_model=DocumentResponse,
    responses={
        403: {"model": ErrorResponse, "description": "Caller may not view document"},
        404: {"model": ErrorResponse, "description": "Document not found"},
    },
)
async def get_document(
    document_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    access: AccessPolicyService = Depends(get_access_policy_service),
) -> DocumentResponse:
    try:
        document = access.get_if_authorized(document_id, caller)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return DocumentResponse.from_domain(document)


@router.get(
    "/{document_id}/access",
    response_model=DocumentAccessResponse,
    responses={404: {"model": ErrorResponse, "description": "Document not found"}},
)
async def get_document_access(
    document_id: int,
    request: Request,
    caller: str = Depends(get_caller_address),
    access: AccessPolicyService = Depends(get_access_policy_service),
) -> DocumentAccessResponse:
    try:
        can_view = access.can_view(document_id, caller)
        accessible = access.is_accessible_by(document_id, caller)
    except CertificationRegistryError as e:
        raise to_http_exception(e, request) from None
    return DocumentAccessResponse(
        document_id=document_id,
        viewer=caller,
        can_view=can_view,
        accessible=accessible,
    )
