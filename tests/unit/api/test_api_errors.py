"""Unit tests for domain error to HTTP translation."""

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from plantcert.api.errors import ERROR_TYPE_PREFIX, to_http_exception
from plantcert.domain.errors import (
    AlreadyConfiguredError,
    EquipmentNotFoundError,
    EquipmentNotUnderReviewError,
    GatewayOnlyError,
    InvalidInputError,
    RoleAlreadyAssignedError,
    SoulboundTokenError,
    UnauthorizedDocumentAccessError,
    UnauthorizedError,
)
from plantcert.domain.exceptions import CertificationRegistryError
from plantcert.domain.models.equipment import (
    CertificationStep,
    EquipmentStatus,
    LifecycleState,
)
from plantcert.domain.models.role import Role


@pytest.fixture
def request_() -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": "/v1/equipment/3/finalize",
            "root_path": "",
            "query_string": b"",
            "headers": [],
        }
    )


def _detail(exc: HTTPException) -> dict:
    assert isinstance(exc.detail, dict)
    return exc.detail


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("error", "status_code", "slug"),
        [
            (EquipmentNotFoundError(3), 404, "not-found"),
            (GatewayOnlyError("0xa", "create_plant"), 403, "unauthorized"),
            (UnauthorizedDocumentAccessError(1, "0xa"), 403, "unauthorized"),
            (
                EquipmentNotUnderReviewError(
                    3,
                    LifecycleState(EquipmentStatus.PENDING, CertificationStep.READY_FOR_REVIEW),
                ),
                409,
                "invalid-lifecycle-state",
            ),
            (RoleAlreadyAssignedError(Role.LABORATORY, "0xa"), 409, "role-already-assigned"),
            (AlreadyConfiguredError("0xgateway"), 409, "already-configured"),
            (SoulboundTokenError(3), 409, "soulbound"),
            (InvalidInputError("reason"), 400, "invalid-input"),
            (CertificationRegistryError("boom"), 500, "internal"),
        ],
    )
    def test_mapping(
        self,
        request_: Request,
        error: CertificationRegistryError,
        status_code: int,
        slug: str,
    ) -> None:
        exc = to_http_exception(error, request_)
        detail = _detail(exc)
        assert exc.status_code == status_code
        assert detail["status"] == status_code
        assert detail["type"] == f"{ERROR_TYPE_PREFIX}{slug}"
        assert detail["detail"] == str(error)
        assert detail["error"] == type(error).__name__
        assert detail["instance"] == "http://testserver/v1/equipment/3/finalize"


class TestExtensions:
    def test_not_found(self, request_: Request) -> None:
        detail = _detail(to_http_exception(EquipmentNotFoundError(3), request_))
        assert detail["entity"] == "equipment"
        assert detail["entity_id"] == 3

    def test_unauthorized(self, request_: Request) -> None:
        detail = _detail(to_http_exception(GatewayOnlyError("0xa", "create_plant"), request_))
        assert detail["caller"] == "0xa"
        assert detail["required_roles"] == ["GATEWAY"]
        assert "equipment_id" not in detail

    def test_unauthorized_on_equipment(self, request_: Request) -> None:
        error = UnauthorizedError("0xa", (Role.REGULATORY_AUTHORITY,), "review", equipment_id=4)
        detail = _detail(to_http_exception(error, request_))
        assert detail["equipment_id"] == 4
        assert detail["required_roles"] == ["REGULATORY_AUTHORITY"]

    def test_lifecycle(self, request_: Request) -> None:
        state = LifecycleState(EquipmentStatus.PENDING, CertificationStep.READY_FOR_REVIEW)
        detail = _detail(to_http_exception(EquipmentNotUnderReviewError(3, state), request_))
        assert detail["equipment_id"] == 3
        assert detail["status"] == 409
        assert detail["equipment_status"] == "PENDING"
        assert detail["equipment_step"] == "READY_FOR_REVIEW"

    def test_invalid_input(self, request_: Request) -> None:
        detail = _detail(to_http_exception(InvalidInputError("reason"), request_))
        assert detail["field"] == "reason"
