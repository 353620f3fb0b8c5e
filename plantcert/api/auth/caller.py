"""Caller identity extraction.

The boundary trusts the X-Caller-Address header completely; upstream
infrastructure is responsible for authenticating it. Addresses are
lowercased here so the registry compares them consistently.
"""

from typing import Annotated

import structlog
from fastapi import Header, HTTPException, status

CALLER_HEADER = "X-Caller-Address"

logger = structlog.get_logger(__name__)


def get_caller_address(
    x_caller_address: Annotated[
        str | None,
        Header(
            alias=CALLER_HEADER,
            description="Address of the principal performing the request.",
        ),
    ] = None,
) -> str:
    """Return the normalized caller address.

    Raises:
        HTTPException 401: If the header is missing or blank.
    """
    if not x_caller_address or not x_caller_address.strip():
        logger.bind(component="caller_auth").warning(
            "auth_failed", reason="missing_caller_address"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "type": "urn:plantcert:error:missing-caller",
                "title": "Missing Caller",
                "status": 401,
                "detail": f"{CALLER_HEADER} header is required",
            },
        )
    return x_caller_address.strip().lower()
