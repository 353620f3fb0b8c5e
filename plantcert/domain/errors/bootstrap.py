"""One-time bootstrap errors."""

from __future__ import annotations

from plantcert.domain.exceptions import CertificationRegistryError


class AlreadyConfiguredError(CertificationRegistryError):
    """Raised when the gateway principal is configured a second time.

    Attributes:
        current_gateway: The gateway that is already configured.
    """

    def __init__(self, current_gateway: str) -> None:
        self.current_gateway = current_gateway
        super().__init__(f"Gateway already configured as {current_gateway}")
