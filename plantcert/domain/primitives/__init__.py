"""Domain primitives shared by the registry services."""

from plantcert.domain.primitives.ensure_atomicity import (
    AtomicOperationContext,
    RollbackHandler,
)

__all__ = ["AtomicOperationContext", "RollbackHandler"]
