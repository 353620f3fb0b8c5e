"""All-or-nothing grouping of registry mutations.

A lifecycle call such as finalize_certification is several registry
writes (hash, reason, status). AtomicOperationContext collects one undo
handler per applied write; if anything inside the block raises, the
handlers run newest-first and the original exception propagates.

Usage:
    async with AtomicOperationContext() as operation:
        apply_change()
        operation.add_rollback(undo_change)
        await next_step()  # raising here runs undo_change
"""

from collections.abc import Callable
from types import TracebackType

import structlog

log = structlog.get_logger()

RollbackHandler = Callable[[], None]


class AtomicOperationContext:
    """Async context manager running undo handlers (LIFO) on failure.

    Handlers are synchronous: they only restore in-memory records and
    must not await, so a rollback cannot interleave with another writer.
    """

    def __init__(self, operation: str = "") -> None:
        self._operation = operation
        self._rollback_handlers: list[RollbackHandler] = []

    @property
    def pending_rollbacks(self) -> int:
        return len(self._rollback_handlers)

    def add_rollback(self, handler: RollbackHandler) -> None:
        self._rollback_handlers.append(handler)

    async def __aenter__(self) -> "AtomicOperationContext":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        if exc_val is None:
            return False

        log.warning(
            "atomic_operation_rolled_back",
            operation=self._operation,
            error_type=exc_type.__name__ if exc_type else "Unknown",
            rollback_count=len(self._rollback_handlers),
        )
        for handler in reversed(self._rollback_handlers):
            try:
                handler()
            except Exception as rollback_error:
                # Remaining handlers still run; the original error wins
                log.error(
                    "rollback_handler_failed",
                    operation=self._operation,
                    rollback_error=str(rollback_error),
                    rollback_error_type=type(rollback_error).__name__,
                )
        self._rollback_handlers.clear()
        return False
