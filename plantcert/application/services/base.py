"""Structured logging shared by the registry services.

Each service calls _init_logger() once with its component name
("registry", "lifecycle", "roles", ...) and then asks _log_operation()
for a logger scoped to one call:

    self._log_operation(
        "finalize_certification", caller=caller, equipment_id=equipment_id
    ).info("certification_finalized")

Operation loggers carry the current correlation id, so service lines and
the audit sink's registry_event lines for one request share it.
"""

import structlog

from plantcert.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type (default: "registry")

    Each operation gets:
    - operation: The name of the operation being performed
    - correlation_id: From context for request tracing
    - Any additional context passed to _log_operation()

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "registry") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.

        Args:
            component: The component type for log categorization.
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create operation-scoped logger with correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and correlation context.
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
