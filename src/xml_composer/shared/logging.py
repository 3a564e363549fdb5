"""Correlation-aware logging for document composition.

Every record emitted through a ``CorrelationLogger`` carries ``component``
and ``correlation_id`` attributes plus any context bound with ``bind``, so
bulk edits, object mapping and persistence of one document can be traced
together. The library installs no handlers.
"""

import logging
from typing import Any, Dict, Mapping, Optional


class CorrelationLogger:
    """Wrapper around a standard logger that injects bound context as ``extra``."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Initialize correlation logger.

        Args:
            name: Logger name (typically __name__)
            correlation_id: Optional correlation ID shared by one document or request
            component: Component name; defaults to the last dotted segment of ``name``
            context: Fields added to every record emitted by this logger
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.rsplit(".", 1)[-1]
        self.context: Dict[str, Any] = dict(context or {})

    def bind(self, **context: Any) -> "CorrelationLogger":
        """Return a logger for the same target with ``context`` merged in.

        The receiver is left unchanged. Later bindings win over earlier ones.
        """
        return CorrelationLogger(
            self.logger.name,
            self.correlation_id,
            self.component,
            {**self.context, **context},
        )

    def is_enabled_for(self, level: int) -> bool:
        """Check whether messages of ``level`` would be emitted."""
        return self.logger.isEnabledFor(level)

    def log(
        self,
        level: int,
        message: str,
        extra: Optional[Mapping[str, Any]] = None,
        exc_info: bool = False,
    ) -> None:
        """Emit ``message`` at ``level`` with correlation fields, bound context and ``extra``."""
        if not self.logger.isEnabledFor(level):
            return
        fields: Dict[str, Any] = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        fields.update(self.context)
        if extra:
            fields.update(extra)
        self.logger.log(level, message, extra=fields, exc_info=exc_info)

    def debug(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> None:
        self.log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> None:
        self.log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Mapping[str, Any]] = None) -> None:
        self.log(logging.WARNING, message, extra)

    def error(
        self,
        message: str,
        extra: Optional[Mapping[str, Any]] = None,
        exc_info: bool = True,
    ) -> None:
        """Log at ERROR, attaching the active exception by default."""
        self.log(logging.ERROR, message, extra, exc_info)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None,
) -> CorrelationLogger:
    """Get a correlation-aware logger.

    Args:
        name: Logger name (typically __name__)
        correlation_id: Optional correlation ID shared by one document or request
        component: Component name for structured logging

    Returns:
        CorrelationLogger instance
    """
    return CorrelationLogger(name, correlation_id, component)
