"""Logging for ide-analytics.

Exposes a module-level ``logger`` and ``ContextualLogger``, a LoggerAdapter
that carries key/value dimensions into every record.

Usage:
    from ide_analytics.core.logging import logger

    tracker_logger = logger.with_prefix("[GoogleUsageTracker] ").with_context(
        component="tracker"
    )
    tracker_logger.info("Tracker ready")
"""

import logging
from typing import Any, MutableMapping, Optional, Tuple

LOGGER_NAME = "ide_analytics"

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter with immutable, chainable context.

    Each ``with_context``/``with_prefix`` call returns a new logger; the
    original is never mutated, so loggers can be derived freely per component.
    """

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Wrap a stdlib logger with context dimensions and a message prefix."""
        super().__init__(logger, dimensions or {})
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional context dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to every message."""
        return ContextualLogger(self.logger, self.dimensions, self.prefix + prefix)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, Any]:
        """Attach dimensions to ``extra`` and render them after the message."""
        extra = {**self.dimensions, **kwargs.get("extra", {})}
        kwargs["extra"] = extra
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in sorted(self.dimensions.items()))
            msg = f"{self.prefix}{msg} [{rendered}]"
        else:
            msg = f"{self.prefix}{msg}"
        return msg, kwargs


_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter(_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the package logger and set its level.

    Safe to call more than once; the handler is only added the first time.
    Hosts that configure logging themselves can skip this entirely.
    """
    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(level.upper())
    if _handler not in base.handlers:
        base.addHandler(_handler)


logger = ContextualLogger(logging.getLogger(LOGGER_NAME))
