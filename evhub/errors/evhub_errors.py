"""Exceptions raised by evhub and reporting of isolated listener faults.

This module provides the exception hierarchy raised by event hubs, along with
the handler used to report listener faults when dispatch isolates them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from collections.abc import Callable


class EvhubError(Exception):
    """Root of the evhub exception tree.

    Carries a machine-readable ``error_code``, structured ``details`` and the
    underlying ``cause`` when one exception wraps another.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Return the code, message and details as a plain dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(EvhubError):
    """Raised by :meth:`HubConfig.validate` for unsupported settings."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key


class SubscriptionError(EvhubError):
    """Raised when a listener cannot be registered."""

    def __init__(
        self,
        message: str,
        *,
        event: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if event:
            details["event"] = event
        kwargs.setdefault("error_code", "SubscriptionError")
        super().__init__(message, details=details, **kwargs)
        self.event = event


class CallbackResolutionError(SubscriptionError):
    """Raised when a callback named by string has no matching method."""

    def __init__(
        self,
        message: str,
        *,
        event: str | None = None,
        method_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if method_name:
            details["method_name"] = method_name
        super().__init__(
            message,
            event=event,
            error_code="CallbackResolutionError",
            details=details,
            **kwargs,
        )
        self.method_name = method_name


class ListenerError(EvhubError):
    """Wraps an exception raised by a listener during dispatch."""

    def __init__(
        self,
        message: str,
        *,
        event: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if event:
            details["event"] = event
        super().__init__(message, error_code="ListenerError", details=details, **kwargs)
        self.event = event


class ErrorHandler:
    """Reports listener faults that dispatch chose not to propagate.

    Each fault is logged with its traceback, then passed to every handler
    registered for a matching exception type.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._error_handlers: dict[type[Exception], Callable[[Exception], Any]] = {}

    def register_handler(
        self,
        exception_type: type[Exception],
        handler: Callable[[Exception], Any],
    ) -> None:
        """Call *handler* for every reported fault of *exception_type*."""
        self._error_handlers[exception_type] = handler

    def handle_error(
        self,
        error: Exception,
        *,
        log_level: int = logging.ERROR,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Log *error* and run the handlers registered for its type.

        A handler that raises is logged and does not stop the others.
        """
        if context:
            self.logger.log(log_level, "%s (context: %s)", error, context, exc_info=error)
        else:
            self.logger.log(log_level, "%s", error, exc_info=error)

        for exc_type, handler in self._error_handlers.items():
            if not isinstance(error, exc_type):
                continue
            try:
                handler(error)
            except Exception:
                self.logger.exception("Error handler for %s failed", exc_type.__name__)


default_error_handler = ErrorHandler()


def handle_error(
    error: Exception,
    *,
    log_level: int = logging.ERROR,
    context: dict[str, Any] | None = None,
) -> None:
    """Report *error* through the default handler."""
    default_error_handler.handle_error(error, log_level=log_level, context=context)
