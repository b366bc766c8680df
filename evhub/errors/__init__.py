"""Error handling for evhub."""

from evhub.errors.evhub_errors import CallbackResolutionError
from evhub.errors.evhub_errors import ConfigurationError
from evhub.errors.evhub_errors import ErrorHandler
from evhub.errors.evhub_errors import EvhubError
from evhub.errors.evhub_errors import ListenerError
from evhub.errors.evhub_errors import SubscriptionError
from evhub.errors.evhub_errors import default_error_handler
from evhub.errors.evhub_errors import handle_error

__all__ = [
    "CallbackResolutionError",
    "ConfigurationError",
    "ErrorHandler",
    "EvhubError",
    "ListenerError",
    "SubscriptionError",
    "default_error_handler",
    "handle_error",
]
