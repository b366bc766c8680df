"""Configuration for evhub event hubs.

Dispatch behaviour that the hub leaves to policy (how mutation during
``emit`` is treated, whether listener faults are isolated, how eagerly
method names are resolved) is selected here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from typing import get_args

from evhub.errors import ConfigurationError

DispatchMode = Literal["snapshot", "live"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class HubConfig:
    """Settings consulted by every :class:`~evhub.hub.EventHub` operation.

    ``log_level`` is not read by the hubs; it takes effect only when
    :func:`~evhub.config.apply_log_level` is called.
    """

    # Dispatch
    dispatch_mode: DispatchMode = "snapshot"
    isolate_listener_errors: bool = False

    # Registration
    strict_callbacks: bool = False

    # Logging
    log_level: LogLevel = "WARNING"

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if self.dispatch_mode not in get_args(DispatchMode):
            raise ConfigurationError(
                f"Unknown dispatch mode: {self.dispatch_mode!r}",
                config_key="dispatch_mode",
                details={"allowed": list(get_args(DispatchMode))},
            )

        if self.log_level not in get_args(LogLevel):
            raise ConfigurationError(
                f"Unknown log level: {self.log_level!r}",
                config_key="log_level",
                details={"allowed": list(get_args(LogLevel))},
            )


# Default configuration instance
DEFAULT_CONFIG = HubConfig()
