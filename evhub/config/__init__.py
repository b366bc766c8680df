"""Configuration management for evhub."""

from evhub.config.config_manager import ConfigContext
from evhub.config.config_manager import apply_log_level
from evhub.config.config_manager import config_context
from evhub.config.config_manager import get_config
from evhub.config.config_manager import reset_config
from evhub.config.config_manager import set_config
from evhub.config.config_manager import update_config
from evhub.config.hub_config import DEFAULT_CONFIG
from evhub.config.hub_config import HubConfig

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigContext",
    "HubConfig",
    "apply_log_level",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
