"""hookchain - priority-ordered asynchronous hooks for Python.

Register callbacks under an event name, then apply the event to an
arguments dict: callbacks run one after another in ascending priority,
each transforming the result of the previous one.
"""

__version__ = "0.1.0"

from loguru import logger

# Disable all hookchain logging by default.  Users opt in with:
#     from loguru import logger
#     logger.enable("hookchain")
logger.disable("hookchain")

from hookchain.callbacks import DEFAULT_PRIORITY, PrioritizedCallback, priority
from hookchain.config import HookchainConfig, load_config
from hookchain.dispatcher import Dispatcher
from hookchain.exceptions import (
    ConfigError,
    HookError,
    InvalidCallbackError,
    InvalidEventNameError,
    PriorityOrderError,
)

# Module-level default dispatcher instance
default_dispatcher = Dispatcher()

__all__ = [
    # Version
    "__version__",
    # Callbacks
    "DEFAULT_PRIORITY",
    "PrioritizedCallback",
    "priority",
    # Dispatcher
    "Dispatcher",
    "default_dispatcher",
    # Configuration
    "HookchainConfig",
    "load_config",
    # Exception classes
    "HookError",
    "InvalidEventNameError",
    "InvalidCallbackError",
    "PriorityOrderError",
    "ConfigError",
]
