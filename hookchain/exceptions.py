"""Exception hierarchy for hookchain.

All custom exceptions inherit from HookError base class.  Failures raised
by registered callbacks are never wrapped: they reach the ``apply`` caller
as-is.
"""


class HookError(Exception):
    """Base exception for all hookchain errors.

    Allows users to catch every framework-specific error with a single
    except clause.
    """


class InvalidEventNameError(HookError, ValueError):
    """Event name is not a non-empty string."""


class InvalidCallbackError(HookError, TypeError):
    """A value registered as a callback is not callable."""


class PriorityOrderError(HookError, TypeError):
    """Priority cannot be ordered against the event's existing priorities.

    Raised at registration time when the new priority does not support
    comparison with the priorities already present for the same event
    (e.g. ``"late"`` next to ``10``).  The registry is left unchanged.
    """


class ConfigError(HookError, ValueError):
    """Configuration table failed validation.

    This wraps pydantic.ValidationError raised while reading
    ``[tool.hookchain]`` from a ``pyproject.toml``.
    """
