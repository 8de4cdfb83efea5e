"""Callbacks carrying their own priority.

A callback may fix the priority it runs at, independently of the priority
passed when it is registered.  Wrap it in :class:`PrioritizedCallback`
(or decorate it with :func:`priority`) and the carried value wins over any
``priority`` argument given to ``Dispatcher.add``.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from hookchain._types import Args, Callback, CallbackResult
from hookchain.exceptions import InvalidCallbackError

DEFAULT_PRIORITY = 100


class PrioritizedCallback(BaseModel):
    """Callable pairing a callback with a fixed priority.

    Instances are immutable and call straight through to the wrapped
    callback, so they can be registered and invoked like any callable.

    Example:
        >>> late = PrioritizedCallback(callback=lambda a: a, priority=500)
        >>> late({"x": 1})
        {'x': 1}

    Raises:
        InvalidCallbackError: If ``callback`` is not callable or
            ``priority`` is None.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    callback: Callable[..., Any]
    priority: Any

    def __init__(self, **data: Any) -> None:
        """Wrap pydantic ValidationError into InvalidCallbackError."""
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidCallbackError(str(exc)) from exc

    @field_validator("priority")
    @classmethod
    def _priority_required(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("priority must not be None")
        return value

    def __call__(self, args: Args) -> CallbackResult:
        return self.callback(args)


def priority(value: Any) -> Callable[[Callback], PrioritizedCallback]:
    """Decorator fixing the priority of a callback.

    Example::

        @priority(5)
        def normalize(args):
            return {**args, "name": args["name"].strip()}

        dispatcher.add("save", normalize, 50)  # still runs at 5

    Args:
        value: Priority the callback always runs at.

    Returns:
        Decorator producing a :class:`PrioritizedCallback`.
    """

    def decorator(func: Callback) -> PrioritizedCallback:
        return PrioritizedCallback(callback=func, priority=value)

    return decorator


def resolve_priority(
    callback: Callback,
    priority: Any = None,
    default: Any = DEFAULT_PRIORITY,
) -> Any:
    """Pick the priority a callback is registered at.

    The priority carried by the callback (a non-None ``priority``
    attribute, as exposed by :class:`PrioritizedCallback`) always wins,
    then the explicit *priority*, then *default*.

    Args:
        callback: Callback being registered.
        priority: Priority passed by the caller, or None.
        default: Fallback priority.

    Returns:
        Resolved priority.
    """
    carried = getattr(callback, "priority", None)
    if carried is not None:
        return carried
    if priority is not None:
        return priority
    return default


def callable_name(cb: Any) -> str:
    """Name a callback for log records.

    Wrapped callbacks read as ``name@priority``.  Objects without a
    ``__qualname__`` or ``__name__`` (partials, callable instances) fall
    back to their repr.
    """
    if isinstance(cb, PrioritizedCallback):
        return f"{callable_name(cb.callback)}@{cb.priority!r}"
    name = getattr(cb, "__qualname__", None) or getattr(cb, "__name__", None)
    return name if name else repr(cb)
