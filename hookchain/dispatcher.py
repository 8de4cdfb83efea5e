"""Priority-ordered asynchronous hook dispatcher."""

import inspect
from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger

from hookchain._types import Args, Callback, CallbackOrSequence
from hookchain.callbacks import DEFAULT_PRIORITY, callable_name, resolve_priority
from hookchain.config import HookchainConfig
from hookchain.exceptions import InvalidCallbackError, InvalidEventNameError
from hookchain.registry import HookRegistry

log = logger.bind(source=__name__)


class Dispatcher:
    """Asynchronous hook dispatcher.

    Callbacks are registered under an event name at a priority.  Applying
    the event threads an arguments dict through every callback, strictly
    one after another, lowest priority first and registration order within
    a priority.

    The registry is not locked.  Hosts calling :meth:`add` from other
    threads while :meth:`apply` runs must synchronize themselves.
    """

    def __init__(self, default_priority: Any = DEFAULT_PRIORITY) -> None:
        """Initialize dispatcher.

        Args:
            default_priority: Priority used when neither the callback nor
                the caller supplies one.
        """
        self.default_priority = default_priority
        self._registry = HookRegistry[Callback]()

    @classmethod
    def from_config(cls, config: HookchainConfig) -> "Dispatcher":
        """Build a dispatcher from a loaded ``[tool.hookchain]`` table."""
        return cls(default_priority=config.default_priority)

    def on(
        self,
        event_name: str,
        priority: Any = None,
    ) -> Callable[[Callback], Callback]:
        """Decorator to register a function as a callback.

        Args:
            event_name: Event to register for.
            priority: Priority to register at, unless the callback
                carries its own.

        Returns:
            Decorator function that returns the original function unchanged.
        """

        def decorator(func: Callback) -> Callback:
            self.add(event_name, func, priority)
            return func

        return decorator

    def add(
        self,
        event_name: str,
        callback: CallbackOrSequence,
        priority: Any = None,
    ) -> None:
        """Register a callback, or a list/tuple of callbacks, for an event.

        The priority carried by a callback (see
        :class:`~hookchain.callbacks.PrioritizedCallback`) wins over
        *priority*, which wins over :attr:`default_priority`.

        Args:
            event_name: Event to register for.
            callback: Callback or sequence of callbacks.  Sequence elements
                are registered one by one, in order, with the same
                *priority* argument.
            priority: Optional priority; any hashable value comparable
                with the event's other priorities.

        Post:
            Each callback appended to the bucket of its resolved priority.

        Raises:
            InvalidEventNameError: If *event_name* is not a non-empty str.
            InvalidCallbackError: If a registered value is not callable.
            PriorityOrderError: If a resolved priority cannot be ordered
                against the event's existing priorities.
        """
        if not isinstance(event_name, str) or not event_name:
            raise InvalidEventNameError(
                f"event name must be a non-empty str, got {event_name!r}"
            )

        if isinstance(callback, (list, tuple)):
            callbacks = list(callback)
        else:
            callbacks = [callback]
        for cb in callbacks:
            if not callable(cb):
                raise InvalidCallbackError(
                    f"callback for {event_name!r} must be callable, "
                    f"got {type(cb).__name__}"
                )

        entries = [
            (resolve_priority(cb, priority, self.default_priority), cb)
            for cb in callbacks
        ]
        self._registry.add_all(event_name, entries)
        for resolved, cb in entries:
            log.debug(
                "Add {} to {!r} at priority {!r}",
                callable_name(cb),
                event_name,
                resolved,
            )

    def add_map(self, mapping: Mapping[str, CallbackOrSequence]) -> None:
        """Register callbacks from a mapping of event name to callback(s).

        No priority is passed through, so each callback runs at its own
        carried priority or the default.

        Example::

            dispatcher.add_map({
                "load": [decode, priority(5)(validate)],
                "save": encode,
            })
        """
        for event_name, callback in mapping.items():
            self.add(event_name, callback)

    async def apply(self, event_name: str, args: Args | None = None) -> Args:
        """Apply the named event to *args*.

        The execution plan is snapshotted when the call starts, so
        callbacks registered afterwards only affect later calls.

        Args:
            event_name: Event to apply.
            args: Initial arguments object; defaults to a new empty dict.

        Returns:
            Value produced by the last callback.  A falsy callback result
            is replaced by an empty dict before being passed on.  With no
            callbacks registered, *args* itself is returned.

        Raises:
            Exception: Whatever the first failing callback raised,
                unchanged.  No later callback runs.
        """
        if args is None:
            args = {}
        layers = self._registry.exec_order(event_name)
        log.debug("Apply {!r} ({} priorities)", event_name, len(layers))

        result = args
        for layer in layers:
            for callback in layer:
                result = await self._invoke(callback, event_name, result)
        return result

    async def _invoke(self, callback: Callback, event_name: str, args: Args) -> Args:
        """Invoke a callback and await its result when it is awaitable."""
        try:
            result = callback(args)
            if inspect.isawaitable(result):
                result = await result
        except Exception:
            log.debug("Callback {} failed on {!r}", callable_name(callback), event_name)
            raise
        return result or {}

    def events(self) -> list[str]:
        """Return event names that have callbacks registered."""
        return self._registry.events()

    def priorities(self, event_name: str) -> list[Any]:
        """Return the ascending priorities registered for *event_name*."""
        return self._registry.priorities(event_name)
