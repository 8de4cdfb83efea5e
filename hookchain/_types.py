"""Shared type definitions for hookchain.

All type aliases use PEP 695 ``type`` statement syntax.
"""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

type Args = dict[str, Any]
"""Arguments object threaded through a chain of callbacks."""

type CallbackResult = Args | Awaitable[Args | None] | None
"""A callback may answer directly or with an awaitable.

Falsy answers (including ``None``) are replaced by an empty dict.
"""

type Callback = Callable[[Args], CallbackResult]
"""A unit of user logic transforming the arguments object."""

type CallbackOrSequence = Callback | Sequence[Callback]
"""Accepted by ``Dispatcher.add`` and as values of ``Dispatcher.add_map``."""
