"""
Emithor
-------

Tiny synchronous publish/subscribe registry for Python.

Features:

- `on(event_name, callback, ctx=None, once=False)` registers a callback;
  registering the same function twice on one event is a no-op.
- `trigger(event_name, context=None, *payload)` calls callbacks in registration order
  and returns False when nothing is registered.
- `remove(event_name, callback=None)` drops one callback or the whole event;
  events without callbacks disappear.
- `get_events()` returns a copy of the registered events.
- Aliases: `register`/`subscribe`, `fire`/`publish`, `unsubscribe`, `get_channels`.
- `Emithor` class for isolated registries (tests, plugins, etc.).
- No dependencies.
"""

from .core import (
    clear,
    fire,
    get_channels,
    get_events,
    on,
    publish,
    receiver,
    register,
    remove,
    subscribe,
    trigger,
    unsubscribe,
)
from .registry import Callback, Emithor, Event

__all__ = [
    "on",
    "register",
    "subscribe",
    "trigger",
    "fire",
    "publish",
    "remove",
    "unsubscribe",
    "get_events",
    "get_channels",
    "receiver",
    "clear",
    "Emithor",
    "Event",
    "Callback",
]
