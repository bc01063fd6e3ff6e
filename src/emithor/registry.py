"""
Event registry implementation.
"""

from __future__ import annotations

import logging
import threading
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

CallbackFunc = Callable[..., Any]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Callback:
    """
    A registered callable with its once-flag and default context.
    """

    fn: CallbackFunc
    once: bool = False
    ctx: Any = None

    def call(self, context: Any, *args: Any, **kwargs: Any) -> Any:
        """
        Call the function, bound to `context` (or the stored ctx) when there is one.
        """
        receiver = context if context is not None else self.ctx
        if receiver is None:
            return self.fn(*args, **kwargs)
        return types.MethodType(self.fn, receiver)(*args, **kwargs)


@dataclass(frozen=True)
class Event:
    """
    A named event and its callbacks, in invocation order.
    """

    name: str
    cbs: Tuple[Callback, ...] = field(default_factory=tuple)


class Emithor:
    """
    An isolated event registry. Thread-safe registration and dispatch.

    Event and Callback records are immutable; every mutation publishes a new
    Event record, so readers never see a half-updated event.
    """

    def __init__(self) -> None:
        """
        Initialize a new, empty Emithor instance.
        """
        self._lock = threading.RLock()
        self._events: Dict[str, Event] = {}

    # -------------------- registration API --------------------
    def on(
        self,
        event_name: str,
        callback: CallbackFunc,
        ctx: Any = None,
        once: bool = False,
    ) -> None:
        """
        Register a callback for an event.

        Invalid arguments are ignored without raising. Registering a function
        that is already registered for `event_name` does nothing, even if
        `ctx` or `once` differ.

        Args:
            event_name (str): The event to register the callback for. Must be a non-empty string.
            callback (CallbackFunc): The callback to register.
            ctx (Any, optional): Default context the callback is bound to when triggered.
                                 Defaults to None (callback called unbound).
            once (bool, optional): Whether the callback should be called only once.
                                   Defaults to False.

        Returns:
            None
        """
        if not isinstance(event_name, str) or not event_name or not callable(callback):
            logger.debug(
                "Ignoring registration of %r for event %r", callback, event_name
            )
            return

        new_callback = Callback(fn=callback, once=once, ctx=ctx)

        with self._lock:
            event = self._get_event(event_name)
            if event is None:
                self._add_event(event_name, new_callback)
                return

            if any(cb.fn is callback for cb in event.cbs):
                return
            self._add_callback(event, new_callback)

    register = on
    subscribe = on

    def remove(self, event_name: str, callback: Optional[CallbackFunc] = None) -> None:
        """
        Remove a callback, or the whole event if `callback` is None.

        An event left without callbacks is removed as well. Unknown events and
        unregistered callbacks are ignored.

        Args:
            event_name (str): The event to remove from.
            callback (Optional[CallbackFunc], optional): The callback to remove.
                                                        Defaults to None.

        Returns:
            None
        """
        with self._lock:
            if self._get_event(event_name) is None:
                return
            if callback is None:
                self._delete_event(event_name)
            else:
                self._delete_callback(event_name, callback)

    unsubscribe = remove

    def clear(self) -> None:
        """Remove all events from the registry."""
        with self._lock:
            self._events = {}

    def get_events(self) -> List[Event]:
        """Return a copy of the list of events, in registration order."""
        with self._lock:
            return list(self._events.values())

    get_channels = get_events

    # -------------------- decorator --------------------
    def receiver(self, event_name: str, ctx: Any = None, once: bool = False):
        """
        Decorator to register a function as a callback for `event_name`.

        Args:
            event_name (str): The event to register the callback for.
            ctx (Any, optional): Default context for the callback. Defaults to None.
            once (bool, optional): Whether the callback should be called only once.
                                   Defaults to False.

        Returns:
            Callable[[CallbackFunc], CallbackFunc]: The decorator function.
        """

        def wrapper(func: CallbackFunc) -> CallbackFunc:
            self.on(event_name, func, ctx=ctx, once=once)
            return func

        return wrapper

    # -------------------- dispatch --------------------
    def trigger(
        self, event_name: str, context: Any = None, *payload: Any, **kwargs: Any
    ) -> bool:
        """
        Call every callback registered for `event_name`, in registration order.

        `context`, when not None, replaces each callback's stored ctx as the
        object the callback is bound to. Callbacks added while triggering are
        not called until the next trigger. Exceptions raised by callbacks
        propagate and stop the remaining callbacks from running.

        Args:
            event_name (str): The event to trigger.
            context (Any, optional): Context overriding the stored one. Defaults to None.
            *payload: Positional arguments to pass to the callbacks.
            **kwargs: Keyword arguments to pass to the callbacks.

        Returns:
            bool: False if no such event is registered, True otherwise.
        """
        # the whole pass holds the lock so a once-callback runs in one thread only;
        # it is reentrant, so callbacks may still use this registry
        with self._lock:
            event = self._get_event(event_name)
            if event is None:
                logger.debug("No callbacks registered for event %r", event_name)
                return False

            # snapshot, so callbacks registered during this pass wait for the next one
            for cb in event.cbs:
                try:
                    cb.call(context, *payload, **kwargs)
                finally:
                    if cb.once:
                        self._delete_callback(event_name, cb.fn)

        return True

    fire = trigger
    publish = trigger

    # -------------------- internals (lock held by caller) --------------------
    def _get_event(self, event_name: str) -> Optional[Event]:
        return self._events.get(event_name)

    def _add_event(self, event_name: str, callback: Callback) -> None:
        logger.debug("Adding event %r", event_name)
        self._events[event_name] = Event(name=event_name, cbs=(callback,))

    def _delete_event(self, event_name: str) -> None:
        logger.debug("Deleting event %r", event_name)
        del self._events[event_name]

    def _add_callback(self, event: Event, callback: Callback) -> None:
        self._events[event.name] = Event(name=event.name, cbs=event.cbs + (callback,))

    def _delete_callback(self, event_name: str, callback: CallbackFunc) -> None:
        """
        Remove `callback` from the event, deleting the event if it ends up empty.
        """
        event = self._get_event(event_name)
        # may already be gone if a callback removed it mid-trigger
        if event is None:
            return

        remaining = tuple(cb for cb in event.cbs if cb.fn is not callback)
        if len(remaining) == len(event.cbs):
            return
        if not remaining:
            self._delete_event(event_name)
            return
        self._events[event_name] = Event(name=event_name, cbs=remaining)
