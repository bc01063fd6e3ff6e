"""
emithor.core
------------

Module-level API bound to a private default registry.
"""

from typing import Any, Callable, List, Optional

from .registry import CallbackFunc, Emithor, Event

# -------------------- module-level default registry --------------------

_default_emithor = Emithor()


# Registration
def on(
    event_name: str,
    callback: CallbackFunc,
    ctx: Any = None,
    once: bool = False,
) -> None:
    """
    Register a callback for an event on the default registry.
    Invalid arguments and already registered callbacks are ignored.

    Args:
        event_name (str): The event to register the callback for.
        callback (CallbackFunc): The callback to register.
        ctx (Any, optional): Default context the callback is bound to. Defaults to None.
        once (bool, optional): Whether the callback should be called only once.
                               Defaults to False.
    """
    _default_emithor.on(event_name, callback, ctx, once)


def remove(event_name: str, callback: Optional[CallbackFunc] = None) -> None:
    """
    Remove a callback from an event, or the whole event if `callback` is None.

    Args:
        event_name (str): The event to remove from.
        callback (Optional[CallbackFunc], optional): The callback to remove.
                                                    Defaults to None.
    """
    _default_emithor.remove(event_name, callback)


def clear() -> None:
    """Remove all events from the default registry."""
    _default_emithor.clear()


def get_events() -> List[Event]:
    """
    Return a copy of the list of events on the default registry.

    Returns:
        List[Event]: The registered events, in registration order.
    """
    return _default_emithor.get_events()


# Decorator
def receiver(
    event_name: str,
    ctx: Any = None,
    once: bool = False,
    emithor: Optional[Emithor] = None,
) -> Callable[[CallbackFunc], CallbackFunc]:
    """
    Decorator to register a function as a callback for `event_name`.

    Args:
        event_name (str): The event to register the callback for.
        ctx (Any, optional): Default context for the callback. Defaults to None.
        once (bool, optional): Whether the callback should be called only once. Defaults to False.
        emithor (Emithor, optional): The registry to register on.
                                     Defaults to None. If None, the default registry is used.

    Returns:
        Callable[[CallbackFunc], CallbackFunc]: The decorator function.

    Example:
    @receiver("user.created", once=True)
    def welcome(user):
        print("welcome", user)
    """
    return (emithor or _default_emithor).receiver(event_name, ctx=ctx, once=once)


# Dispatch
def trigger(event_name: str, context: Any = None, *payload: Any, **kwargs: Any) -> bool:
    """
    Call every callback registered for `event_name` on the default registry.
    Exceptions raised by callbacks will propagate.

    Args:
        event_name (str): The event to trigger.
        context (Any, optional): Context overriding each callback's stored one.
        *payload: Positional arguments to pass to the callbacks.
        **kwargs: Keyword arguments to pass to the callbacks.

    Returns:
        bool: False if the event has no callbacks, True otherwise.

    Example:
    trigger("user.created", None, user)
    """
    return _default_emithor.trigger(event_name, context, *payload, **kwargs)


# Aliases
register = subscribe = on
fire = publish = trigger
unsubscribe = remove
get_channels = get_events
