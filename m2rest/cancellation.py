"""Caller-driven cancellation of in-progress calls.

A cancel event is bound with :func:`cancel_scope` and applies to every call
made from the same thread (or context) while the scope is open::

    stop = threading.Event()
    with cancel_scope(stop):
        MagentoProduct.get_by_sku("ABC", client)

Setting ``stop`` from another thread makes the next check raise
:class:`~m2rest.errors.RequestCancelled` and interrupts any retry backoff.
"""

import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_current_event: ContextVar[threading.Event | None] = ContextVar("m2rest_cancel_event", default=None)


@contextmanager
def cancel_scope(event: threading.Event) -> Iterator[threading.Event]:
    """Bind ``event`` as the cancellation signal for calls in this context."""
    token = _current_event.set(event)
    try:
        yield event
    finally:
        _current_event.reset(token)


def current_cancel_event() -> threading.Event | None:
    return _current_event.get()


def is_cancelled() -> bool:
    event = _current_event.get()
    return event is not None and event.is_set()
