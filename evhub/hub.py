"""Synchronous publish/subscribe mixin.

Inherit from :class:`EventHub` to let instances register listeners for named
events, emit those events and remove listeners again. A subscriber named as
the ``context`` of a subscription keeps a record of it, so everything it
listens to can be removed with a single :meth:`EventHub.detach_all` call
before it is discarded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import cast

from evhub.callbacks import as_callback_spec
from evhub.callbacks import looks_like_callback
from evhub.callbacks import lookup_method
from evhub.config import get_config
from evhub.errors import ListenerError
from evhub.errors import SubscriptionError
from evhub.errors import handle_error
from evhub.records import ListenerEntry
from evhub.records import SubscriptionRecord
from evhub.records import is_event_list
from evhub.records import split_event_names

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Iterable

    from evhub.config import HubConfig

logger = logging.getLogger(__name__)

# Distinguishes ``emit(event)`` from ``emit(event, None)``.
_NO_DATA: Any = object()


def _outgoing_subscriptions(subscriber: Any) -> list[SubscriptionRecord]:
    records = getattr(subscriber, "outgoing_subscriptions", None)
    if records is None:
        records = []
        subscriber.outgoing_subscriptions = records
    return records


def detach_subscriber(subscriber: Any) -> None:
    """Remove every listener *subscriber* registered on other hubs.

    Works for any object that was named as a subscription context, whether
    or not it is an :class:`EventHub` itself. The recorded subscriptions are
    kept, so calling this again is a no-op.
    """
    records = getattr(subscriber, "outgoing_subscriptions", None) or ()
    for record in list(records):
        source = record.source_hub
        if source is None:
            logger.debug("Skipping %r: source hub no longer exists", record.event)
            continue
        source.unsubscribe(record.event, subscriber)


class EventHub:
    """Mixin adding event registration and synchronous dispatch.

    No constructor is needed: ``listeners`` is created on the first
    :meth:`subscribe` and ``outgoing_subscriptions`` the first time the
    object is named as a subscriber. Set ``hub_config`` on a class or
    instance to override the process-wide :class:`~evhub.config.HubConfig`.
    """

    hub_config: HubConfig | None = None

    listeners: dict[str, list[ListenerEntry]]
    outgoing_subscriptions: list[SubscriptionRecord]

    def _active_config(self) -> HubConfig:
        return self.hub_config or get_config()

    def subscribe(
        self,
        event: str | Iterable[str],
        context: Any = None,
        callback: Callable[..., Any] | str | None = None,
    ) -> None:
        """Register a listener for *event*.

        Args:
            event: event name, comma separated names or a list of names
            context: subscriber the listener belongs to; it records the
                subscription so :meth:`detach_all` can remove it. Defaults
                to the hub itself, which is not recorded.
            callback: callable, or name of a method on *context* (or on the
                hub). Defaults to the method named after the event.

        ``subscribe(event, fn)`` and ``subscribe(event, "method")`` treat the
        second argument as the callback.

        Listeners are called with no arguments when :meth:`emit` is given no
        data, so a listener that takes ``data`` should give it a default if
        the event may be emitted bare.
        """
        if is_event_list(event):
            for name in split_event_names(event):
                self.subscribe(name, context, callback)
            return

        event = cast("str", event)

        if callback is None and looks_like_callback(context):
            callback, context = context, None

        if callback is None:
            callback = event

        owner = self if context is None else context
        config = self._active_config()
        resolved = as_callback_spec(callback, owner, event).resolve(
            event, strict=config.strict_callbacks
        )

        records = None
        if context is not None:
            try:
                records = _outgoing_subscriptions(context)
            except AttributeError as e:
                msg = f"{type(context).__name__} cannot record subscriptions"
                raise SubscriptionError(msg, event=event, cause=e) from e

        listeners = getattr(self, "listeners", None)
        if listeners is None:
            listeners = self.listeners = {}
        listeners.setdefault(event, []).append(ListenerEntry(owner, resolved))

        if records is not None:
            records.append(SubscriptionRecord.create(self, event, resolved))

        logger.debug("Subscribed %r to %r on %s", resolved, event, type(self).__name__)

    def emit(self, event: str, data: Any = _NO_DATA) -> None:
        """Call every listener for *event* in registration order.

        Listeners receive *data* as their only argument, or no argument when
        *data* is omitted. Listeners added or removed during dispatch take
        effect on the next emit unless the config selects ``"live"``
        dispatch.
        """
        listeners = getattr(self, "listeners", None)
        entries = listeners.get(event) if listeners else None
        if not entries:
            return

        config = self._active_config()
        args = () if data is _NO_DATA else (data,)

        if config.dispatch_mode == "live":
            index = 0
            while index < len(entries):
                self._dispatch(event, entries[index], args, config)
                index += 1
            return

        for entry in list(entries):
            self._dispatch(event, entry, args, config)

    def _dispatch(
        self,
        event: str,
        entry: ListenerEntry,
        args: tuple[Any, ...],
        config: HubConfig,
    ) -> None:
        if not config.isolate_listener_errors:
            entry.callback(*args)
            return

        try:
            entry.callback(*args)
        except Exception as e:
            error = ListenerError(
                f"Listener {entry.callback!r} for event {event!r} failed",
                event=event,
                cause=e,
            )
            error.__cause__ = e
            handle_error(error, context={"hub": type(self).__name__})

    def unsubscribe(
        self,
        event: str,
        context: Any = None,
        callback: Callable[..., Any] | str | None = None,
    ) -> None:
        """Remove listeners for *event*. Unknown combinations are ignored.

        Without *context* every listener for the event goes. With it, only
        listeners registered for that context, narrowed to *callback* when
        given (a string is looked up as a method on *context*). The
        context's recorded subscriptions are left alone.
        """
        listeners = getattr(self, "listeners", None)
        if not listeners:
            return

        if context is None:
            entries = listeners.pop(event, None)
            if entries:
                # Emptied in place so a live dispatch in progress stops too.
                entries.clear()
                logger.debug("Removed all listeners for %r on %s", event, type(self).__name__)
            return

        entries = listeners.get(event)
        if not entries:
            return

        if isinstance(callback, str):
            callback = lookup_method(context, callback)
            if callback is None:
                return

        kept = [
            entry
            for entry in entries
            if entry.context is not context or (callback is not None and entry.callback != callback)
        ]
        removed = len(entries) - len(kept)
        entries[:] = kept
        if removed:
            logger.debug(
                "Removed %d listener(s) for %r on %s", removed, event, type(self).__name__
            )

    def detach_all(self) -> None:
        """Remove every listener this object registered on other hubs."""
        detach_subscriber(self)

    # Short names
    on = subscribe
    trigger = emit
    off = unsubscribe
    debind = detach_all
