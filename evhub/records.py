"""Bookkeeping types stored by event hubs and their subscribers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any
from typing import NamedTuple
import weakref

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Iterable

    from evhub.hub import EventHub


class ListenerEntry(NamedTuple):
    """A registered listener: the object it was registered for and its callable."""

    context: Any
    callback: Callable[..., Any]


@dataclass(frozen=True)
class SubscriptionRecord:
    """Where a subscriber registered a listener, kept for bulk removal.

    The source hub is held weakly so a subscriber never keeps a hub alive.
    """

    source_ref: weakref.ReferenceType[EventHub]
    event: str
    callback: Callable[..., Any]

    @classmethod
    def create(cls, source: EventHub, event: str, callback: Callable[..., Any]) -> SubscriptionRecord:
        return cls(weakref.ref(source), event, callback)

    @property
    def source_hub(self) -> EventHub | None:
        """The hub the listener lives on, or ``None`` once it was collected."""
        return self.source_ref()


def is_event_list(event: str | Iterable[str]) -> bool:
    """Return True when *event* names more than one event."""
    return not isinstance(event, str) or "," in event


def split_event_names(event: str | Iterable[str]) -> list[str]:
    """Split a comma-delimited string or iterable into individual event names.

    Surrounding whitespace is stripped and empty names are dropped.
    """
    names = event.split(",") if isinstance(event, str) else list(event)
    return [name.strip() for name in names if name and name.strip()]
