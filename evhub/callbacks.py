"""Callback specifications accepted by :meth:`EventHub.subscribe`.

A callback is either given directly as a callable or named by string, in
which case it is looked up as a method on its owner (the subscriber, or the
hub itself for self-subscriptions). Both forms are resolved to a concrete
callable once, at subscribe time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any
from typing import Union

from evhub.errors import CallbackResolutionError
from evhub.errors import SubscriptionError

if TYPE_CHECKING:
    from collections.abc import Callable


def lookup_method(owner: Any, name: str) -> Callable[..., Any] | None:
    """Return the callable attribute *name* of *owner*, or None."""
    method = getattr(owner, name, None)
    return method if callable(method) else None


def looks_like_callback(value: Any) -> bool:
    return isinstance(value, str) or callable(value)


class MissingMethod:
    """Stands in for a method name that did not resolve.

    Registration succeeds; invoking the placeholder during dispatch raises
    :class:`CallbackResolutionError`.
    """

    __slots__ = ("event", "name", "owner_type")

    def __init__(self, owner: Any, name: str, event: str) -> None:
        self.owner_type = type(owner).__name__
        self.name = name
        self.event = event

    def __call__(self, *_args: Any) -> None:
        msg = f"{self.owner_type} has no method {self.name!r} for event {self.event!r}"
        raise CallbackResolutionError(msg, event=self.event, method_name=self.name)

    def __repr__(self) -> str:
        return f"<MissingMethod {self.owner_type}.{self.name}>"


@dataclass(frozen=True)
class DirectFunction:
    """A callback supplied as a callable."""

    fn: Callable[..., Any]

    def resolve(self, event: str, *, strict: bool = False) -> Callable[..., Any]:
        return self.fn


@dataclass(frozen=True)
class NamedMethod:
    """A callback supplied as the name of a method on *owner*."""

    owner: Any
    name: str

    def resolve(self, event: str, *, strict: bool = False) -> Callable[..., Any]:
        """Look the method up on the owner.

        With *strict* an unknown name raises immediately, otherwise a
        :class:`MissingMethod` placeholder defers the failure to dispatch.
        """
        method = lookup_method(self.owner, self.name)
        if method is not None:
            return method
        if strict:
            msg = f"{type(self.owner).__name__} has no method {self.name!r} for event {event!r}"
            raise CallbackResolutionError(msg, event=event, method_name=self.name)
        return MissingMethod(self.owner, self.name, event)


CallbackSpec = Union[DirectFunction, NamedMethod]


def as_callback_spec(callback: Callable[..., Any] | str, owner: Any, event: str) -> CallbackSpec:
    """Classify *callback* into a :data:`CallbackSpec` owned by *owner*."""
    if isinstance(callback, str):
        return NamedMethod(owner, callback)
    if callable(callback):
        return DirectFunction(callback)
    msg = f"Callback for event {event!r} must be callable or a method name, got {type(callback).__name__}"
    raise SubscriptionError(msg, event=event)
