"""Reactive store contract and an in-memory implementation."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any, Protocol

from .session_models import FormState

Selector = Callable[[FormState], Any]
Listener = Callable[[Any], None]


class FormStore(Protocol):
    """Container holding the form state and notifying observers."""

    def read(self) -> FormState: ...

    def write(self, partial: Mapping[str, Any]) -> None: ...

    def subscribe(self, selector: Selector, callback: Listener) -> Callable[[], None]: ...


class InMemoryFormStore:
    """Store notifying a subscriber when its selected value stops comparing equal."""

    def __init__(self, state: FormState) -> None:
        self._state = state
        self._subscriptions: list[tuple[Selector, Listener]] = []

    def read(self) -> FormState:
        return self._state

    def write(self, partial: Mapping[str, Any]) -> None:
        previous = self._state
        self._state = replace(previous, **dict(partial))
        for selector, callback in list(self._subscriptions):
            selected = selector(self._state)
            if selected != selector(previous):
                callback(selected)

    def subscribe(self, selector: Selector, callback: Listener) -> Callable[[], None]:
        subscription = (selector, callback)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe
