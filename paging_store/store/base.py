"""Synchronous observable stores.

A ``Store`` holds one value and notifies its subscribers, in registration
order, inside the call that changed it. A ``DerivedStore`` recomputes its
value from one or more source stores whenever any of them changes.

Deliveries go through one queue drained by the outermost ``set``, so a
listener that sets a store again only triggers the new round after every
listener has seen the current value.
"""

from typing import Any, Callable, Generic, Sequence, TypeVar

from paging_store.core.exceptions import ensure_callable
from paging_store.models.store import StoreOptions

T = TypeVar("T")

Listener = Callable[[Any], Any]
Unsubscribe = Callable[[], None]

# (store, listener, value) deliveries pending in the current notification round
_pending: list[tuple["Store[Any]", Listener, Any]] = []


def _drain() -> None:
    try:
        i = 0
        while i < len(_pending):
            store, listener, value = _pending[i]
            i += 1
            # skip listeners unsubscribed since the delivery was queued
            if listener in store._listeners:
                listener(value)
    finally:
        _pending.clear()


class Store(Generic[T]):
    def __init__(self, initial: T, options: StoreOptions | None = None) -> None:
        self._value = initial
        self._options = options or StoreOptions()
        self._listeners: list[Listener] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Store ``value``, persist it, then notify subscribers (no-op for the same object)."""
        if value is self._value:
            return
        self._value = value
        if self._options.persist is not None:
            self._options.persist(value)
        draining = not _pending
        _pending.extend((self, listener, value) for listener in self._listeners)
        if draining:
            _drain()

    def update(self, fn: Callable[[T], T]) -> None:
        ensure_callable("fn", fn)
        self.set(fn(self._value))

    def subscribe(self, listener: Callable[[T], Any]) -> Unsubscribe:
        """Call ``listener`` now with the current value and on every change."""
        ensure_callable("listener", listener)
        self._listeners.append(listener)
        active = True

        def unsubscribe() -> None:
            nonlocal active
            if not active:
                return
            active = False
            self._listeners.remove(listener)

        try:
            listener(self._value)
        except Exception:
            unsubscribe()
            raise
        return unsubscribe


class DerivedStore(Generic[T]):
    """Read-only store whose value is ``fn([source.get() for source in sources])``."""

    def __init__(
        self,
        sources: Sequence[Store[Any]],
        fn: Callable[[list[Any]], T],
        options: StoreOptions | None = None,
    ) -> None:
        ensure_callable("fn", fn)
        self._sources = list(sources)
        self._fn = fn
        self._values = [s.get() for s in self._sources]
        self._store: Store[T] = Store(fn(list(self._values)), options)
        for i, source in enumerate(self._sources):
            source.subscribe(self._on_source_change(i))

    def _on_source_change(self, index: int) -> Listener:
        def listener(value: Any) -> None:
            # skip the immediate delivery made on subscribe, and stale values
            # delivered after a nested set already moved the source on
            if value is self._values[index] or value is not self._sources[index].get():
                return
            self._values[index] = value
            self._store.set(self._fn(list(self._values)))

        return listener

    @property
    def subscriber_count(self) -> int:
        return self._store.subscriber_count

    def get(self) -> T:
        return self._store.get()

    def subscribe(self, listener: Callable[[T], Any]) -> Unsubscribe:
        return self._store.subscribe(listener)


def create_store(initial: T, options: StoreOptions | None = None) -> Store[T]:
    return Store(initial, options)


def create_derived_store(
    sources: Sequence[Store[Any]],
    fn: Callable[[list[Any]], T],
    options: StoreOptions | None = None,
) -> DerivedStore[T]:
    return DerivedStore(sources, fn, options)
