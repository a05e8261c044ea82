"""
Observable sequences.

An ObservableList holds an immutable snapshot of records and a list of
listeners. Replacing the snapshot notifies every listener with the new
snapshot. There is no implicit binding: presentation code subscribes
explicitly and unsubscribes when it goes away.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

Listener = Callable[[tuple[T, ...]], None]


class ObservableList(Generic[T]):
    """
    Publish/subscribe container over a tuple snapshot.

    Notes
    -----
    Listeners run synchronously, in subscription order, on the caller's thread.
    A listener that raises stops the notification and the error propagates to
    the caller of ``replace``.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._listeners: list[Listener[T]] = []

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def replace(self, items: Iterable[T]) -> None:
        """
        Replace the snapshot and notify listeners.

        Parameters
        ----------
        items:
            New contents, in display order.
        """
        self._items = tuple(items)
        for listener in list(self._listeners):
            listener(self._items)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """
        Register a listener for future replacements.

        Returns
        -------
        Callable[[], None]
            Function that removes the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]
