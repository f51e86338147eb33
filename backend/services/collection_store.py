"""Write-through store for an ordered, id-keyed record collection.

One instance per storage key (conversations, documents). The in-memory list
is the single source of truth and is replaced, never edited, on each
mutation. Every mutation:

1. Builds the new list from the *current* state (never from a snapshot taken
   before an ``await``)
2. Serializes the whole list back to storage
3. Swaps it in and notifies subscribers

Mutations contain no ``await``, so coroutines interleaving around a slow
completion request cannot drop each other's writes.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, Protocol, TypeVar

from errors import RecordNotFoundError, ValidationError
from storage import CollectionCodec, KeyValueStorage, StorageParseError

logger = logging.getLogger(__name__)


class Identified(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Identified)

Listener = Callable[[list[T]], None]
DeselectListener = Callable[[str], None]
ConfirmGate = Callable[[str], bool]


class CollectionStore(Generic[T]):
    """Ordered collection persisted in full after every mutation.

    New records are prepended (newest first). Selection is an in-memory
    pointer only and is never persisted.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        codec: CollectionCodec,
    ) -> None:
        self.storage = storage
        self.key = key
        self.codec = codec
        self._items: list[T] = []
        self._selected_id: str | None = None
        self._listeners: list[Listener] = []
        self._deselect_listeners: list[DeselectListener] = []
        self.load_all()

    # --- Reads ---

    @property
    def items(self) -> list[T]:
        """Snapshot of the collection, newest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, record_id: str) -> T | None:
        for item in self._items:
            if item.id == record_id:
                return item
        return None

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected(self) -> T | None:
        """The selected record, or None if nothing (or a missing id) is selected."""
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    # --- Lifecycle ---

    def load_all(self) -> list[T]:
        """Replace the in-memory collection with the persisted one.

        A missing entry yields an empty collection. A corrupt entry is logged,
        removed from storage and also yields an empty collection.
        """
        raw = self.storage.get_item(self.key)
        items: list[T] = []
        if raw is not None:
            try:
                items = self.codec.decode(raw)
            except StorageParseError as e:
                logger.warning("Discarding corrupt '%s' entry: %s", self.key, e)
                self.storage.remove_item(self.key)

        self._items = self._dedupe(items)
        logger.info("Loaded %d records from '%s'", len(self._items), self.key)
        self._notify()
        return self.items

    # --- Mutations ---

    def insert(self, item: T) -> T:
        """Prepend a record and persist.

        Raises:
            ValidationError: If a record with the same id already exists.
        """
        if self.get(item.id) is not None:
            raise ValidationError(f"Record '{item.id}' already exists in '{self.key}'")
        self._commit([item, *self._items])
        return item

    def update(self, record_id: str, transform: Callable[[T], T]) -> T:
        """Replace one record with ``transform(record)`` and persist.

        The transform receives the latest stored version of the record. Order
        and all other records are unchanged.

        Raises:
            RecordNotFoundError: If no record has this id.
            ValidationError: If the transform changes the record id.
        """
        for index, item in enumerate(self._items):
            if item.id != record_id:
                continue
            updated = transform(item)
            if updated.id != record_id:
                raise ValidationError("Record id cannot change on update")
            items = list(self._items)
            items[index] = updated
            self._commit(items)
            return updated

        raise RecordNotFoundError(f"No record '{record_id}' in '{self.key}'")

    def remove(self, record_id: str, confirm: ConfirmGate) -> bool:
        """Delete a record once ``confirm`` approves it.

        Returns:
            True if the record was removed, False if confirmation was declined.

        Raises:
            RecordNotFoundError: If no record has this id.
        """
        if self.get(record_id) is None:
            raise RecordNotFoundError(f"No record '{record_id}' in '{self.key}'")

        if not confirm(record_id):
            logger.info("Removal of '%s' from '%s' declined", record_id, self.key)
            return False

        self._commit([item for item in self._items if item.id != record_id])

        if self._selected_id == record_id:
            self._selected_id = None
            for listener in list(self._deselect_listeners):
                listener(record_id)

        return True

    def select(self, record_id: str | None) -> T | None:
        """Point the selection at an id (or clear it with None).

        Unknown ids are accepted; ``selected`` then reports nothing selected.
        """
        self._selected_id = record_id
        return self.selected

    # --- Observation ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with a snapshot after each change.

        Returns:
            A callable that unregisters the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def subscription(self, listener: Listener) -> Iterator["CollectionStore[T]"]:
        """Scope a listener to a ``with`` block."""
        unsubscribe = self.subscribe(listener)
        try:
            yield self
        finally:
            unsubscribe()

    def on_deselect(self, listener: DeselectListener) -> Callable[[], None]:
        """Register a listener called with the id of a removed selected record."""
        self._deselect_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._deselect_listeners:
                self._deselect_listeners.remove(listener)

        return unsubscribe

    # --- Internals ---

    def _commit(self, items: list[T]) -> None:
        # Persist first so a failed write leaves memory and storage equal.
        self.storage.set_item(self.key, self.codec.encode(items))
        self._items = items
        self._notify()

    def _notify(self) -> None:
        snapshot = self.items
        for listener in list(self._listeners):
            listener(snapshot)

    def _dedupe(self, items: list[T]) -> list[T]:
        seen: set[str] = set()
        unique: list[T] = []
        for item in items:
            if item.id in seen:
                logger.warning("Dropping duplicate id '%s' in '%s'", item.id, self.key)
                continue
            seen.add(item.id)
            unique.append(item)
        return unique
