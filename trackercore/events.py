"""Deferred callback delivery: registerers queue events, a notifier holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .pool import Pool

Listener = Callable[[Any, Any], bool]

_ANY = object()


class NotifierExhausted(RuntimeError):
    """Raised when the notifier has no blank callback instances left."""


@dataclass(eq=False)
class CallbackInstance:
    """One pending call of a listener with the event data."""

    function: Optional[Listener] = None
    owner: Any = None
    data: Any = None
    registerer: Optional[CallbackRegisterer] = None

    def call(self) -> bool:
        """Invoke the listener; an unfilled instance returns False."""
        if self.registerer is None or self.function is None:
            return False
        return self.function(self.owner, self.data)

    def _reset(self) -> None:
        self.function = None
        self.owner = None
        self.data = None
        self.registerer = None


class ClassIdIssuer:
    """Hands out numbers for class names."""

    def __init__(self) -> None:
        self._counter = 0
        self._names: List[str] = []

    def issue(self, name: str) -> int:
        """Return the list position of a known name, or a new counter value."""
        if name in self._names:
            return self._names.index(name)
        self._counter += 1
        self._names.append(name)
        return self._counter


class EventNotifier:
    """Holds occurred callbacks in a fixed number of reusable instances."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._registerers: List[CallbackRegisterer] = []
        self._occurred: Pool[CallbackInstance] = Pool()
        self._try_again: Pool[CallbackInstance] = Pool()
        self._blank: Pool[CallbackInstance] = Pool()
        self._free_slots = 0
        for _ in range(capacity):
            self._blank.add_to_begin(CallbackInstance())

    def add_registerer(self, registerer: CallbackRegisterer) -> None:
        self._registerers.append(registerer)

    def remove_registerer(self, registerer: CallbackRegisterer) -> None:
        """Forget a registerer and drop every pending callback it queued."""
        for position, known in enumerate(self._registerers):
            if known is registerer:
                del self._registerers[position]
                break

        for instance in list(self._occurred):
            if instance.registerer is not registerer:
                continue
            self._occurred.remove(instance)
            data = instance.data
            instance.data = None
            if not self.data_in_use(data):
                registerer.dispose(data)
            instance._reset()
            self._blank.add_to_begin(instance)

    def add_occurred(self, instance: CallbackInstance) -> None:
        self._occurred.add_to_end(instance)

    def blank_instance(self) -> CallbackInstance:
        """Take an unused instance to fill; raise NotifierExhausted if none."""
        instance = self._blank.extract_first()
        if instance is None:
            raise NotifierExhausted("no blank callback instances left")
        return instance

    def data_in_use(self, data: Any) -> bool:
        return any(instance.data is data for instance in self._occurred)

    def has_callbacks_for(self, target: Any) -> bool:
        return any(instance.owner is target for instance in self._occurred)

    def next_instance(self, target: Any = _ANY) -> Optional[CallbackInstance]:
        """Detach the next pending instance, optionally the next one for target."""
        if target is _ANY:
            instance = self._occurred.extract_first()
        else:
            instance = next(
                (item for item in self._occurred if item.owner is target), None
            )
            if instance is not None:
                self._occurred.remove(instance)
        if instance is not None:
            self._free_slots += 1
        return instance

    def try_again(self, instance: CallbackInstance) -> None:
        """Hold an instance for the next round; dropped if no slot is free."""
        if self._free_slots == 0:
            return
        self._free_slots -= 1
        self._try_again.add_to_begin(instance)

    def new_round(self) -> None:
        """Move the instances held for retry back to the pending queue."""
        while (instance := self._try_again.extract_last()) is not None:
            self._occurred.add_to_begin(instance)

    def return_instance(self, instance: CallbackInstance) -> None:
        """Give back a handled instance, disposing its data if no longer used."""
        registerer = instance.registerer
        data = instance.data
        if registerer is not None and data is not None and not self.data_in_use(data):
            registerer.dispose(data)
        instance._reset()
        if self._free_slots == 0:
            return
        self._free_slots -= 1
        self._blank.add_to_begin(instance)

    def pending(self) -> int:
        """Number of callbacks waiting to be delivered."""
        return len(self._occurred)


class CallbackRegisterer:
    """Keeps listeners for one kind of event and queues their callbacks."""

    def __init__(self, notifier: EventNotifier) -> None:
        self.notifier = notifier
        self._listeners: List[Tuple[Any, Listener]] = []
        notifier.add_registerer(self)

    def register_listener(self, owner: Any, function: Listener) -> None:
        self._listeners.append((owner, function))

    def unregister_listener(self, owner: Any) -> None:
        """Remove the first listener registered for owner."""
        for position, (known, _) in enumerate(self._listeners):
            if known is owner:
                del self._listeners[position]
                return

    def notify(self, data: Any) -> None:
        """Queue one callback per listener carrying the same data."""
        for owner, function in self._listeners:
            instance = self.notifier.blank_instance()
            instance.registerer = self
            instance.function = function
            instance.owner = owner
            instance.data = data
            self.notifier.add_occurred(instance)

    def dispose(self, data: Any) -> None:
        """Release event data that no pending callback refers to any more."""
        close = getattr(data, "close", None)
        if callable(close):
            close()

    def close(self) -> None:
        self.notifier.remove_registerer(self)