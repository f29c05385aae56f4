import logging
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from .config import AdvertizerConfig, InvalidConfigurationError
from .event_queue import Event, EventQueue

logger = logging.getLogger(__name__)


class Advertizer:
    """Advertize every pushed item up to ``max_advertisements`` times.

    Items are handed out in rounds: all items advertized ``k`` times come out,
    in the order they were last pushed, before any item is advertized for the
    ``k + 1``-th time. An item is dropped right after its final advertisement.

    Not thread-safe; share an instance behind a lock held by the caller.
    """

    def __init__(self, max_advertisements: int):
        try:
            config = AdvertizerConfig(max_advertisements=max_advertisements)
        except ValidationError as exc:
            raise InvalidConfigurationError(
                f"max_advertisements must be an integer >= 1, got {max_advertisements!r}"
            ) from exc
        self._init(config)

    @classmethod
    def from_config(cls, config: AdvertizerConfig):
        advertizer = cls.__new__(cls)
        advertizer._init(config)
        return advertizer

    def _init(self, config: AdvertizerConfig):
        self.config = config
        self._events: Dict[int, Event] = {}
        self._queue = EventQueue()
        self._sequence = 0

    @property
    def max_advertisements(self) -> int:
        return self.config.max_advertisements

    def push(self, id: int, value: Any) -> None:
        """Add ``id`` or refresh it, restarting its advertisements from zero."""
        self._sequence += 1

        event = self._events.get(id)
        if event is not None:
            event.value = value
            event.count = 0
            event.sequence = self._sequence
            self._queue.fix(event.index)
            logger.debug("Refreshed event %s (sequence %s)", id, self._sequence)
            return

        event = Event(id=id, value=value, sequence=self._sequence)
        self._events[id] = event
        self._queue.insert(event)
        logger.debug("Added event %s (sequence %s)", id, self._sequence)

    def advertize(self) -> Tuple[Optional[int], Any, bool]:
        event = self._queue.peek()
        if event is None:
            return None, None, False

        if event.count + 1 >= self.max_advertisements:
            self._queue.remove(event.index)
            del self._events[event.id]
            logger.debug(
                "Dropped event %s after %s advertisements", event.id, self.max_advertisements
            )
        else:
            event.count += 1
            self._queue.fix(event.index)

        return event.id, event.value, True

    def peek(self) -> Tuple[Optional[int], Any, bool]:
        """Return the item the next ``advertize`` call would hand out, without counting it."""
        event = self._queue.peek()
        if event is None:
            return None, None, False
        return event.id, event.value, True

    def remove(self, id: int) -> Tuple[Any, bool]:
        event = self._events.pop(id, None)
        if event is None:
            return None, False

        self._queue.remove(event.index)
        logger.debug("Removed event %s", id)
        return event.value, True

    def length(self) -> int:
        return len(self._queue)

    def __len__(self):
        return self.length()

    def __contains__(self, id: int):
        return id in self._events
