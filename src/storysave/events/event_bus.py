import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Event container passed to subscribers.

    Attributes:
        name: Event name, typically from EventType.
        payload: Typed payload object, e.g. SceneLoaded.
    """
    name: str
    payload: Any


Callback = Callable[[Event], None]


class EventBus:
    """A lightweight synchronous publish/subscribe event bus.

    Callbacks for an event name are invoked in registration order. The bus is
    owned by whoever constructs it; there is no module-level instance.
    """

    def __init__(self) -> None:
        self._subs: DefaultDict[str, List[Callback]] = defaultdict(list)

    def subscribe(self, event_name: str, callback: Callback) -> None:
        """Subscribe a callback for a given event name.

        Args:
            event_name: The event name to listen for.
            callback: A function accepting a single Event argument.
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._subs[event_name].append(callback)
        logger.debug("Subscribed %s to '%s'", getattr(callback, "__name__", str(callback)), event_name)

    def unsubscribe(self, event_name: str, callback: Callback) -> None:
        if event_name in self._subs and callback in self._subs[event_name]:
            self._subs[event_name].remove(callback)
            logger.debug("Unsubscribed %s from '%s'", getattr(callback, "__name__", str(callback)), event_name)

    def subscriber_count(self, event_name: str) -> int:
        return len(self._subs.get(event_name, []))

    def publish(self, event_name: str, payload: Any = None) -> None:
        """Publish an event to all registered subscribers.

        A failing subscriber is logged and does not prevent delivery to the
        remaining subscribers.
        """
        event = Event(name=event_name, payload=payload)
        subs = list(self._subs.get(event_name, []))
        logger.debug("Publishing event '%s' to %d subscribers with payload: %s", event_name, len(subs), payload)
        for cb in subs:
            try:
                cb(event)
            except Exception:
                logger.exception("Unhandled exception in event subscriber for '%s'", event_name)
