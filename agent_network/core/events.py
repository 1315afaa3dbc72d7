# Append-only event log for routing loop invocations.
# Date: 2025-06-14
# Version: 0.1.0

from typing import Any, Iterator, List, Optional

from agent_network.models.common import NetworkEvent, NetworkEventType


def create_event(event_type: NetworkEventType, payload: Optional[Any] = None) -> NetworkEvent:
    return NetworkEvent(type=event_type, payload=payload)


class EventLog:
    """
    Collects the NetworkEvents of one invocation in emission order.
    Events can only be appended; readers get a copy of the list.
    """
    def __init__(self):
        self._events: List[NetworkEvent] = []

    def emit(self, event_type: NetworkEventType, payload: Optional[Any] = None) -> NetworkEvent:
        event = create_event(event_type, payload)
        self._events.append(event)
        return event

    @property
    def events(self) -> List[NetworkEvent]:
        return list(self._events)

    def types(self) -> List[str]:
        return [event.type for event in self._events]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[NetworkEvent]:
        return iter(list(self._events))
