# Sliding-window helpers for conversation history.
# Date: 2025-06-14
# Version: 0.1.0

from typing import Any, Iterable, List, Sequence, TypeVar

from agent_network.models.common import HistoryEntry

# 10 exchanges of user + assistant
DEFAULT_HISTORY_LIMIT = 20

T = TypeVar("T")


def keep_recent(items: Sequence[T], capacity: int) -> List[T]:
    """Returns the last `capacity` items, oldest first."""
    if capacity <= 0:
        return []
    return list(items[-capacity:])


def append_exchange(
    history: Iterable[HistoryEntry],
    user_message: str,
    assistant_message: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> List[HistoryEntry]:
    """Appends one user/assistant exchange and evicts the oldest entries beyond `limit`."""
    updated = list(history)
    updated.append(HistoryEntry(role="user", content=user_message))
    updated.append(HistoryEntry(role="assistant", content=assistant_message))
    return keep_recent(updated, limit)


def load_history(raw: Any) -> List[HistoryEntry]:
    """Validates history read back from the thread store; anything unusable is skipped."""
    if not isinstance(raw, list):
        return []
    entries = []
    for item in raw:
        if isinstance(item, dict) and item.get("role") in ("user", "assistant") and isinstance(item.get("content"), str):
            entries.append(HistoryEntry(role=item["role"], content=item["content"]))
    return entries
