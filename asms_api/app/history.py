"""
Chat history storage for the chatbot endpoints
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List

from .models import ChatExchange

logger = logging.getLogger(__name__)


class HistoryStore(ABC):
    """Per-user, append-only chat history"""

    @abstractmethod
    def append(self, user_id: int, exchange: ChatExchange) -> None:
        """Append ``exchange`` to the user's history, creating it if needed"""

    @abstractmethod
    def get(self, user_id: int) -> List[ChatExchange]:
        """Full history in chronological order; empty when the user has none"""

    @abstractmethod
    def clear(self, user_id: int) -> None:
        """Drop the user's history. Clearing an unknown user is a no-op."""

    @abstractmethod
    def next_id(self) -> int:
        """Next exchange id, unique across all users"""


class InMemoryHistoryStore(HistoryStore):
    """
    Process-wide history kept in a dict.

    A single lock guards both the mapping and the id counter, so appends from
    concurrent requests (same or different users) are serialized and ids are
    handed out exactly once. Nothing is evicted; contents live as long as
    the process.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._histories: Dict[int, List[ChatExchange]] = {}
        self._last_id = 0

    def append(self, user_id: int, exchange: ChatExchange) -> None:
        with self._lock:
            self._histories.setdefault(user_id, []).append(exchange)

    def get(self, user_id: int) -> List[ChatExchange]:
        with self._lock:
            return list(self._histories.get(user_id, ()))

    def clear(self, user_id: int) -> None:
        with self._lock:
            removed = self._histories.pop(user_id, None)
        if removed is not None:
            logger.info(f"Cleared {len(removed)} exchanges for user {user_id}")

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id

    def user_count(self) -> int:
        with self._lock:
            return len(self._histories)
