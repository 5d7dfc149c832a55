"""Notification sinks for store events."""
import logging
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime, timezone
from typing import Deque, List, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Notification(BaseModel):
    """A user-facing notification."""

    level: str  # success or error
    message: str
    created_at: datetime


class NotificationSink(ABC):
    """Abstract base class for notification sinks.

    Sinks are fire-and-forget: the store never inspects a return value.
    """

    @abstractmethod
    def success(self, message: str) -> None:
        """Publish a success notification."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Publish an error notification."""
        pass


class LoggingNotificationSink(NotificationSink):
    """Sink that writes notifications to the application log."""

    def success(self, message: str) -> None:
        logger.info(f"[NOTIFY] success: {message}")

    def error(self, message: str) -> None:
        logger.warning(f"[NOTIFY] error: {message}")


class InMemoryNotificationSink(LoggingNotificationSink):
    """Logging sink that also keeps the most recent notifications for polling."""

    def __init__(self, max_history: int = 50):
        self._history: Deque[Notification] = deque(maxlen=max_history)

    def success(self, message: str) -> None:
        super().success(message)
        self._record("success", message)

    def error(self, message: str) -> None:
        super().error(message)
        self._record("error", message)

    def _record(self, level: str, message: str) -> None:
        self._history.append(
            Notification(
                level=level,
                message=message,
                created_at=datetime.now(timezone.utc),
            )
        )

    def recent(self, limit: Optional[int] = None) -> List[Notification]:
        """Return notifications newest first."""
        items = list(reversed(self._history))
        if limit is not None:
            items = items[:limit]
        return items

    def clear(self) -> None:
        """Drop all recorded notifications."""
        self._history.clear()
