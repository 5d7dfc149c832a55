"""FastAPI dependencies."""
import logging
from typing import Optional

from fastapi import Depends, HTTPException

from app.core.config import settings
from app.services.restaurant.notifications import InMemoryNotificationSink
from app.services.restaurant.seed import load_seed
from app.services.restaurant.store import RestaurantStore

logger = logging.getLogger(__name__)

# Process-wide store, built once at startup
_store: Optional[RestaurantStore] = None


def build_store(seed_file: Optional[str] = None) -> RestaurantStore:
    """Build a store from seed data using the configured confirmation settings."""
    seed = load_seed(seed_file or settings.seed_file)
    return RestaurantStore(
        seed.menu_items,
        seed.orders,
        notifier=InMemoryNotificationSink(max_history=settings.notification_history),
        confirm_delay=settings.confirm_delay_seconds,
        failure_rate=settings.confirm_failure_rate,
    )


def init_store(seed_file: Optional[str] = None) -> RestaurantStore:
    """Create the process-wide store, replacing any previous one."""
    global _store
    _store = build_store(seed_file)
    logger.info(
        f"[STORE] Initialized - {len(_store.menu_items)} menu items, "
        f"{len(_store.orders)} orders"
    )
    return _store


def get_restaurant_store() -> RestaurantStore:
    """Get the restaurant store instance."""
    if _store is None:
        return init_store()
    return _store


def get_notification_sink(
    store: RestaurantStore = Depends(get_restaurant_store),
) -> InMemoryNotificationSink:
    """Get the notification sink of the restaurant store."""
    if not isinstance(store.notifier, InMemoryNotificationSink):
        raise HTTPException(
            status_code=404, detail="Notification history is not enabled"
        )
    return store.notifier
