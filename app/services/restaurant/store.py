"""In-memory restaurant state container."""
import asyncio
import logging
import random
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Awaitable, Callable, Iterable, List, Optional, Set

from app.services.restaurant import constants
from app.services.restaurant.enums import OrderStatus
from app.services.restaurant.exceptions import (
    MenuItemNotFoundError,
    OrderNotFoundError,
    SimulatedTransportFailure,
)
from app.services.restaurant.models import (
    DashboardStats,
    MenuItem,
    MenuItemCreate,
    MenuItemUpdate,
    Order,
)
from app.services.restaurant.notifications import (
    LoggingNotificationSink,
    NotificationSink,
)

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a random entity id."""
    return uuid.uuid4().hex


class RestaurantStore:
    """Owns the menu item and order collections.

    Every write replaces the affected collection with a new list in a single
    assignment, and entities are immutable, so a saved list is a complete
    snapshot. The only asynchronous write is the rollback at the end of a
    failed availability toggle.

    Collaborators (clock, random source, delay, id factory, notifier) are
    injected so the confirmation outcome can be fixed in tests.
    """

    def __init__(
        self,
        menu_items: Iterable[MenuItem] = (),
        orders: Iterable[Order] = (),
        *,
        notifier: Optional[NotificationSink] = None,
        clock: Callable[[], datetime] = utcnow,
        rng: Callable[[], float] = random.random,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        id_factory: Callable[[], str] = new_id,
        confirm_delay: float = constants.DEFAULT_CONFIRM_DELAY_SECONDS,
        failure_rate: float = constants.DEFAULT_FAILURE_RATE,
    ):
        self._menu_items: List[MenuItem] = list(menu_items)
        self._orders: List[Order] = list(orders)
        self.notifier = notifier or LoggingNotificationSink()
        self._clock = clock
        self._rng = rng
        self._sleep = sleep
        self._id_factory = id_factory
        self.confirm_delay = confirm_delay
        self.failure_rate = failure_rate
        self._pending: Set["asyncio.Task[bool]"] = set()

    # Reads

    @property
    def menu_items(self) -> List[MenuItem]:
        """Current menu items in insertion order."""
        return list(self._menu_items)

    @property
    def orders(self) -> List[Order]:
        """Current orders in seed order."""
        return list(self._orders)

    def get_menu_item(self, item_id: str) -> MenuItem:
        """Get a menu item by id."""
        return self._menu_items[self._menu_item_index(item_id)]

    def get_order(self, order_id: str) -> Order:
        """Get an order by id."""
        return self._orders[self._order_index(order_id)]

    def compute_stats(self) -> DashboardStats:
        """Derive dashboard statistics from the current collections."""
        return DashboardStats(
            total_orders=len(self._orders),
            pending_orders=sum(
                1 for order in self._orders if order.status == OrderStatus.PENDING
            ),
            total_revenue=sum(
                (
                    order.total_amount
                    for order in self._orders
                    if order.status != OrderStatus.CANCELLED
                ),
                Decimal("0"),
            ),
            menu_items_count=len(self._menu_items),
            available_items=sum(1 for item in self._menu_items if item.is_available),
        )

    # Menu mutations

    def add_menu_item(self, fields: MenuItemCreate) -> MenuItem:
        """Add a new menu item with a fresh id."""
        existing_ids = {item.id for item in self._menu_items}
        item_id = self._id_factory()
        while item_id in existing_ids:
            item_id = self._id_factory()

        now = self._clock()
        item = MenuItem(
            **fields.model_dump(),
            id=item_id,
            created_at=now,
            updated_at=now,
        )
        self._menu_items = [*self._menu_items, item]
        logger.info(f"[STORE] Added menu item - id: {item.id}, name: {item.name}")
        self.notifier.success(constants.MENU_ITEM_ADDED)
        return item

    def update_menu_item(self, item_id: str, fields: MenuItemUpdate) -> MenuItem:
        """Merge the set fields into an existing menu item."""
        index = self._menu_item_index(item_id)
        current = self._menu_items[index]
        changes = fields.changes()
        updated = MenuItem.model_validate(
            {
                **current.model_dump(),
                **changes,
                "updated_at": self._next_timestamp(current.updated_at),
            }
        )
        self._menu_items = self._replaced(self._menu_items, index, updated)
        logger.info(
            f"[STORE] Updated menu item - id: {item_id}, fields: {sorted(changes)}"
        )
        self.notifier.success(constants.MENU_ITEM_UPDATED)
        return updated

    def delete_menu_item(self, item_id: str) -> MenuItem:
        """Remove a menu item. Orders keep their own snapshots of it."""
        index = self._menu_item_index(item_id)
        removed = self._menu_items[index]
        self._menu_items = self._menu_items[:index] + self._menu_items[index + 1:]
        logger.info(f"[STORE] Deleted menu item - id: {item_id}, name: {removed.name}")
        self.notifier.success(constants.MENU_ITEM_DELETED)
        return removed

    def toggle_availability(self, item_id: str) -> "asyncio.Task[bool]":
        """
        Flip an item's availability optimistically and confirm in the background.

        The flip is visible as soon as this returns. The confirmation waits
        ``confirm_delay`` and fails when the draw taken here is at or below
        ``failure_rate``; on failure the whole menu collection is restored to
        the snapshot taken before the flip, discarding any other menu changes
        made in the meantime. Overlapping toggles are not isolated from each
        other.

        Must be called from a running event loop.

        Returns:
            Task resolving to True on commit, False on rollback
        """
        loop = asyncio.get_running_loop()
        index = self._menu_item_index(item_id)

        snapshot = self._menu_items
        current = snapshot[index]
        toggled = current.model_copy(
            update={
                "is_available": not current.is_available,
                "updated_at": self._next_timestamp(current.updated_at),
            }
        )
        self._menu_items = self._replaced(snapshot, index, toggled)
        draw = self._rng()
        logger.info(
            f"[STORE] Optimistic availability toggle - id: {item_id}, "
            f"is_available: {toggled.is_available}"
        )

        task = loop.create_task(self._confirm_toggle(item_id, snapshot, draw))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def wait_for_pending(self) -> None:
        """Wait until every in-flight availability confirmation has resolved."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    # Order mutations

    def update_order_status(self, order_id: str, status: OrderStatus) -> Order:
        """Set an order's status. Every status is reachable from every other."""
        status = OrderStatus(status)
        index = self._order_index(order_id)
        current = self._orders[index]
        updated = current.model_copy(
            update={
                "status": status,
                "updated_at": self._next_timestamp(current.updated_at),
            }
        )
        self._orders = self._replaced(self._orders, index, updated)
        logger.info(
            f"[STORE] Order status changed - id: {order_id}, "
            f"{current.status} -> {status}"
        )
        self.notifier.success(constants.ORDER_STATUS_UPDATED.format(status=status))
        return updated

    # Internals

    async def _confirm_toggle(
        self, item_id: str, snapshot: List[MenuItem], draw: float
    ) -> bool:
        try:
            await self._confirm_remote_write(draw)
        except SimulatedTransportFailure as e:
            logger.warning(
                f"[STORE] Availability confirmation failed, rolling back - "
                f"id: {item_id}, error: {e}"
            )
            self._menu_items = list(snapshot)
            self.notifier.error(constants.AVAILABILITY_REVERTED)
            return False

        logger.info(f"[STORE] Availability confirmed - id: {item_id}")
        self.notifier.success(constants.AVAILABILITY_UPDATED)
        return True

    async def _confirm_remote_write(self, draw: float) -> None:
        """Stand-in for the remote write; fails for draws at or below the failure rate."""
        await self._sleep(self.confirm_delay)
        if draw <= self.failure_rate:
            raise SimulatedTransportFailure("API call failed")

    def _next_timestamp(self, previous: datetime) -> datetime:
        # updated_at must strictly increase even if the clock has not advanced
        now = self._clock()
        if now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    @staticmethod
    def _replaced(collection: list, index: int, entity) -> list:
        return [*collection[:index], entity, *collection[index + 1:]]

    def _menu_item_index(self, item_id: str) -> int:
        for index, item in enumerate(self._menu_items):
            if item.id == item_id:
                return index
        raise MenuItemNotFoundError(item_id)

    def _order_index(self, order_id: str) -> int:
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                return index
        raise OrderNotFoundError(order_id)
