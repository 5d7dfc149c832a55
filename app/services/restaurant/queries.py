"""Read-side helpers for filtering and paging store collections."""
import math
from typing import Dict, Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel

from app.services.restaurant.enums import MenuCategory, OrderStatus
from app.services.restaurant.models import MenuItem, Order

T = TypeVar("T")

AVAILABILITY_FILTERS = ("all", "available", "unavailable")


class Page(BaseModel, Generic[T]):
    """One page of a filtered listing."""

    items: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int


def filter_menu_items(
    items: Sequence[MenuItem],
    search: Optional[str] = None,
    category: Optional[MenuCategory] = None,
    availability: str = "all",
) -> List[MenuItem]:
    """
    Filter menu items the way the menu management screen does.

    Args:
        items: Menu items to filter
        search: Case-insensitive text matched against the name or any ingredient
        category: Only keep items in this category
        availability: "all", "available" or "unavailable"

    Returns:
        Matching items in their original order
    """
    if availability not in AVAILABILITY_FILTERS:
        raise ValueError(f"Unknown availability filter: {availability}")

    search_lower = (search or "").lower().strip()
    results = []
    for item in items:
        if search_lower and not (
            search_lower in item.name.lower()
            or any(search_lower in ingredient.lower() for ingredient in item.ingredients)
        ):
            continue
        if category is not None and item.category != category:
            continue
        if availability == "available" and not item.is_available:
            continue
        if availability == "unavailable" and item.is_available:
            continue
        results.append(item)
    return results


def filter_orders(
    orders: Sequence[Order], status: Optional[OrderStatus] = None
) -> List[Order]:
    """Keep orders with the given status, or all of them when status is None."""
    if status is None:
        return list(orders)
    return [order for order in orders if order.status == status]


def paginate(items: Sequence[T], page: int = 1, page_size: int = 5) -> Page[T]:
    """Slice out a 1-based page."""
    if page < 1:
        raise ValueError("page must be at least 1")
    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total=len(items),
        page=page,
        page_size=page_size,
        total_pages=math.ceil(len(items) / page_size),
    )


def count_by_status(orders: Sequence[Order]) -> Dict[OrderStatus, int]:
    """Count orders per status, including statuses with no orders."""
    counts = {status: 0 for status in OrderStatus}
    for order in orders:
        counts[order.status] += 1
    return counts


def recent_orders(orders: Sequence[Order], limit: int = 5) -> List[Order]:
    """Newest orders first."""
    return sorted(orders, key=lambda order: order.created_at, reverse=True)[:limit]


def available_items(items: Sequence[MenuItem], limit: int = 5) -> List[MenuItem]:
    """First available menu items in catalog order."""
    return [item for item in items if item.is_available][:limit]
