"""Dashboard API endpoint."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.menu import MenuItemResponse, to_menu_item_response
from app.api.orders import OrderResponse, to_order_response
from app.core.dependencies import get_restaurant_store
from app.services.restaurant import constants
from app.services.restaurant.queries import available_items, recent_orders
from app.services.restaurant.store import RestaurantStore


router = APIRouter()
logger = logging.getLogger(__name__)


class StatsResponse(BaseModel):
    """Dashboard statistics."""
    total_orders: int
    pending_orders: int
    total_revenue: float
    menu_items_count: int
    available_items: int


class DashboardResponse(BaseModel):
    """Dashboard overview."""
    stats: StatsResponse
    recent_orders: List[OrderResponse]
    available_items: List[MenuItemResponse]


@router.get("/api/stats", response_model=StatsResponse)
async def get_stats(store: RestaurantStore = Depends(get_restaurant_store)):
    """Get the current dashboard statistics."""
    stats = store.compute_stats()
    return StatsResponse(
        total_orders=stats.total_orders,
        pending_orders=stats.pending_orders,
        total_revenue=float(stats.total_revenue),
        menu_items_count=stats.menu_items_count,
        available_items=stats.available_items,
    )


@router.get("/api/dashboard", response_model=DashboardResponse)
async def get_dashboard(store: RestaurantStore = Depends(get_restaurant_store)):
    """Get stats together with the latest orders and available items."""
    logger.debug("[DASHBOARD] Building dashboard overview")
    return DashboardResponse(
        stats=await get_stats(store),
        recent_orders=[
            to_order_response(order)
            for order in recent_orders(store.orders, constants.DASHBOARD_RECENT_ORDERS)
        ],
        available_items=[
            to_menu_item_response(item)
            for item in available_items(store.menu_items, constants.DASHBOARD_AVAILABLE_ITEMS)
        ],
    )
