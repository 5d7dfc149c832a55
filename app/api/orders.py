"""Order tracking API endpoints."""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from app.api.menu import MenuItemResponse, to_menu_item_response
from app.core.config import settings
from app.core.dependencies import get_restaurant_store
from app.services.restaurant.enums import OrderStatus
from app.services.restaurant.models import Order
from app.services.restaurant.queries import count_by_status, filter_orders, paginate
from app.services.restaurant.store import RestaurantStore


router = APIRouter()
logger = logging.getLogger(__name__)


class OrderItemResponse(BaseModel):
    """Order item response model."""
    menu_item: MenuItemResponse
    quantity: int
    price: float

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    """Order response model."""
    id: str
    order_number: str
    items: List[OrderItemResponse] = []
    total_amount: float
    status: OrderStatus
    customer_name: str
    table_number: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class OrderPageResponse(BaseModel):
    """Paginated order listing."""
    items: List[OrderResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class OrderStatusUpdate(BaseModel):
    """Order status change request."""
    status: OrderStatus


def to_order_response(order: Order) -> OrderResponse:
    """Convert a store order to its response model."""
    return OrderResponse(
        id=order.id,
        order_number=order.order_number,
        items=[
            OrderItemResponse(
                menu_item=to_menu_item_response(line.menu_item),
                quantity=line.quantity,
                price=float(line.price),
            )
            for line in order.items
        ],
        total_amount=float(order.total_amount),
        status=order.status,
        customer_name=order.customer_name,
        table_number=order.table_number,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


@router.get("/api/orders", response_model=OrderPageResponse)
async def list_orders(
    request: Request,
    status: Optional[OrderStatus] = None,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """List orders filtered by status, one page at a time."""
    page_size = page_size or settings.orders_page_size
    logger.info(
        f"[ORDERS] List request - status: {status}, page: {page}, "
        f"page_size: {page_size}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    result = paginate(filter_orders(store.orders, status), page, page_size)
    logger.debug(
        f"[ORDERS] Returning {len(result.items)} of {result.total} orders "
        f"(page {result.page}/{result.total_pages})"
    )
    return OrderPageResponse(
        items=[to_order_response(order) for order in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/api/orders/status-counts", response_model=Dict[OrderStatus, int])
async def get_status_counts(
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Count orders per status."""
    return count_by_status(store.orders)


@router.get("/api/orders/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Get a single order with its line items."""
    return to_order_response(store.get_order(order_id))


@router.patch("/api/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    update: OrderStatusUpdate,
    request: Request,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Change an order's status. Any status can follow any other."""
    logger.info(
        f"[ORDERS] Status update - id: {order_id}, status: {update.status}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    return to_order_response(store.update_order_status(order_id, update.status))
