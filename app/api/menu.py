"""Menu API endpoints."""
import logging
from datetime import datetime
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from app.core.dependencies import get_restaurant_store
from app.services.restaurant.enums import MenuCategory
from app.services.restaurant.models import MenuItem, MenuItemCreate, MenuItemUpdate
from app.services.restaurant.queries import filter_menu_items
from app.services.restaurant.store import RestaurantStore


router = APIRouter()
logger = logging.getLogger(__name__)


class MenuItemResponse(BaseModel):
    """Menu item response model."""
    id: str
    name: str
    description: str
    category: MenuCategory
    price: float
    ingredients: List[str] = []
    is_available: bool
    preparation_time: int
    image_url: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


def to_menu_item_response(item: MenuItem) -> MenuItemResponse:
    """Convert a store menu item to its response model."""
    return MenuItemResponse(
        id=item.id,
        name=item.name,
        description=item.description,
        category=item.category,
        price=float(item.price),
        ingredients=list(item.ingredients),
        is_available=item.is_available,
        preparation_time=item.preparation_time,
        image_url=item.image_url,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


def _client(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.get("/api/menu/categories", response_model=List[MenuCategory])
async def list_categories():
    """List the menu categories."""
    return list(MenuCategory)


@router.get("/api/menu/items", response_model=List[MenuItemResponse])
async def list_menu_items(
    request: Request,
    search: Optional[str] = None,
    category: Optional[MenuCategory] = None,
    availability: Literal["all", "available", "unavailable"] = "all",
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """List menu items, optionally filtered by text, category and availability."""
    logger.info(
        f"[MENU] List request - search: {search!r}, category: {category}, "
        f"availability: {availability}, Client: {_client(request)}"
    )
    items = filter_menu_items(store.menu_items, search, category, availability)
    logger.debug(f"[MENU] {len(items)} of {len(store.menu_items)} items match")
    return [to_menu_item_response(item) for item in items]


@router.get("/api/menu/items/{item_id}", response_model=MenuItemResponse)
async def get_menu_item(
    item_id: str,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Get a single menu item."""
    return to_menu_item_response(store.get_menu_item(item_id))


@router.post("/api/menu/items", response_model=MenuItemResponse, status_code=201)
async def create_menu_item(
    item: MenuItemCreate,
    request: Request,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Add a menu item."""
    logger.info(f"[MENU] Create request - name: {item.name}, Client: {_client(request)}")
    created = store.add_menu_item(item)
    return to_menu_item_response(created)


@router.patch("/api/menu/items/{item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    item_id: str,
    changes: MenuItemUpdate,
    request: Request,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Update some fields of a menu item."""
    logger.info(f"[MENU] Update request - id: {item_id}, Client: {_client(request)}")
    updated = store.update_menu_item(item_id, changes)
    return to_menu_item_response(updated)


@router.delete("/api/menu/items/{item_id}", response_model=MenuItemResponse)
async def delete_menu_item(
    item_id: str,
    request: Request,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """Delete a menu item. Existing orders are not affected."""
    logger.info(f"[MENU] Delete request - id: {item_id}, Client: {_client(request)}")
    removed = store.delete_menu_item(item_id)
    return to_menu_item_response(removed)


@router.post(
    "/api/menu/items/{item_id}/availability/toggle",
    response_model=MenuItemResponse,
    status_code=202,
)
async def toggle_menu_item_availability(
    item_id: str,
    request: Request,
    store: RestaurantStore = Depends(get_restaurant_store),
):
    """
    Flip availability optimistically.

    Responds with the flipped item right away. Confirmation finishes in the
    background and may revert the change; clients learn the outcome from
    /api/notifications or by re-reading the item.
    """
    logger.info(f"[MENU] Toggle availability - id: {item_id}, Client: {_client(request)}")
    store.toggle_availability(item_id)
    return to_menu_item_response(store.get_menu_item(item_id))
