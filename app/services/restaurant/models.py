"""Restaurant entity models."""
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.services.restaurant.enums import MenuCategory, OrderStatus


class MenuItemCreate(BaseModel):
    """Fields supplied when adding a menu item."""

    name: str
    description: str = ""
    category: MenuCategory
    price: Decimal = Field(ge=0)
    ingredients: Tuple[str, ...] = ()
    is_available: bool = True
    preparation_time: int = Field(gt=0)  # minutes
    image_url: str = ""


class MenuItemUpdate(BaseModel):
    """Partial menu item changes. Only fields set by the caller are merged."""

    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[MenuCategory] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    ingredients: Optional[Tuple[str, ...]] = None
    is_available: Optional[bool] = None
    preparation_time: Optional[int] = Field(default=None, gt=0)
    image_url: Optional[str] = None

    def changes(self) -> dict:
        """Return the explicitly set, non-null fields."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MenuItem(MenuItemCreate):
    """Menu catalog entry. Instances are immutable; mutations build a new copy."""

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def _check_timestamps(self) -> "MenuItem":
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class OrderItem(BaseModel):
    """Order line holding a snapshot of the menu item as ordered."""

    model_config = ConfigDict(frozen=True)

    menu_item: MenuItem
    quantity: int = Field(gt=0)
    price: Decimal  # line total


class Order(BaseModel):
    """Customer order. Only the status changes after creation."""

    model_config = ConfigDict(frozen=True)

    id: str
    order_number: str
    items: Tuple[OrderItem, ...] = ()
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    customer_name: str
    table_number: int = Field(gt=0)
    created_at: datetime
    updated_at: datetime


class DashboardStats(BaseModel):
    """Aggregates derived from the current collections."""

    total_orders: int
    pending_orders: int
    total_revenue: Decimal
    menu_items_count: int
    available_items: int
