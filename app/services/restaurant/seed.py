"""Seed data loader for the restaurant store."""
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError

from app.services.restaurant.exceptions import SeedDataError
from app.services.restaurant.models import MenuItem, Order, OrderItem

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "seed.yaml"


class SeedData(BaseModel):
    """Initial collections for a store."""

    menu_items: List[MenuItem] = []
    orders: List[Order] = []


def _default_seed() -> Dict[str, Any]:
    created = "2024-01-15T09:00:00+00:00"
    return {
        "menu_items": [
            {
                "id": "1",
                "name": "Garlic Bread",
                "description": "Toasted bread with garlic butter",
                "category": "Appetizer",
                "price": "5.99",
                "ingredients": ["bread", "garlic", "butter"],
                "is_available": True,
                "preparation_time": 10,
                "image_url": "",
                "created_at": created,
                "updated_at": created,
            },
            {
                "id": "2",
                "name": "Margherita Pizza",
                "description": "Tomato, mozzarella and basil",
                "category": "Main Course",
                "price": "12.99",
                "ingredients": ["dough", "tomato", "mozzarella", "basil"],
                "is_available": True,
                "preparation_time": 20,
                "image_url": "",
                "created_at": created,
                "updated_at": created,
            },
            {
                "id": "3",
                "name": "Lemonade",
                "description": "Fresh squeezed",
                "category": "Beverage",
                "price": "3.50",
                "ingredients": ["lemon", "sugar", "water"],
                "is_available": False,
                "preparation_time": 5,
                "image_url": "",
                "created_at": created,
                "updated_at": created,
            },
        ],
        "orders": [
            {
                "id": "1",
                "order_number": "ORD-001",
                "items": [
                    {"menu_item_id": "2", "quantity": 1, "price": "12.99"},
                    {"menu_item_id": "1", "quantity": 1, "price": "5.99"},
                ],
                "total_amount": "18.98",
                "status": "Pending",
                "customer_name": "Alex Morgan",
                "table_number": 4,
                "created_at": "2024-01-15T12:05:00+00:00",
                "updated_at": "2024-01-15T12:05:00+00:00",
            },
        ],
    }


def _as_utc(value: Any) -> Any:
    # PyYAML returns naive datetimes for unquoted timestamps without an offset
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _mapping(raw: Any, label: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise SeedDataError(f"Each {label} must be a mapping, got {type(raw).__name__}")
    return dict(raw)


def _entries(data: Dict[str, Any], key: str) -> List[Any]:
    entries = data.get(key) or []
    if not isinstance(entries, list):
        raise SeedDataError(f"'{key}' must be a list")
    return entries


def _coerce_id(data: Dict[str, Any]) -> None:
    # Unquoted YAML ids load as ints; ids are strings everywhere else
    if data.get("id") is not None:
        data["id"] = str(data["id"])


def _build_menu_item(raw: Any) -> MenuItem:
    data = _mapping(raw, "menu item")
    _coerce_id(data)
    for key in ("created_at", "updated_at"):
        data[key] = _as_utc(data.get(key))
    return MenuItem.model_validate(data)


def _build_order(raw: Any, menu: Dict[str, MenuItem]) -> Order:
    data = _mapping(raw, "order")
    _coerce_id(data)
    items = []
    for line in _entries(data, "items"):
        line = _mapping(line, "order line")
        menu_item_id = str(line.pop("menu_item_id", ""))
        if "menu_item" in line:
            snapshot = _build_menu_item(line.pop("menu_item"))
        elif menu_item_id in menu:
            # Orders keep their own copy; later menu edits must not reach them
            snapshot = menu[menu_item_id].model_copy(deep=True)
        else:
            raise SeedDataError(
                f"Order {data.get('id')!r} references unknown menu item {menu_item_id!r}"
            )
        items.append(OrderItem.model_validate({**line, "menu_item": snapshot}))
    data["items"] = items
    for key in ("created_at", "updated_at"):
        data[key] = _as_utc(data.get(key))
    return Order.model_validate(data)


def parse_seed(data: Dict[str, Any]) -> SeedData:
    """
    Build seed collections from a decoded document.

    Order lines reference menu items by ``menu_item_id`` (or embed a full
    ``menu_item``); each line receives an independent snapshot.

    Raises:
        SeedDataError: if the document is malformed
    """
    if not isinstance(data, dict):
        raise SeedDataError("Seed document must be a mapping")

    try:
        menu_items = [_build_menu_item(raw) for raw in _entries(data, "menu_items")]
        by_id = {item.id: item for item in menu_items}
        orders = [_build_order(raw, by_id) for raw in _entries(data, "orders")]
    except (ValidationError, ValueError, TypeError) as e:
        raise SeedDataError(f"Invalid seed data: {e}") from e

    for label, ids in (
        ("menu item", [item.id for item in menu_items]),
        ("order", [order.id for order in orders]),
    ):
        if len(ids) != len(set(ids)):
            raise SeedDataError(f"Duplicate {label} ids in seed data")

    return SeedData(menu_items=menu_items, orders=orders)


def load_seed(seed_file: Optional[str] = None) -> SeedData:
    """Load seed data from YAML, falling back to a built-in dataset."""
    path = Path(seed_file) if seed_file else DEFAULT_SEED_FILE
    if not path.exists():
        logger.warning(f"[SEED] Seed file not found, using defaults - path: {path}")
        return parse_seed(_default_seed())

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SeedDataError(f"Could not parse seed file {path}: {e}") from e

    seed = parse_seed(data or {})
    logger.info(
        f"[SEED] Loaded seed data - {len(seed.menu_items)} menu items, "
        f"{len(seed.orders)} orders from {path}"
    )
    return seed
