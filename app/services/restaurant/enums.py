"""Menu category and order status enumerations."""
from enum import Enum


class MenuCategory(str, Enum):
    """Sections of the menu."""

    APPETIZER = "Appetizer"
    MAIN_COURSE = "Main Course"
    DESSERT = "Dessert"
    BEVERAGE = "Beverage"

    def __str__(self) -> str:
        """Return the display value of the category."""
        return self.value


class OrderStatus(str, Enum):
    """Order lifecycle states. Any status may follow any other."""

    PENDING = "Pending"
    PREPARING = "Preparing"
    READY = "Ready"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    def __str__(self) -> str:
        """Return the display value of the status."""
        return self.value
