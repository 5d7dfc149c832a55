"""Restaurant store errors."""


class RestaurantError(Exception):
    """Base class for restaurant store errors."""


class NotFoundError(RestaurantError):
    """Mutation or lookup target is not in its collection."""

    entity = "Entity"

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} '{entity_id}' not found")


class MenuItemNotFoundError(NotFoundError):
    """No menu item with the given id."""

    entity = "Menu item"


class OrderNotFoundError(NotFoundError):
    """No order with the given id."""

    entity = "Order"


class SimulatedTransportFailure(RestaurantError):
    """The availability confirmation call failed."""


class SeedDataError(RestaurantError):
    """Seed file could not be parsed into menu items and orders."""
