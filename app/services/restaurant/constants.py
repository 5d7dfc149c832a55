"""Notification messages and defaults for the restaurant store."""

# Success notifications
MENU_ITEM_ADDED = "Menu item added successfully!"
MENU_ITEM_UPDATED = "Menu item updated successfully!"
MENU_ITEM_DELETED = "Menu item deleted successfully!"
AVAILABILITY_UPDATED = "Availability updated!"
ORDER_STATUS_UPDATED = "Order status updated to {status}!"

# Error notifications
AVAILABILITY_REVERTED = "Failed to update. Reverting changes..."

# Availability confirmation
DEFAULT_CONFIRM_DELAY_SECONDS = 0.5
DEFAULT_FAILURE_RATE = 0.1

# Dashboard listings
DASHBOARD_RECENT_ORDERS = 5
DASHBOARD_AVAILABLE_ITEMS = 5
