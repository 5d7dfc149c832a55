"""Unit tests for menu API endpoints."""

from tests.helpers import FAILURE_DRAW


class TestMenuAPI:
    """Test menu API endpoints."""

    def test_list_items(self, test_client):
        """Test GET /api/menu/items returns every item."""
        response = test_client.get("/api/menu/items")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data] == ["burger", "wings", "soda"]
        assert data[0]["price"] == 10.0
        assert data[0]["category"] == "Main Course"
        assert data[0]["ingredients"] == ["beef", "cheddar", "bun", "pickles"]

    def test_list_items_filtered(self, test_client):
        """Test search, category and availability query parameters."""
        response = test_client.get("/api/menu/items", params={"search": "hot sauce"})
        assert [item["id"] for item in response.json()] == ["wings"]

        response = test_client.get("/api/menu/items", params={"category": "Beverage"})
        assert [item["id"] for item in response.json()] == ["soda"]

        response = test_client.get(
            "/api/menu/items", params={"availability": "unavailable"}
        )
        assert [item["id"] for item in response.json()] == ["soda"]

    def test_list_items_bad_filter(self, test_client):
        """Test unknown filter values return 422."""
        response = test_client.get("/api/menu/items", params={"availability": "maybe"})
        assert response.status_code == 422

        response = test_client.get("/api/menu/items", params={"category": "Snacks"})
        assert response.status_code == 422

    def test_list_categories(self, test_client):
        """Test GET /api/menu/categories."""
        response = test_client.get("/api/menu/categories")
        assert response.json() == ["Appetizer", "Main Course", "Dessert", "Beverage"]

    def test_get_item(self, test_client):
        """Test GET /api/menu/items/{id}."""
        response = test_client.get("/api/menu/items/wings")
        assert response.status_code == 200
        assert response.json()["name"] == "Buffalo Wings"

    def test_get_missing_item(self, test_client):
        """Test unknown ids return 404."""
        response = test_client.get("/api/menu/items/missing")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

    def test_create_item(self, test_client, store):
        """Test POST /api/menu/items creates a new item."""
        new_item = {
            "name": "Pizza",
            "description": "Stone baked",
            "category": "Main Course",
            "price": 12.99,
            "ingredients": ["dough", "tomato"],
            "is_available": True,
            "preparation_time": 20,
            "image_url": "https://images.example.com/pizza.jpg",
        }

        response = test_client.post("/api/menu/items", json=new_item)

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Pizza"
        assert data["price"] == 12.99
        assert data["created_at"] == data["updated_at"]
        assert data["id"] in [item.id for item in store.menu_items]

    def test_create_item_invalid_data(self, test_client):
        """Test POST with missing or invalid fields returns 422."""
        response = test_client.post("/api/menu/items", json={"name": "Nothing else"})
        assert response.status_code == 422

        response = test_client.post(
            "/api/menu/items",
            json={
                "name": "Free lunch",
                "category": "Main Course",
                "price": -1,
                "preparation_time": 10,
            },
        )
        assert response.status_code == 422

    def test_update_item(self, test_client):
        """Test PATCH merges only the supplied fields."""
        response = test_client.patch(
            "/api/menu/items/burger", json={"price": 11.5, "is_available": False}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 11.5
        assert data["is_available"] is False
        assert data["name"] == "Classic Burger"
        assert data["updated_at"] > data["created_at"]

    def test_update_missing_item(self, test_client):
        """Test PATCH on an unknown id returns 404."""
        response = test_client.patch("/api/menu/items/missing", json={"price": 1})
        assert response.status_code == 404

    def test_delete_item(self, test_client):
        """Test DELETE removes the item but not the orders using it."""
        response = test_client.delete("/api/menu/items/burger")
        assert response.status_code == 200
        assert response.json()["id"] == "burger"

        assert test_client.get("/api/menu/items/burger").status_code == 404
        order = test_client.get("/api/orders/order-1").json()
        assert order["items"][0]["menu_item"]["name"] == "Classic Burger"

    def test_delete_missing_item(self, test_client):
        """Test DELETE on an unknown id returns 404."""
        assert test_client.delete("/api/menu/items/missing").status_code == 404

    def test_toggle_availability(self, test_client):
        """Test the toggle responds with the flipped item right away."""
        response = test_client.post("/api/menu/items/burger/availability/toggle")

        assert response.status_code == 202
        assert response.json()["is_available"] is False
        assert test_client.get("/api/menu/items/burger").json()["is_available"] is False

    def test_toggle_missing_item(self, test_client):
        """Test toggling an unknown id returns 404."""
        response = test_client.post("/api/menu/items/missing/availability/toggle")
        assert response.status_code == 404

    def test_toggle_failure_reverts(self, test_client, store, draw):
        """Test a failed confirmation reverts the item and reports the error."""
        draw.set(FAILURE_DRAW)

        response = test_client.post("/api/menu/items/burger/availability/toggle")
        assert response.status_code == 202
        assert response.json()["is_available"] is False

        test_client.portal.call(store.wait_for_pending)

        assert test_client.get("/api/menu/items/burger").json()["is_available"] is True
        messages = [n["message"] for n in test_client.get("/api/notifications").json()]
        assert "Failed to update. Reverting changes..." in messages
