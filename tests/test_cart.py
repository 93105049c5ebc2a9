"""
Component tests for the session-gated cart: add, list, delete.
"""
from fastapi.testclient import TestClient

from tests.helpers import BOB, register_and_login, seed_products


class TestAddItem:

    def test_add_requires_session(self, test_client: TestClient):
        seed_products(test_client)

        response = test_client.post("/cartpost", json={"productId": 7, "quantity": 2})

        assert response.status_code == 401
        assert response.json() == {"error": "Not logged in"}

    def test_add_creates_enriched_item(self, test_client: TestClient):
        # Arrange
        seed_products(test_client)
        user_id = register_and_login(test_client)

        # Act
        response = test_client.post("/cartpost", json={"productId": 7, "quantity": 2})

        # Assert
        assert response.status_code == 200
        item = response.json()
        assert item["productId"] == 7
        assert item["quantity"] == 2
        assert item["userId"] == user_id
        assert item["product"]["name"] == "Galaxy A15"
        assert item["product"]["price"] == 179.99

        # dokladnie jedna pozycja w koszyku
        cart = test_client.get("/cart").json()
        assert len(cart) == 1
        assert cart[0]["id"] == item["id"]

    def test_add_accepts_snake_case_body(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)

        response = test_client.post("/cartpost", json={"product_id": 8, "quantity": 1})

        assert response.status_code == 200
        assert response.json()["productId"] == 8

    def test_unknown_product_is_rejected(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)

        response = test_client.post("/cartpost", json={"productId": 999, "quantity": 1})

        assert response.status_code == 400
        assert response.json() == {"error": "Product 999 does not exist"}
        assert test_client.get("/cart").json() == []

    def test_non_positive_quantity_is_rejected(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)

        for quantity in (0, -3):
            response = test_client.post("/cartpost", json={"productId": 7, "quantity": quantity})
            assert response.status_code == 400
            assert "quantity" in response.json()["error"]

        assert test_client.get("/cart").json() == []

    def test_malformed_product_id_is_rejected(self, test_client: TestClient):
        register_and_login(test_client)

        response = test_client.post("/cartpost", json={"productId": "abc", "quantity": 1})

        assert response.status_code == 400
        assert response.json()["error"].startswith("productId")

    def test_boolean_fields_are_rejected(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)

        as_quantity = test_client.post("/cartpost", json={"productId": 7, "quantity": True})
        as_product = test_client.post("/cartpost", json={"productId": True, "quantity": 1})

        assert as_quantity.status_code == 400
        assert as_quantity.json()["error"].startswith("quantity")
        assert as_product.status_code == 400
        assert as_product.json()["error"].startswith("productId")
        assert test_client.get("/cart").json() == []

    def test_adding_same_product_twice_creates_two_lines(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)

        test_client.post("/cartpost", json={"productId": 7, "quantity": 1})
        test_client.post("/cartpost", json={"productId": 7, "quantity": 3})

        cart = test_client.get("/cart").json()
        assert [i["quantity"] for i in cart] == [1, 3]


class TestListCart:

    def test_list_requires_session(self, test_client: TestClient):
        assert test_client.get("/cart").status_code == 401

    def test_empty_cart(self, test_client: TestClient):
        register_and_login(test_client)

        response = test_client.get("/cart")

        assert response.status_code == 200
        assert response.json() == []

    def test_items_in_insertion_order(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)

        for product_id in (9, 7, 8):
            test_client.post("/cartpost", json={"productId": product_id, "quantity": 1})

        cart = test_client.get("/cart").json()
        assert [i["productId"] for i in cart] == [9, 7, 8]
        assert all("product" in i for i in cart)

    def test_only_own_items_are_listed(self, test_client: TestClient, other_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)
        register_and_login(other_client, BOB)

        test_client.post("/cartpost", json={"productId": 7, "quantity": 1})
        other_client.post("/cartpost", json={"productId": 8, "quantity": 5})

        assert [i["productId"] for i in test_client.get("/cart").json()] == [7]
        assert [i["productId"] for i in other_client.get("/cart").json()] == [8]


class TestDeleteItem:

    def test_delete_requires_session(self, test_client: TestClient):
        assert test_client.delete("/cart/1").status_code == 401

    def test_delete_own_item(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)
        item_id = test_client.post("/cartpost", json={"productId": 7, "quantity": 1}).json()["id"]

        response = test_client.delete(f"/cart/{item_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Cart item deleted successfully"}
        assert test_client.get("/cart").json() == []

    def test_delete_keeps_other_items(self, test_client: TestClient):
        seed_products(test_client)
        register_and_login(test_client)
        first = test_client.post("/cartpost", json={"productId": 7, "quantity": 1}).json()["id"]
        test_client.post("/cartpost", json={"productId": 8, "quantity": 1})

        test_client.delete(f"/cart/{first}")

        assert [i["productId"] for i in test_client.get("/cart").json()] == [8]

    def test_other_users_item_looks_missing(self, test_client: TestClient, other_client: TestClient):
        """
        Deleting bob's item as alice gives the same 404 as a nonexistent id,
        and bob's item survives.
        """
        seed_products(test_client)
        register_and_login(test_client)
        register_and_login(other_client, BOB)
        bobs_item = other_client.post("/cartpost", json={"productId": 8, "quantity": 1}).json()["id"]

        foreign = test_client.delete(f"/cart/{bobs_item}")
        missing = test_client.delete("/cart/424242")

        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json() == {"error": "Cart item not found"}
        assert len(other_client.get("/cart").json()) == 1
