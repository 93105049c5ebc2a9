from fastapi.testclient import TestClient

ALICE = {
    "username": "alice",
    "password": "pw1",
    "name": "Alice",
    "email": "a@x.com",
    "phoneNumber": "555",
}

BOB = {
    "username": "bob",
    "password": "hunter2",
    "name": "Bob",
    "email": "b@x.com",
    "phoneNumber": "777",
}

PRODUCTS = [
    {"id": 7, "name": "Galaxy A15", "title": "Samsung Galaxy A15", "price": 179.99, "category": "mobiles"},
    {"id": 8, "name": "Buds FE", "title": "Galaxy Buds FE", "price": 69.5, "category": "accessories"},
    {"id": 9, "name": "USB-C Charger", "title": "25W charger", "price": 19.99, "category": "accessories"},
]


def register(client: TestClient, user: dict = ALICE):
    return client.post("/newuser", json=user)


def login(client: TestClient, user: dict = ALICE):
    return client.post("/login", json={"username": user["username"], "password": user["password"]})


def register_and_login(client: TestClient, user: dict = ALICE) -> int:
    assert register(client, user).status_code == 201
    response = login(client, user)
    assert response.status_code == 200
    return response.json()["userId"]


def seed_products(client: TestClient, products: list = PRODUCTS):
    response = client.post("/newproducts", json={"data": products})
    assert response.status_code == 200
    return response
