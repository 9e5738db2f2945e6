"""Tests for the product REST endpoints."""


class TestListProducts:
    def test_sorted_by_name(self, client, milk, apples, bananas):
        response = client.get("/api/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Fresh Apples", "Organic Bananas", "Whole Milk"]

    def test_serialization(self, client, apples):
        product = client.get("/api/products").json()[0]

        assert product["id"] == apples.id
        assert product["category"] == "FRUITS"
        assert product["price"] == 3.99
        assert product["imageUrl"] == apples.image_url

    def test_by_category_is_case_insensitive(self, client, apples, milk):
        response = client.get("/api/products/dairy")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [milk.id]

    def test_unknown_category(self, client):
        assert client.get("/api/products/snacks").status_code == 400

    def test_search(self, client, apples, bananas):
        response = client.get("/api/products/search", params={"name": "apple"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [apples.id]


class TestManageProducts:
    def test_create(self, client):
        response = client.post(
            "/api/products",
            json={"name": "Green Tea", "category": "BEVERAGES", "price": 7.99},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Green Tea"
        assert data["price"] == 7.99

    def test_create_rejects_negative_price(self, client):
        response = client.post(
            "/api/products",
            json={"name": "Bad", "category": "DAIRY", "price": -1},
        )

        assert response.status_code == 400

    def test_create_rejects_unknown_category(self, client):
        response = client.post(
            "/api/products",
            json={"name": "Chips", "category": "SNACKS", "price": 1.50},
        )

        assert response.status_code == 400

    def test_update(self, client, apples):
        response = client.put(
            f"/api/products/{apples.id}",
            json={"name": "Red Apples", "category": "FRUITS", "price": 4.10},
        )

        assert response.status_code == 200
        assert response.json()["price"] == 4.1

    def test_update_missing(self, client):
        response = client.put(
            "/api/products/999",
            json={"name": "X", "category": "FRUITS", "price": 1},
        )

        assert response.status_code == 404

    def test_delete(self, client, apples):
        assert client.delete(f"/api/products/{apples.id}").status_code == 204
        assert client.delete(f"/api/products/{apples.id}").status_code == 404
