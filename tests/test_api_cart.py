"""Tests for the cart REST endpoints."""


class TestGetCart:
    def test_priced_view(self, client, apples, bananas, add_line):
        add_line("user123", apples, 2)
        add_line("user123", bananas, 1)

        response = client.get("/api/cart", params={"userId": "user123"})

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == "user123"
        assert data["totalItems"] == 3
        assert data["totalAmount"] == 10.47
        first = data["items"][0]
        assert first["productName"] == "Fresh Apples"
        assert first["productPrice"] == 3.99
        assert first["productCategory"] == "FRUITS"
        assert first["subtotal"] == 7.98

    def test_user_id_required(self, client):
        assert client.get("/api/cart").status_code == 400


class TestAddToCart:
    def test_created(self, client, apples):
        response = client.post("/api/cart", json={"productId": apples.id, "userId": "user123", "quantity": 2})

        assert response.status_code == 201
        data = response.json()
        assert data["productId"] == apples.id
        assert data["quantity"] == 2

    def test_twice_sums_quantity(self, client, apples):
        body = {"productId": apples.id, "userId": "user123", "quantity": 2}
        first = client.post("/api/cart", json=body).json()
        second = client.post("/api/cart", json={**body, "quantity": 3}).json()

        assert first["id"] == second["id"]
        assert second["quantity"] == 5
        assert len(client.get("/api/cart", params={"userId": "user123"}).json()["items"]) == 1

    def test_unknown_product(self, client):
        response = client.post("/api/cart", json={"productId": 404, "userId": "user123", "quantity": 1})

        assert response.status_code == 400
        assert "404" in response.json()["detail"]

    def test_zero_quantity(self, client, apples):
        response = client.post("/api/cart", json={"productId": apples.id, "userId": "user123", "quantity": 0})

        assert response.status_code == 400


class TestUpdateCartItem:
    def test_update(self, client, apples, add_line):
        line = add_line("user123", apples, 1)

        response = client.put(f"/api/cart/{line.id}", params={"userId": "user123"}, json={"quantity": 4})

        assert response.status_code == 200
        assert response.json()["quantity"] == 4

    def test_not_owned(self, client, apples, add_line):
        line = add_line("user123", apples, 1)

        response = client.put(f"/api/cart/{line.id}", params={"userId": "user456"}, json={"quantity": 4})

        assert response.status_code == 404

    def test_missing(self, client):
        response = client.put("/api/cart/999", params={"userId": "user123"}, json={"quantity": 4})

        assert response.status_code == 404

    def test_invalid_quantity(self, client, apples, add_line):
        line = add_line("user123", apples, 1)

        response = client.put(f"/api/cart/{line.id}", params={"userId": "user123"}, json={"quantity": 0})

        assert response.status_code == 400


class TestRemoveAndClear:
    def test_remove(self, client, apples, add_line):
        line = add_line("user123", apples, 1)

        assert client.delete(f"/api/cart/{line.id}", params={"userId": "user123"}).status_code == 204
        assert client.get("/api/cart/count", params={"userId": "user123"}).json() == 0

    def test_remove_foreign_or_missing(self, client, apples, add_line):
        line = add_line("user123", apples, 1)

        assert client.delete(f"/api/cart/{line.id}", params={"userId": "user456"}).status_code == 404
        assert client.delete("/api/cart/999", params={"userId": "user123"}).status_code == 404

    def test_clear(self, client, apples, bananas, add_line):
        add_line("user123", apples, 1)
        add_line("user123", bananas, 1)

        assert client.delete("/api/cart/clear", params={"userId": "user123"}).status_code == 204
        assert client.get("/api/cart", params={"userId": "user123"}).json()["items"] == []


class TestCountAndCheck:
    def test_count(self, client, apples, bananas, add_line):
        add_line("user123", apples, 2)
        add_line("user123", bananas, 5)

        assert client.get("/api/cart/count", params={"userId": "user123"}).json() == 7

    def test_check(self, client, apples, bananas, add_line):
        add_line("user123", apples, 1)

        params = {"userId": "user123", "productId": apples.id}
        assert client.get("/api/cart/check", params=params).json() is True
        params["productId"] = bananas.id
        assert client.get("/api/cart/check", params=params).json() is False
