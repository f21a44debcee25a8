"""
Component tests for the HTTP layer.

Routers, services and repositories run for real against the per-test
database; only invalidation is replaced by the recording fake.
"""
from fastapi.testclient import TestClient

from storefront.data.models.category import CategoryModel
from storefront.repos.category_repo import CategoryRepo


def device_cookie_from(response):
    """Parses the device_identifier value and attributes from Set-Cookie"""
    header = response.headers["set-cookie"]
    name_value, *attributes = [part.strip() for part in header.split(";")]
    name, value = name_value.split("=", 1)
    assert name == "device_identifier"
    return value, [a.lower() for a in attributes]


def with_device(token):
    return {"Cookie": f"device_identifier={token}"}


class TestHealth:

    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestAddToCartEndpoint:

    def test_first_add_sets_device_cookie(self, test_client: TestClient, invalidation):
        # Act
        response = test_client.post(
            "/cart/items", json={"product_id": "A", "size": "S", "color": "red"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {"kind": "SUCCESS", "message": "Item added to cart"}

        token, attributes = device_cookie_from(response)
        assert token
        assert "httponly" in attributes
        assert "secure" in attributes
        assert "samesite=strict" in attributes
        assert "path=/" in attributes
        assert "max-age=2592000" in attributes

        assert invalidation.events == [("/", "layout"), ("/[slug]", "page")]

    def test_add_with_cookie_merges_into_same_cart(self, test_client: TestClient):
        first = test_client.post(
            "/cart/items", json={"product_id": "A", "size": "S", "color": "red"}
        )
        token, _ = device_cookie_from(first)

        # Act
        second = test_client.post(
            "/cart/items",
            json={"product_id": "B", "size": "M", "color": "blue"},
            headers=with_device(token),
        )
        third = test_client.post(
            "/cart/items",
            json={"product_id": "A", "size": "L", "color": "green"},
            headers=with_device(token),
        )

        # Assert - no new cookie once the cart exists
        assert second.json()["kind"] == "SUCCESS"
        assert "set-cookie" not in second.headers
        assert "set-cookie" not in third.headers

        cart = test_client.get("/cart", headers=with_device(token))
        assert cart.status_code == 200
        assert cart.json()["products"] == [
            {"product_id": "A", "size": "L", "color": "green"},
            {"product_id": "B", "size": "M", "color": "blue"},
        ]

    def test_unknown_cookie_gets_replaced(self, test_client: TestClient):
        response = test_client.post(
            "/cart/items",
            json={"product_id": "A", "size": "S", "color": "red"},
            headers=with_device("stale-token"),
        )

        token, _ = device_cookie_from(response)
        assert token != "stale-token"
        assert test_client.get("/cart", headers=with_device("stale-token")).status_code == 404
        assert test_client.get("/cart", headers=with_device(token)).status_code == 200

    def test_missing_field_is_rejected(self, test_client: TestClient):
        response = test_client.post("/cart/items", json={"product_id": "A", "size": "S"})

        assert response.status_code == 422
        assert "set-cookie" not in response.headers

    def test_empty_field_is_rejected(self, test_client: TestClient):
        response = test_client.post(
            "/cart/items", json={"product_id": "A", "size": "", "color": "red"}
        )

        assert response.status_code == 422

    def test_whitespace_only_field_is_rejected_like_empty(self, test_client: TestClient):
        response = test_client.post(
            "/cart/items", json={"product_id": "A", "size": "   ", "color": "red"}
        )

        assert response.status_code == 422
        assert "set-cookie" not in response.headers

    def test_surrounding_whitespace_is_stripped(self, test_client: TestClient):
        first = test_client.post(
            "/cart/items", json={"product_id": " A ", "size": "S ", "color": " red"}
        )
        token, _ = device_cookie_from(first)

        cart = test_client.get("/cart", headers=with_device(token))

        assert first.json()["kind"] == "SUCCESS"
        assert cart.json()["products"] == [{"product_id": "A", "size": "S", "color": "red"}]


class TestGetCartEndpoint:

    def test_without_cookie_returns_404(self, test_client: TestClient):
        response = test_client.get("/cart")

        assert response.status_code == 404
        assert response.json()["detail"] == "Cart not found"


class TestCategoriesEndpoint:

    def seed_categories(self, session_factory):
        with session_factory() as session:
            repo = CategoryRepo(session)
            repo.create_category(CategoryModel(id="c1", name="Dresses", visibility="DRAFT"))
            repo.create_category(CategoryModel(id="c2", name="Shoes", visibility="DRAFT"))

    def test_update_and_list(self, test_client: TestClient, session_factory, invalidation):
        self.seed_categories(session_factory)

        # Act
        response = test_client.put(
            "/admin/categories",
            json={
                "category_section_visibility": "HIDDEN",
                "categories": [
                    {"id": "c1", "visibility": "PUBLISHED"},
                    {"id": "c2", "visibility": "HIDDEN"},
                ],
            },
        )

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "kind": "SUCCESS",
            "message": "Categories updated successfully",
        }
        assert invalidation.events == [("/admin/shop", "layout"), ("/", "layout")]

        listing = test_client.get("/admin/categories").json()
        assert listing["category_section_visibility"] == "HIDDEN"
        assert listing["categories"] == [
            {"id": "c1", "name": "Dresses", "visibility": "PUBLISHED"},
            {"id": "c2", "name": "Shoes", "visibility": "HIDDEN"},
        ]

    def test_update_with_unknown_category_reports_error(self, test_client: TestClient, session_factory):
        self.seed_categories(session_factory)

        response = test_client.put(
            "/admin/categories",
            json={
                "category_section_visibility": "PUBLISHED",
                "categories": [
                    {"id": "c1", "visibility": "HIDDEN"},
                    {"id": "nope", "visibility": "HIDDEN"},
                ],
            },
        )

        assert response.status_code == 200
        assert response.json() == {"kind": "ERROR", "message": "Failed to update categories"}

        listing = test_client.get("/admin/categories").json()
        assert listing["categories"][0] == {"id": "c1", "name": "Dresses", "visibility": "HIDDEN"}

    def test_invalid_visibility_is_rejected(self, test_client: TestClient):
        response = test_client.put(
            "/admin/categories",
            json={"category_section_visibility": "VISIBLE", "categories": []},
        )

        assert response.status_code == 422
