"""Integration tests for the CRUD resources behind the Bearer guard."""

import unittest
from unittest.mock import patch

from shopkeep.models import Setting
from shopkeep.services.settings import get_setting
from tests.support import API, ApiTestCase


class AuthedApiTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.bearer(self.token_for("admin@x.com"))

    def get(self, path: str):
        return self.client.get(f"{API}{path}", headers=self.headers)

    def post(self, path: str, body: dict):
        return self.client.post(f"{API}{path}", json=body, headers=self.headers)

    def put(self, path: str, body: dict):
        return self.client.put(f"{API}{path}", json=body, headers=self.headers)

    def delete(self, path: str):
        return self.client.delete(f"{API}{path}", headers=self.headers)


class TestGuardedResources(ApiTestCase):
    def test_all_resources_require_token(self) -> None:
        for path in ("/users", "/roles", "/permissions", "/categories", "/products", "/settings"):
            self.assertEqual(self.client.get(f"{API}{path}").status_code, 401, path)
            self.assertEqual(self.client.post(f"{API}{path}", json={}).status_code, 401, path)


class TestUsers(AuthedApiTestCase):
    def test_crud(self) -> None:
        resp = self.post("/users", {"name": "Bob", "email": "bob@x.com", "password": "secret123"})
        self.assertEqual(resp.status_code, 201, resp.text)
        bob = resp.json()

        self.assertEqual(self.get(f"/users/{bob['id']}").json()["email"], "bob@x.com")

        resp = self.put(f"/users/{bob['id']}", {"name": "Robert"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["name"], "Robert")
        self.assertEqual(resp.json()["email"], "bob@x.com")

        resp = self.put(f"/users/{bob['id']}", {"password": "new-secret1"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.login("bob@x.com", "new-secret1").status_code, 200)

        resp = self.delete(f"/users/{bob['id']}")
        self.assertEqual(resp.json(), {"message": "User deleted"})
        self.assertEqual(self.get(f"/users/{bob['id']}").status_code, 404)

    def test_duplicate_email_on_create_and_update(self) -> None:
        resp = self.post("/users", {"name": "Dup", "email": "admin@x.com", "password": "secret123"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "email"])

        bob = self.post("/users", {"name": "Bob", "email": "bob@x.com", "password": "secret123"}).json()
        resp = self.put(f"/users/{bob['id']}", {"email": "admin@x.com"})
        self.assertEqual(resp.status_code, 422)
        # Keeping one's own e-mail is not a conflict.
        self.assertEqual(self.put(f"/users/{bob['id']}", {"email": "bob@x.com"}).status_code, 200)

    def test_missing(self) -> None:
        self.assertEqual(self.get("/users/999").status_code, 404)
        self.assertEqual(self.put("/users/999", {"name": "x"}).status_code, 404)
        self.assertEqual(self.delete("/users/999").status_code, 404)

    def test_ids_outside_column_range_are_missing(self) -> None:
        for user_id in ("99999999999999999999", "0", "-1"):
            self.assertEqual(self.get(f"/users/{user_id}").status_code, 404, user_id)
            self.assertEqual(self.put(f"/users/{user_id}", {"name": "x"}).status_code, 404, user_id)
            self.assertEqual(self.delete(f"/users/{user_id}").status_code, 404, user_id)

    def test_blank_name_rejected(self) -> None:
        resp = self.post("/users", {"name": "   ", "email": "bob@x.com", "password": "secret123"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "name"])

        bob = self.post("/users", {"name": "  Bob  ", "email": "bob@x.com", "password": "secret123"}).json()
        self.assertEqual(bob["name"], "Bob")

        resp = self.put(f"/users/{bob['id']}", {"name": "   "})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "name"])
        self.assertEqual(self.get(f"/users/{bob['id']}").json()["name"], "Bob")


class TestRolesAndPermissions(AuthedApiTestCase):
    def test_permissions_index_and_store(self) -> None:
        resp = self.post("/permissions", {"name": "edit products"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["guard_name"], "api")
        self.assertEqual(self.post("/permissions", {"name": "edit products"}).status_code, 422)
        names = [p["name"] for p in self.get("/permissions").json()]
        self.assertEqual(names, ["edit products"])

    def test_role_with_permissions(self) -> None:
        self.post("/permissions", {"name": "view"})
        self.post("/permissions", {"name": "edit"})

        resp = self.post("/roles", {"name": "editor", "permissions": ["view", "edit"]})
        self.assertEqual(resp.status_code, 201, resp.text)
        role = resp.json()
        self.assertEqual(sorted(p["name"] for p in role["permissions"]), ["edit", "view"])

        resp = self.put(f"/roles/{role['id']}", {"permissions": ["view"]})
        self.assertEqual([p["name"] for p in resp.json()["permissions"]], ["view"])
        self.assertEqual(resp.json()["name"], "editor")

        resp = self.put(f"/roles/{role['id']}", {"name": "viewer"})
        self.assertEqual(resp.json()["name"], "viewer")
        self.assertEqual([p["name"] for p in resp.json()["permissions"]], ["view"])

        self.assertEqual(self.delete(f"/roles/{role['id']}").json(), {"message": "Role deleted"})
        self.assertEqual(self.get(f"/roles/{role['id']}").status_code, 404)
        # Permissions survive the role.
        self.assertEqual(len(self.get("/permissions").json()), 2)

    def test_unknown_permission(self) -> None:
        resp = self.post("/roles", {"name": "editor", "permissions": ["nope"]})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "permissions"])

    def test_duplicate_role_name(self) -> None:
        self.assertEqual(self.post("/roles", {"name": "editor"}).status_code, 201)
        self.assertEqual(self.post("/roles", {"name": "editor"}).status_code, 422)


class TestCatalog(AuthedApiTestCase):
    def test_category_and_product(self) -> None:
        resp = self.post("/categories", {"name": "Drinks", "description": "Cold ones"})
        self.assertEqual(resp.status_code, 201)
        category = resp.json()

        resp = self.post(
            "/products",
            {"name": "Lemonade", "price": "2.50", "stock": 10, "category_id": category["id"]},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        product = resp.json()
        self.assertEqual(float(product["price"]), 2.5)
        self.assertEqual(product["category_id"], category["id"])

        resp = self.put(f"/products/{product['id']}", {"stock": 7})
        self.assertEqual(resp.json()["stock"], 7)
        self.assertEqual(resp.json()["name"], "Lemonade")

        resp = self.put(f"/categories/{category['id']}", {"name": "Beverages"})
        self.assertEqual(resp.json()["name"], "Beverages")
        self.assertEqual(resp.json()["description"], "Cold ones")

        self.assertEqual(
            self.delete(f"/categories/{category['id']}").json(), {"message": "Category deleted"}
        )
        self.assertIsNone(self.get(f"/products/{product['id']}").json()["category_id"])

        self.assertEqual(
            self.delete(f"/products/{product['id']}").json(), {"message": "Product deleted"}
        )
        self.assertEqual(self.get("/products").json(), [])

    def test_product_validation(self) -> None:
        resp = self.post("/products", {"name": "Bad", "price": "-1"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "price"])

        resp = self.post("/products", {"name": "Orphan", "price": "1.00", "category_id": 999})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "category_id"])

    def test_category_id_outside_column_range(self) -> None:
        body = {"name": "Huge", "price": "1.00", "category_id": 99999999999999999999}
        resp = self.post("/products", body)
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "category_id"])

        product = self.post("/products", {"name": "Plain", "price": "1.00"}).json()
        resp = self.put(f"/products/{product['id']}", {"category_id": 99999999999999999999})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "category_id"])
        self.assertEqual(self.get("/products/99999999999999999999").status_code, 404)

    def test_missing(self) -> None:
        self.assertEqual(self.get("/categories/999").status_code, 404)
        self.assertEqual(self.get("/products/999").status_code, 404)
        self.assertEqual(self.delete("/products/999").status_code, 404)


class TestSettings(AuthedApiTestCase):
    def test_crud_by_key(self) -> None:
        resp = self.post("/settings", {"key": "currency", "value": "EUR"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["value"], "EUR")

        resp = self.post("/settings", {"key": "limits", "value": {"max_cart": 20}})
        self.assertEqual(resp.json()["value"], {"max_cart": 20})

        self.assertEqual(self.get("/settings/currency").json()["value"], "EUR")
        self.assertEqual(len(self.get("/settings").json()), 2)

        resp = self.put("/settings/currency", {"value": "USD"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["value"], "USD")

        self.assertEqual(self.delete("/settings/currency").json(), {"message": "Setting deleted"})
        self.assertEqual(self.get("/settings/currency").status_code, 404)

    def test_duplicate_key(self) -> None:
        self.assertEqual(self.post("/settings", {"key": "currency", "value": "EUR"}).status_code, 201)
        resp = self.post("/settings", {"key": "currency", "value": "USD"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "key"])

    def test_missing_key(self) -> None:
        self.assertEqual(self.put("/settings/nope", {"value": 1}).status_code, 404)
        self.assertEqual(self.delete("/settings/nope").status_code, 404)

    def test_key_required(self) -> None:
        self.assertEqual(self.post("/settings", {"value": 1}).status_code, 422)

    def test_key_with_slash_rejected(self) -> None:
        resp = self.post("/settings", {"key": "a/b", "value": 1})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "key"])
        self.assertEqual(self.get("/settings").json(), [])


class TestUniqueConstraintAtCommit(AuthedApiTestCase):
    """A duplicate that slips past the pre-check is still a 422 from the database constraint."""

    def test_duplicate_setting_key(self) -> None:
        self.assertEqual(self.post("/settings", {"key": "currency", "value": "EUR"}).status_code, 201)
        with patch("shopkeep.api.v1.settings.ensure_unique", return_value=None):
            resp = self.post("/settings", {"key": "currency", "value": "USD"})
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "key"])
        self.assertEqual(resp.json()["detail"][0]["type"], "unique")
        # The session was rolled back and the original row is intact.
        self.assertEqual(self.get("/settings/currency").json()["value"], "EUR")

    def test_duplicate_registration_email(self) -> None:
        with patch("shopkeep.api.v1.auth.ensure_unique", return_value=None):
            resp = self.register(email="admin@x.com")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["detail"][0]["loc"], ["body", "email"])
        self.assertEqual(resp.json()["detail"][0]["type"], "unique")


class TestSettingLookup(ApiTestCase):
    """get_setting and the root discovery route that uses it."""

    def test_default_when_missing_or_null(self) -> None:
        self.assertEqual(get_setting(self.db, "app_name", "fallback"), "fallback")
        self.db.add(Setting(key="app_name", value=None))
        self.db.commit()
        self.assertEqual(get_setting(self.db, "app_name", "fallback"), "fallback")

    def test_root_reports_app_name(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "Shopkeep API"})
        self.db.add(Setting(key="app_name", value="Corner Shop"))
        self.db.commit()
        self.assertEqual(get_setting(self.db, "app_name"), "Corner Shop")
        self.assertEqual(self.client.get("/").json(), {"message": "Corner Shop"})


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get(f"{API}/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(), {"status": "ok", "environment": "test", "database": "connected"}
        )


if __name__ == "__main__":
    unittest.main()
