"""HTTP tests for the /book-category and /health endpoints."""

from fastapi.testclient import TestClient


class TestBookCategoryEndpoints:
    def test_create_list_get(self, client: TestClient):
        created = client.post("/book-category", json={"name": "Poetry"})
        assert created.status_code == 200
        category_id = created.json()["id"]

        listing = client.get("/book-category/all")
        assert listing.status_code == 200
        assert [c["name"] for c in listing.json()] == ["Poetry"]

        fetched = client.get(f"/book-category/{category_id}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Poetry"

    def test_empty_list(self, client: TestClient):
        response = client.get("/book-category/all")

        assert response.status_code == 200
        assert response.json() == []

    def test_blank_name_rejected(self, client: TestClient):
        assert client.post("/book-category", json={"name": ""}).status_code == 422

    def test_missing_category(self, client: TestClient):
        response = client.get("/book-category/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Book category not found"

    def test_rename(self, client: TestClient, main_category):
        response = client.patch(f"/book-category/{main_category.id}", json={"name": "Novels"})

        assert response.status_code == 200
        assert response.json()["name"] == "Novels"

    def test_soft_delete_hides_category(self, client: TestClient, main_category):
        response = client.patch(f"/book-category/{main_category.id}/soft-delete")

        assert response.status_code == 200
        assert client.get(f"/book-category/{main_category.id}").status_code == 404
        assert client.get("/book-category/all").json() == []

    def test_hard_delete(self, client: TestClient, main_category):
        response = client.delete(f"/book-category/{main_category.id}")

        assert response.status_code == 200
        assert client.delete(f"/book-category/{main_category.id}").status_code == 500


class TestHealthEndpoints:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"]["status"] == "healthy"

    def test_database(self, client: TestClient):
        response = client.get("/health/database")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "pool" in response.json()

    def test_request_id_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
