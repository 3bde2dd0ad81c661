"""End-to-end tests for the health and status endpoints."""

from tests.conftest import basic_auth_header, write_document


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "git_sha" in data


class TestStatus:
    """GET /status."""

    def test_anonymous(self, client):
        response = client.get("/status")

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is False
        assert data["database"] == "connected"
        assert data["blog"] == {
            "totalPosts": 0,
            "publishedPosts": 0,
            "featuredPosts": 0,
            "totalTags": 0,
        }

    def test_reports_credentials_without_requiring_them(self, client, admin):
        assert client.get("/status", headers=admin).json()["authenticated"] is True
        bad = client.get("/status", headers=basic_auth_header(password="nope"))
        assert bad.status_code == 200
        assert bad.json()["authenticated"] is False

    def test_counts_both_sources(self, client, admin, content_root):
        write_document(content_root, "file-one", featured=True, tags=["disk"])
        client.post(
            "/blog",
            json={"title": "Stored", "content": "Body", "published": True},
            headers=admin,
        )

        content = client.get("/status").json()["content"]

        assert content == {
            "filePosts": 1,
            "totalPosts": 2,
            "publishedPosts": 2,
            "featuredPosts": 1,
            "totalTags": 1,
        }


class TestMalformedCredentials:
    """Public endpoints serve callers with unusable Authorization headers."""

    def test_status_with_undecodable_header(self, client):
        response = client.get("/status", headers={"Authorization": "Basic !!!notbase64"})

        assert response.status_code == 200
        assert response.json()["authenticated"] is False

    def test_status_with_non_ascii_credentials(self, client):
        response = client.get(
            "/status", headers=basic_auth_header(username="édïtor", password="pässword")
        )

        assert response.status_code == 200
        assert response.json()["authenticated"] is False
