"""
Tests for the current user's profile endpoints.
"""

from tests.conftest import TEST_PASSWORD


class TestProfile:
    def test_get_profile(self, client, member, member_headers):
        response = client.get("/api/user/profile", headers=member_headers)
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"] == member.id
        assert "password_hash" not in user

    def test_update_name_only(self, client, member_headers):
        response = client.put(
            "/api/user/profile", json={"first_name": "Alicia"}, headers=member_headers
        )
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["first_name"] == "Alicia"
        assert user["last_name"] == "Smith"

    def test_change_password(self, client, member_headers):
        response = client.put(
            "/api/user/profile", json={"password": "brand-new-pass"}, headers=member_headers
        )
        assert response.status_code == 200

        old = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": TEST_PASSWORD}
        )
        new = client.post(
            "/api/auth/login", json={"email": "alice@example.com", "password": "brand-new-pass"}
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_short_password_rejected(self, client, member_headers):
        response = client.put("/api/user/profile", json={"password": "123"}, headers=member_headers)
        assert response.status_code == 400


class TestSetupProfile:
    METRICS = {"height": 170, "current_weight": 80, "goal_weight": 72, "unit": "kg"}

    def test_setup_own_profile(self, client, member, member_headers):
        response = client.put(
            f"/api/user/setup-profile/{member.id}", json=self.METRICS, headers=member_headers
        )
        assert response.status_code == 200
        assert response.json()["user"]["goal_weight"] == 72

    def test_cannot_setup_someone_else(self, client, admin, member_headers):
        response = client.put(
            f"/api/user/setup-profile/{admin.id}", json=self.METRICS, headers=member_headers
        )
        assert response.status_code == 403

    def test_requires_auth(self, client, member):
        response = client.put(f"/api/user/setup-profile/{member.id}", json=self.METRICS)
        assert response.status_code == 401
