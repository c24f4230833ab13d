"""Tests for the current-user endpoint."""

from tests.fakes import TEST_EMAIL, TEST_UID


class TestCurrentUserEndpoint:
    """Tests for GET /api/users/me"""

    def test_requires_session(self, client):
        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized", "code": "UNAUTHORIZED"}

    def test_expired_session(self, client):
        client.cookies.set("session", "expired-session-cookie")

        response = client.get("/api/users/me")

        assert response.status_code == 401

    def test_returns_identity_and_subscription(self, authed_client, profiles):
        profiles.profiles[TEST_UID] = {
            "stripeCustomerId": "cus_1",
            "subscriptionTier": "pro",
            "subscriptionStatus": "active",
        }

        response = authed_client.get("/api/users/me")

        assert response.status_code == 200
        data = response.json()
        assert data["uid"] == TEST_UID
        assert data["email"] == TEST_EMAIL
        assert data["stripe_customer_id"] == "cus_1"
        assert data["subscription_tier"] == "pro"
        assert data["subscription_status"] == "active"
