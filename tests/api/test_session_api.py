"""
Tests for session API endpoints.
"""


class TestEnterPin:

    def test_correct_pin_returns_200(self, client):
        response = client.post("/session/pin", json={"pin": "1234"})

        assert response.status_code == 200
        assert response.json() == {
            "authenticated": True,
            "message": "Welcome, John Doe",
        }

    def test_wrong_pin_returns_401(self, client):
        response = client.post("/session/pin", json={"pin": "0000"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid PIN. Please try again."

    def test_third_wrong_pin_still_401(self, client):
        client.post("/session/pin", json={"pin": "0000"})
        client.post("/session/pin", json={"pin": "0000"})
        response = client.post("/session/pin", json={"pin": "0000"})
        assert response.status_code == 401

    def test_locked_account_returns_423(self, client):
        for _ in range(3):
            client.post("/session/pin", json={"pin": "0000"})

        response = client.post("/session/pin", json={"pin": "1234"})

        assert response.status_code == 423
        assert "blocked" in response.json()["detail"]

    def test_missing_pin_returns_422(self, client):
        response = client.post("/session/pin", json={})
        assert response.status_code == 422


class TestLogout:

    def test_logout_blocks_further_operations(self, auth_client):
        response = auth_client.post("/session/logout")
        assert response.status_code == 200
        assert response.json()["authenticated"] is False

        response = auth_client.post(
            "/transactions/deposit", json={"amount": "100"}
        )
        assert response.status_code == 401
