"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    """
    Verify the health endpoint responds with HTTP 200.

    This is the most basic test — can the application
    receive a request and respond? If this fails, nothing
    else will work.
    """
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_returns_service_name(client):
    response = client.get("/health")
    data = response.json()
    assert data["service"] == "atm-terminal"


def test_health_check_reports_account_status(client):
    response = client.get("/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert data["account"] == "active"


def test_health_check_degraded_when_locked(client, account):
    for _ in range(3):
        account.validate_pin("0000")

    data = client.get("/health").json()
    assert data["status"] == "degraded"
    assert data["account"] == "locked"
