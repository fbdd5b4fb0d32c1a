"""
Tests for account and receipt API endpoints.
"""

from decimal import Decimal


class TestAccountDetails:

    def test_details_available_without_session(self, client):
        response = client.get("/account")

        assert response.status_code == 200
        data = response.json()
        assert data["account_number"] == "ACC123456789"
        assert data["holder_name"] == "John Doe"
        assert data["is_locked"] is False
        assert Decimal(data["max_withdrawal"]) == Decimal("1000.00")
        assert Decimal(data["max_deposit"]) == Decimal("10000.00")
        assert Decimal(data["max_transfer"]) == Decimal("5000.00")


class TestBalance:

    def test_balance_returns_200(self, auth_client):
        response = auth_client.get("/account/balance")

        assert response.status_code == 200
        assert Decimal(response.json()["balance"]) == Decimal("25000.00")

    def test_balance_requires_session(self, client):
        assert client.get("/account/balance").status_code == 401


class TestHistory:

    def test_empty_history(self, auth_client):
        response = auth_client.get("/account/history")
        assert response.status_code == 200
        assert response.json() == []

    def test_history_in_order(self, auth_client):
        auth_client.post("/transactions/deposit", json={"amount": "100"})
        auth_client.post("/transactions/transfer", json={
            "amount": "40", "target_account": "ACC2",
        })

        entries = auth_client.get("/account/history").json()

        assert [e["kind"] for e in entries] == ["DEPOSIT", "TRANSFER"]
        assert entries[1]["label"] == "TRANSFER TO ACC2"
        assert entries[1]["target_account"] == "ACC2"
        assert Decimal(entries[1]["balance_after"]) == Decimal("25060")


class TestChangePin:

    def test_change_pin_returns_200(self, auth_client, account):
        response = auth_client.post("/account/pin", json={
            "old_pin": "1234", "new_pin": "5678", "confirm_pin": "5678",
        })

        assert response.status_code == 200
        assert response.json()["message"] == "PIN changed successfully!"
        assert account.validate_pin("5678") is True

    def test_wrong_current_pin_returns_400(self, auth_client, account):
        response = auth_client.post("/account/pin", json={
            "old_pin": "0000", "new_pin": "5678", "confirm_pin": "5678",
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid current PIN."
        assert account.failed_attempts == 1


class TestReceipts:

    def test_no_receipt_returns_404(self, auth_client):
        response = auth_client.get("/receipts/latest")

        assert response.status_code == 404
        assert response.json()["detail"] == "No recent transaction found."

    def test_receipt_requires_session(self, client):
        assert client.get("/receipts/latest").status_code == 401

    def test_latest_receipt_is_text(self, auth_client):
        auth_client.post("/transactions/withdraw", json={"amount": "500"})

        response = auth_client.get("/receipts/latest")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "SECUREBANK ATM" in response.text
        assert "Transaction Type: WITHDRAWAL" in response.text
        assert "Balance After: Rs 24500.00" in response.text

    def test_print_and_save_are_simulated(self, auth_client):
        auth_client.post("/transactions/deposit", json={"amount": "10"})

        printed = auth_client.post("/receipts/latest/print")
        saved = auth_client.post("/receipts/latest/save")

        assert printed.json()["message"] == "Receipt sent to printer!"
        assert saved.json()["message"] == "Receipt saved as receipt.txt"
