"""
Integration tests for the Bank Ledger API
Tests end-to-end workflows using FastAPI TestClient
"""

import pytest
from fastapi.testclient import TestClient

from bank_ledger.api import create_app
from bank_ledger.api.dependencies import BankingSystem, get_banking_system
from bank_ledger.config import LedgerConfig


@pytest.fixture
def system():
    """Fresh in-memory banking system"""
    banking_system = BankingSystem(LedgerConfig(storage_backend="memory", _env_file=None))
    yield banking_system
    banking_system.close()


@pytest.fixture
def client(system):
    """Test client wired to the in-memory banking system"""
    app = create_app()
    app.dependency_overrides[get_banking_system] = lambda: system
    return TestClient(app)


class TestHealthEndpoints:
    """Test basic health and root endpoints"""

    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "healthy"

    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        data = r.json()
        assert data["name"] == "Bank Ledger API"
        assert "accounts" in data["endpoints"]


class TestUserFlow:
    """End-to-end user management tests"""

    def test_register_user(self, client):
        r = client.post("/users", json={"id": "user123", "name": "Alice"})
        assert r.status_code == 201
        data = r.json()
        assert data["user_id"] == "user123"
        assert data["default_account_id"] == "default_user123"

        r = client.get("/accounts/default_user123")
        assert r.status_code == 200
        assert r.json()["balance"] == 0
        assert r.json()["owner_id"] == "user123"

    def test_register_duplicate_user(self, client):
        client.post("/users", json={"id": "user123", "name": "Alice"})

        r = client.post("/users", json={"id": "user123", "name": "Alice"})
        assert r.status_code == 409

    def test_register_blank_name(self, client):
        r = client.post("/users", json={"id": "user123", "name": "  "})
        assert r.status_code == 400

    def test_get_user(self, client):
        client.post("/users", json={"id": "user123", "name": "Alice", "email": "a@example.com"})

        r = client.get("/users/user123")
        assert r.status_code == 200
        assert r.json()["email"] == "a@example.com"

        assert client.get("/users/nobody").status_code == 404

    def test_user_accounts(self, client):
        client.post("/users", json={"id": "user123", "name": "Alice"})

        r = client.post("/users/user123/accounts", json={"id": "savings", "balance": 250})
        assert r.status_code == 201

        r = client.post("/users/user123/accounts", json={"id": "savings", "balance": 1})
        assert r.status_code == 409

        r = client.get("/users/user123/accounts")
        assert r.status_code == 200
        ids = sorted(a["id"] for a in r.json()["accounts"])
        assert ids == ["default_user123", "savings"]

    def test_user_accounts_unknown_user(self, client):
        assert client.get("/users/ghost/accounts").status_code == 404
        r = client.post("/users/ghost/accounts", json={"id": "savings"})
        assert r.status_code == 404


class TestAccountFlow:
    """End-to-end account operation tests"""

    def test_create_and_get_account(self, client):
        r = client.post("/accounts", json={"id": "acc001", "initial_balance": 500})
        assert r.status_code == 201

        r = client.get("/accounts/acc001")
        assert r.status_code == 200
        assert r.json()["balance"] == 500
        assert r.json()["owner_id"] is None

    def test_create_duplicate_account(self, client):
        client.post("/accounts", json={"id": "acc001", "initial_balance": 500})

        r = client.post("/accounts", json={"id": "acc001", "initial_balance": 1})
        assert r.status_code == 409

    def test_list_accounts(self, client):
        client.post("/accounts", json={"id": "acc1", "initial_balance": 100})
        client.post("/accounts", json={"id": "acc2", "initial_balance": 200})

        r = client.get("/accounts")
        assert r.status_code == 200
        assert sorted(a["id"] for a in r.json()["accounts"]) == ["acc1", "acc2"]

    def test_deposit_and_withdraw(self, client):
        client.post("/accounts", json={"id": "acc001", "initial_balance": 500})

        r = client.post("/accounts/acc001/deposit", json={"amount": 300})
        assert r.status_code == 200
        assert r.json()["balance"] == 800

        r = client.post("/accounts/acc001/withdraw", json={"amount": 400})
        assert r.status_code == 200
        assert r.json()["balance"] == 400

        r = client.post("/accounts/acc001/withdraw", json={"amount": 1000})
        assert r.status_code == 409
        assert r.json()["detail"] == "Insufficient funds"

        r = client.get("/accounts/acc001/balance")
        assert r.json() == {"account_id": "acc001", "balance": 400}

    def test_operations_on_missing_account(self, client):
        assert client.get("/accounts/ghost").status_code == 404
        assert client.get("/accounts/ghost/balance").status_code == 404
        assert client.post("/accounts/ghost/deposit", json={"amount": 1}).status_code == 404
        assert client.post("/accounts/ghost/withdraw", json={"amount": 1}).status_code == 404
        assert client.delete("/accounts/ghost").status_code == 404

    def test_delete_account(self, client):
        client.post("/accounts", json={"id": "acc001", "initial_balance": 5})

        assert client.delete("/accounts/acc001").status_code == 200
        assert client.get("/accounts/acc001").status_code == 404

    def test_non_integer_amount_rejected(self, client):
        client.post("/accounts", json={"id": "acc001", "initial_balance": 5})

        r = client.post("/accounts/acc001/deposit", json={"amount": "lots"})
        assert r.status_code == 422


class TestTransferFlow:
    """End-to-end transfer tests"""

    def test_transfer(self, client, system):
        client.post("/accounts", json={"id": "from1", "initial_balance": 1000})
        client.post("/accounts", json={"id": "to1", "initial_balance": 500})

        r = client.post("/transfers", json={
            "from_account_id": "from1", "to_account_id": "to1", "amount": 300
        })
        assert r.status_code == 200

        assert system.ledger.get_balance("from1") == 700
        assert system.ledger.get_balance("to1") == 800

    def test_transfer_insufficient_funds(self, client, system):
        client.post("/accounts", json={"id": "from2", "initial_balance": 1000})
        client.post("/accounts", json={"id": "to2", "initial_balance": 0})

        r = client.post("/transfers", json={
            "from_account_id": "from2", "to_account_id": "to2", "amount": 2000
        })
        assert r.status_code == 409
        assert r.json()["detail"] == "Insufficient funds in source account"
        assert system.ledger.get_balance("from2") == 1000

    def test_transfer_missing_account(self, client):
        client.post("/accounts", json={"id": "from3", "initial_balance": 1000})

        r = client.post("/transfers", json={
            "from_account_id": "from3", "to_account_id": "to3", "amount": 1
        })
        assert r.status_code == 404
