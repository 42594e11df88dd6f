import json
from datetime import date

import pytest
import redis

from garasi.errors import StorageError
from garasi.models import Expense
from garasi.services.state import GarageState, add_expense
from garasi.services.store import load_state, save_expenses


def test_missing_keys_load_as_empty(app):
    with app.app_context():
        state = load_state()
    assert state == GarageState()


def test_save_overwrites_whole_collection(app, redis_client):
    expense = Expense(id="e1", deskripsi="Bayar Air", harga=50000, tanggal=date(2024, 3, 3))
    with app.app_context():
        save_expenses(add_expense(GarageState(), expense))
        assert load_state().expenses == (expense,)
        save_expenses(GarageState())
        assert load_state().expenses == ()
    assert json.loads(redis_client.get("expenses")) == []


def test_corrupt_payload_raises_storage_error(app, redis_client):
    redis_client.set("customers", "{not json")
    with app.app_context(), pytest.raises(StorageError):
        load_state()


@pytest.mark.parametrize("raw", ["{}", '"x"', "42"])
def test_non_list_payload_is_not_overwritten(app, client, redis_client, raw):
    redis_client.set("expenses", raw)
    with app.app_context(), pytest.raises(StorageError):
        load_state()

    resp = client.post("/expenses", json={"deskripsi": "sapu", "harga": 5000, "tanggal": "2024-03-02"})
    assert resp.status_code == 503
    assert redis_client.get("expenses") == raw.encode()


@pytest.mark.parametrize("record", [
    {"nama": "Tanpa Id", "roomNumber": 1, "tanggalMulai": "2024-01-01", "harga": 1000},
    {"id": "a", "nama": "Tanpa Tanggal", "roomNumber": 1, "harga": 1000},
    {"id": "a", "nama": "Room Rusak", "roomNumber": "tiga", "tanggalMulai": "2024-01-01", "harga": 1000},
    "bukan objek",
])
def test_broken_customer_record_returns_503(client, redis_client, record):
    redis_client.set("customers", json.dumps([record]))
    resp = client.get("/customers")
    assert resp.status_code == 503
    assert "rusak" in resp.get_json()["error"]


class BrokenRedis:
    def get(self, key):
        raise redis.ConnectionError("connection refused")

    def set(self, key, value):
        raise redis.ConnectionError("connection refused")


def test_write_failure_is_surfaced(app):
    app.extensions["redis"] = BrokenRedis()
    with app.app_context(), pytest.raises(StorageError):
        save_expenses(GarageState())


def test_write_failure_returns_503(app, client):
    app.extensions["redis"] = BrokenRedis()
    resp = client.post("/expenses", json={"deskripsi": "Air", "harga": 1000, "tanggal": "2024-03-01"})
    assert resp.status_code == 503
    assert "error" in resp.get_json()
