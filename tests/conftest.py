from datetime import datetime

import fakeredis
import pytest

from garasi import create_app
from garasi.config import Config
from garasi.routes import customers, dashboard, rooms
from garasi.utils.time import WIB

FROZEN_NOW = WIB.localize(datetime(2024, 3, 20, 9, 30))


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis()


@pytest.fixture
def app(redis_client, monkeypatch):
    for module in (customers, rooms):
        monkeypatch.setattr(module, "today_wib", lambda: FROZEN_NOW.date())
    monkeypatch.setattr(dashboard, "now_wib", lambda: FROZEN_NOW)

    config = Config()
    config.TESTING = True
    return create_app(config=config, redis_client=redis_client)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def customer_payload():
    return {
        "nama": "budi santoso",
        "noHP": "081234567890",
        "jenisMobil": "toyota avanza",
        "noKendaraan": "b 1234 xyz",
        "roomNumber": 5,
        "tanggalMulai": "2024-01-15",
        "periodeBulan": 1,
        "harga": "1.500.000",
        "fotoKendaraan": "",
    }
