import json
from typing import Any, Dict, List

import redis
from flask import current_app

from ..errors import StorageError, ValidationError
from ..models import Customer, Expense
from .state import GarageState

CUSTOMERS_KEY = "customers"
EXPENSES_KEY = "expenses"


def _get_list(key: str) -> List[Dict[str, Any]]:
    redis_client = current_app.extensions.get("redis")
    try:
        raw = redis_client.get(key)
    except redis.RedisError as e:
        raise StorageError(f"Gagal membaca data '{key}': {e}")
    if not raw:
        return []
    try:
        items = json.loads(raw)
    except ValueError as e:
        raise StorageError(f"Data '{key}' rusak: {e}")
    if not isinstance(items, list):
        raise StorageError(f"Data '{key}' rusak: bukan daftar")
    return items


def _set_list(key: str, items: List[Dict[str, Any]]):
    redis_client = current_app.extensions.get("redis")
    try:
        payload = json.dumps(items)
    except (TypeError, ValueError) as e:
        raise StorageError(f"Gagal menyimpan data '{key}': {e}")
    try:
        redis_client.set(key, payload)
    except redis.RedisError as e:
        raise StorageError(f"Gagal menyimpan data '{key}': {e}")


def _parse_records(key: str, model) -> tuple:
    try:
        return tuple(model.from_dict(d) for d in _get_list(key))
    except (KeyError, TypeError, AttributeError) as e:
        raise StorageError(f"Data '{key}' rusak: field {e} tidak valid")
    except ValidationError as e:
        raise StorageError(f"Data '{key}' rusak: {e.message}")


def load_state() -> GarageState:
    customers = _parse_records(CUSTOMERS_KEY, Customer)
    expenses = _parse_records(EXPENSES_KEY, Expense)
    return GarageState(customers=customers, expenses=expenses)


def save_customers(state: GarageState):
    _set_list(CUSTOMERS_KEY, [c.to_dict() for c in state.customers])


def save_expenses(state: GarageState):
    _set_list(EXPENSES_KEY, [e.to_dict() for e in state.expenses])
