from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from ..errors import NotFoundError, ValidationError
from ..models import Customer, Expense


@dataclass(frozen=True)
class GarageState:
    customers: Tuple[Customer, ...] = ()
    expenses: Tuple[Expense, ...] = ()


def find_customer(state: GarageState, customer_id: str) -> Customer:
    for c in state.customers:
        if c.id == customer_id:
            return c
    raise NotFoundError("Customer tidak ditemukan")


def find_expense(state: GarageState, expense_id: str) -> Expense:
    for e in state.expenses:
        if e.id == expense_id:
            return e
    raise NotFoundError("Pengeluaran tidak ditemukan")


def occupied_rooms(state: GarageState) -> List[int]:
    return [c.room_number for c in state.customers]


def available_rooms(state: GarageState, total_rooms: int, current_room: Optional[int] = None) -> List[int]:
    """Rooms a form may offer: free ones plus the record's own room when editing."""
    taken = set(occupied_rooms(state))
    return [
        room for room in range(1, total_rooms + 1)
        if room not in taken or room == current_room
    ]


def check_room_available(state: GarageState, room_number: int, total_rooms: int,
                         customer_id: Optional[str] = None) -> None:
    if not 1 <= room_number <= total_rooms:
        raise ValidationError(f"Nomor room harus antara 1 dan {total_rooms}.")
    for c in state.customers:
        if c.room_number == room_number and c.id != customer_id:
            raise ValidationError(f"Room {room_number} sudah terisi oleh {c.nama}.")


def add_customer(state: GarageState, customer: Customer, total_rooms: int) -> GarageState:
    check_room_available(state, customer.room_number, total_rooms)
    return replace(state, customers=state.customers + (customer,))


def update_customer(state: GarageState, customer: Customer, total_rooms: int) -> GarageState:
    find_customer(state, customer.id)
    check_room_available(state, customer.room_number, total_rooms, customer_id=customer.id)
    customers = tuple(customer if c.id == customer.id else c for c in state.customers)
    return replace(state, customers=customers)


def delete_customer(state: GarageState, customer_id: str) -> GarageState:
    find_customer(state, customer_id)
    return replace(state, customers=tuple(c for c in state.customers if c.id != customer_id))


def add_expense(state: GarageState, expense: Expense) -> GarageState:
    return replace(state, expenses=state.expenses + (expense,))


def delete_expense(state: GarageState, expense_id: str) -> GarageState:
    find_expense(state, expense_id)
    return replace(state, expenses=tuple(e for e in state.expenses if e.id != expense_id))
