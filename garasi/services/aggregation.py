"""Dashboard figures derived from the two collections and the billing engine."""
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional

from ..config import DUE_SOON_DAYS, RECENT_EXPENSES_LIMIT, TOTAL_ROOMS
from ..models import Customer, Expense
from .billing import customer_next_due_date, days_until
from .state import GarageState


@dataclass(frozen=True)
class DueEntry:
    customer: Customer
    due_date: date
    days_left: int


@dataclass(frozen=True)
class RoomStatus:
    room_number: int
    customer: Optional[Customer] = None
    due_date: Optional[date] = None


@dataclass(frozen=True)
class DashboardSummary:
    occupied: int
    empty: int
    gross_revenue: int
    total_expenses: int
    net_revenue: int
    due_soon: List[DueEntry] = field(default_factory=list)
    recent_expenses: List[Expense] = field(default_factory=list)


def occupancy(customers: Iterable[Customer], total_rooms: int = TOTAL_ROOMS):
    occupied = len(list(customers))
    return occupied, total_rooms - occupied


def due_entries(customers: Iterable[Customer], today: date) -> List[DueEntry]:
    entries = []
    for c in customers:
        due = customer_next_due_date(c, today)
        entries.append(DueEntry(customer=c, due_date=due, days_left=days_until(due, today)))
    return entries


def due_soon(customers: Iterable[Customer], today: date, days: int = DUE_SOON_DAYS) -> List[DueEntry]:
    end = today + timedelta(days=days)
    entries = [e for e in due_entries(customers, today) if today <= e.due_date <= end]
    # sorted() is stable, ties keep collection order
    return sorted(entries, key=lambda e: e.due_date)


def gross_revenue(customers: Iterable[Customer]) -> int:
    return sum(c.harga or 0 for c in customers)


def is_same_month(d: date, today: date) -> bool:
    return d.year == today.year and d.month == today.month


def this_month_expenses(expenses: Iterable[Expense], today: date) -> List[Expense]:
    return [e for e in expenses if is_same_month(e.tanggal, today)]


def total_expenses(expenses: Iterable[Expense], today: date) -> int:
    return sum(e.harga for e in this_month_expenses(expenses, today))


def net_revenue(customers: Iterable[Customer], expenses: Iterable[Expense], today: date) -> int:
    return gross_revenue(customers) - total_expenses(expenses, today)


def recent_expenses(expenses: Iterable[Expense], limit: int = RECENT_EXPENSES_LIMIT) -> List[Expense]:
    return sorted(expenses, key=lambda e: e.tanggal, reverse=True)[:limit]


def search_customers(customers: Iterable[Customer], q: Optional[str]) -> List[Customer]:
    customers = list(customers)
    if not q or not q.strip():
        return customers
    ql = q.strip().lower()
    return [
        c for c in customers
        if ql in c.nama.lower() or ql in c.no_kendaraan.lower() or ql in str(c.room_number)
    ]


def room_grid(customers: Iterable[Customer], today: date, total_rooms: int = TOTAL_ROOMS) -> List[RoomStatus]:
    by_room = {c.room_number: c for c in customers}
    grid = []
    for room in range(1, total_rooms + 1):
        c = by_room.get(room)
        if c is None:
            grid.append(RoomStatus(room_number=room))
        else:
            grid.append(RoomStatus(room_number=room, customer=c, due_date=customer_next_due_date(c, today)))
    return grid


def build_dashboard(state: GarageState, today: date, total_rooms: int = TOTAL_ROOMS,
                    due_soon_days: int = DUE_SOON_DAYS,
                    recent_limit: int = RECENT_EXPENSES_LIMIT) -> DashboardSummary:
    occupied, empty = occupancy(state.customers, total_rooms)
    gross = gross_revenue(state.customers)
    spent = total_expenses(state.expenses, today)
    return DashboardSummary(
        occupied=occupied,
        empty=empty,
        gross_revenue=gross,
        total_expenses=spent,
        net_revenue=gross - spent,
        due_soon=due_soon(state.customers, today, due_soon_days),
        recent_expenses=recent_expenses(state.expenses, recent_limit),
    )
