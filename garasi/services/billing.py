"""Billing cycle arithmetic.

Every function takes ``today`` explicitly so one request compares all
customers against the same calendar day.
"""
import calendar
from datetime import date
from typing import Optional


def normalize_period(periode_bulan: Optional[int]) -> int:
    if not periode_bulan or periode_bulan <= 0:
        return 1
    return periode_bulan


def add_months(d: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month."""
    month = d.month - 1 + months
    year = d.year + month // 12
    month = month % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(d.day, last_day))


def next_due_date(tanggal_mulai: date, periode_bulan: Optional[int], today: date) -> date:
    """First cycle boundary on or after ``today``.

    Boundaries are counted from the start date itself (start + k * period),
    so a lease started on the 31st falls back to shorter month ends without
    drifting: Jan 31, Feb 29, Mar 31.
    """
    period = normalize_period(periode_bulan)
    candidate = tanggal_mulai
    cycles = 0
    while today > candidate:
        cycles += 1
        candidate = add_months(tanggal_mulai, cycles * period)
    return candidate


def customer_next_due_date(customer, today: date) -> date:
    return next_due_date(customer.tanggal_mulai, customer.periode_bulan, today)


def days_until(due: date, today: date) -> int:
    return (due - today).days
