import re
from datetime import date
from typing import Union


BULAN = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]


def format_currency(amount: int) -> str:
    """Rupiah without fraction, dot as thousands separator: ``Rp 1.500.000``."""
    digits = f"{abs(int(amount)):,}".replace(",", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {digits}"


def format_date(d: date) -> str:
    return f"{d.day:02d} {BULAN[d.month - 1]} {d.year}"


def format_month_year(d: date) -> str:
    return f"{BULAN[d.month - 1]} {d.year}"


def capitalize_words(text: str) -> str:
    if not text:
        return ""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text.lower())


def parse_amount(value: Union[int, float, str, None]) -> int:
    # "Rp 1.500.000" -> 1500000
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    digits = re.sub(r"[^0-9]", "", str(value))
    return int(digits) if digits else 0
