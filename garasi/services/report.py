from datetime import datetime

from ..config import GARAGE_NAME
from ..utils.format import format_currency, format_date, format_month_year
from .aggregation import gross_revenue, this_month_expenses
from .state import GarageState

SEPARATOR = "=" * 41
RULE = "-" * 41


def report_filename(now: datetime, garage_name: str = GARAGE_NAME) -> str:
    prefix = "Laporan_" + "_".join(garage_name.split())
    return f"{prefix}_{now.strftime('%Y%m%d')}.txt"


def build_report(state: GarageState, now: datetime, garage_name: str = GARAGE_NAME) -> str:
    """Monthly financial report as plain text.

    The output depends only on ``state`` and ``now``, so two calls with the
    same inputs produce identical text.
    """
    today = now.date()
    expenses = this_month_expenses(state.expenses, today)
    gross = gross_revenue(state.customers)
    spent = sum(e.harga for e in expenses)

    lines = [
        f"Laporan Keuangan {garage_name}",
        f"Bulan: {format_month_year(today)}",
        SEPARATOR,
        "",
        "RINGKASAN KEUANGAN",
        RULE,
        f"Pendapatan Kotor: {format_currency(gross)}",
        f"Total Pengeluaran: {format_currency(spent)}",
        f"Pendapatan Bersih: {format_currency(gross - spent)}",
        "",
        "DETAIL PENDAPATAN (CUSTOMER AKTIF)",
        RULE,
    ]
    if state.customers:
        for c in state.customers:
            lines.append(f"- {c.nama} (Room {c.room_number}): {format_currency(c.harga)}")
    else:
        lines.append("Tidak ada customer aktif.")
    lines.append("")

    lines += ["DETAIL PENGELUARAN BULAN INI", RULE]
    if expenses:
        for e in expenses:
            lines.append(f"- {format_date(e.tanggal)}: {e.deskripsi} - {format_currency(e.harga)}")
    else:
        lines.append("Tidak ada pengeluaran bulan ini.")
    lines.append("")

    lines += [
        SEPARATOR,
        f"Laporan dibuat pada: {format_date(today)} {now.strftime('%H:%M')} WIB",
    ]
    return "\n".join(lines) + "\n"
