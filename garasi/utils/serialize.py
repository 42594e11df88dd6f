from datetime import date
from typing import Any, Dict

from ..models import Customer
from ..services.aggregation import DashboardSummary, DueEntry, RoomStatus
from ..services.billing import customer_next_due_date, days_until
from .format import format_currency, format_date


def customer_out(c: Customer, today: date) -> Dict[str, Any]:
    due = customer_next_due_date(c, today)
    data = c.to_dict()
    data["nextDueDate"] = due.isoformat()
    data["sisaHari"] = days_until(due, today)
    data["hargaFormatted"] = format_currency(c.harga)
    return data


def due_entry_out(e: DueEntry) -> Dict[str, Any]:
    return {
        "id": e.customer.id,
        "nama": e.customer.nama,
        "roomNumber": e.customer.room_number,
        "nextDueDate": e.due_date.isoformat(),
        "nextDueDateFormatted": format_date(e.due_date),
        "sisaHari": e.days_left,
    }


def room_out(r: RoomStatus) -> Dict[str, Any]:
    if r.customer is None:
        return {"roomNumber": r.room_number, "terisi": False, "customer": None}
    return {
        "roomNumber": r.room_number,
        "terisi": True,
        "customer": {
            "id": r.customer.id,
            "nama": r.customer.nama,
            "jenisMobil": r.customer.jenis_mobil,
            "noKendaraan": r.customer.no_kendaraan,
        },
        "nextDueDate": r.due_date.isoformat(),
    }


def dashboard_out(s: DashboardSummary) -> Dict[str, Any]:
    return {
        "roomTerisi": s.occupied,
        "roomKosong": s.empty,
        "akanJatuhTempo": len(s.due_soon),
        "pendapatanKotor": s.gross_revenue,
        "pengeluaranBulanIni": s.total_expenses,
        "pendapatanBersih": s.net_revenue,
        "dueSoon": [due_entry_out(e) for e in s.due_soon],
        "recentExpenses": [e.to_dict() for e in s.recent_expenses],
    }
