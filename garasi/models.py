from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from .errors import ValidationError
from .services.billing import add_months, normalize_period
from .utils.format import capitalize_words, parse_amount


REQUIRED_CUSTOMER_FIELDS = {
    "nama": "Nama customer",
    "noHP": "No. HP",
    "jenisMobil": "Jenis mobil",
    "noKendaraan": "No. kendaraan",
}


def parse_date(value: Any) -> date:
    """Accept a date, ``YYYY-MM-DD`` or any ISO datetime string (date part only)."""
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValidationError("Tanggal tidak boleh kosong.")
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValidationError(f"Format tanggal tidak valid: {value}")


def _parse_int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Nilai angka tidak valid: {value}")
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Nilai angka tidak valid: {value}")


@dataclass(frozen=True)
class Customer:
    id: str
    nama: str
    no_hp: str
    jenis_mobil: str
    no_kendaraan: str
    room_number: int
    tanggal_mulai: date
    periode_bulan: int
    tanggal_jatuh_tempo: date
    harga: int
    foto_kendaraan: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nama": self.nama,
            "noHP": self.no_hp,
            "jenisMobil": self.jenis_mobil,
            "noKendaraan": self.no_kendaraan,
            "roomNumber": self.room_number,
            "tanggalMulai": self.tanggal_mulai.isoformat(),
            "periodeBulan": self.periode_bulan,
            "tanggalJatuhTempo": self.tanggal_jatuh_tempo.isoformat(),
            "harga": self.harga,
            "fotoKendaraan": self.foto_kendaraan,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        tanggal_mulai = parse_date(data["tanggalMulai"])
        periode = _parse_int(data.get("periodeBulan"), default=1)
        jatuh_tempo = data.get("tanggalJatuhTempo")
        return cls(
            id=str(data["id"]),
            nama=data.get("nama", ""),
            no_hp=data.get("noHP", ""),
            jenis_mobil=data.get("jenisMobil", ""),
            no_kendaraan=data.get("noKendaraan", ""),
            room_number=_parse_int(data.get("roomNumber")),
            tanggal_mulai=tanggal_mulai,
            periode_bulan=periode,
            tanggal_jatuh_tempo=(
                parse_date(jatuh_tempo) if jatuh_tempo
                else add_months(tanggal_mulai, normalize_period(periode))
            ),
            harga=parse_amount(data.get("harga")),
            foto_kendaraan=data.get("fotoKendaraan") or "",
        )


@dataclass(frozen=True)
class Expense:
    id: str
    deskripsi: str
    harga: int
    tanggal: date

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "deskripsi": self.deskripsi,
            "harga": self.harga,
            "tanggal": self.tanggal.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Expense":
        return cls(
            id=str(data["id"]),
            deskripsi=data.get("deskripsi", ""),
            harga=parse_amount(data.get("harga")),
            tanggal=parse_date(data["tanggal"]),
        )


def customer_from_payload(payload: Dict[str, Any], customer_id: str,
                          total_rooms: int, previous: Optional[Customer] = None) -> Customer:
    """Validate and normalise a submitted customer form.

    Names and car types are title-cased, the plate is upper-cased and the
    period falls back to one month. ``tanggalJatuhTempo`` is the first due
    date snapshot: kept from ``previous`` unless the start or period changed.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Data customer tidak valid.")

    for field, label in REQUIRED_CUSTOMER_FIELDS.items():
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{label} tidak boleh kosong.")

    room_number = _parse_int(payload.get("roomNumber"))
    if room_number == 0:
        raise ValidationError("Silakan pilih nomor room.")
    if not 1 <= room_number <= total_rooms:
        raise ValidationError(f"Nomor room harus antara 1 dan {total_rooms}.")

    harga = parse_amount(payload.get("harga"))
    if harga <= 0:
        raise ValidationError("Harga harus lebih dari 0.")

    tanggal_mulai = parse_date(payload.get("tanggalMulai"))
    periode = normalize_period(_parse_int(payload.get("periodeBulan"), default=1))

    if (previous is not None and previous.tanggal_mulai == tanggal_mulai
            and previous.periode_bulan == periode):
        jatuh_tempo = previous.tanggal_jatuh_tempo
    else:
        jatuh_tempo = add_months(tanggal_mulai, periode)

    foto = payload.get("fotoKendaraan")
    if foto is None and previous is not None:
        foto = previous.foto_kendaraan

    return Customer(
        id=customer_id,
        nama=capitalize_words(payload["nama"].strip()),
        no_hp=payload["noHP"].strip(),
        jenis_mobil=capitalize_words(payload["jenisMobil"].strip()),
        no_kendaraan=payload["noKendaraan"].strip().upper(),
        room_number=room_number,
        tanggal_mulai=tanggal_mulai,
        periode_bulan=periode,
        tanggal_jatuh_tempo=jatuh_tempo,
        harga=harga,
        foto_kendaraan=foto or "",
    )


def expense_from_payload(payload: Dict[str, Any], expense_id: str) -> Expense:
    if not isinstance(payload, dict):
        raise ValidationError("Data pengeluaran tidak valid.")

    deskripsi = payload.get("deskripsi")
    harga = parse_amount(payload.get("harga"))
    tanggal = payload.get("tanggal")
    if not isinstance(deskripsi, str) or not deskripsi.strip() or harga <= 0 or not tanggal:
        raise ValidationError("Deskripsi, tanggal, dan harga pengeluaran tidak boleh kosong.")

    return Expense(
        id=expense_id,
        deskripsi=capitalize_words(deskripsi.strip()),
        harga=harga,
        tanggal=parse_date(tanggal),
    )
