import io

import cv2
import numpy as np


def create(client, payload):
    resp = client.post("/customers", json=payload)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_create_and_list_customer(client, customer_payload):
    created = create(client, customer_payload)
    assert created["nama"] == "Budi Santoso"
    assert created["noKendaraan"] == "B 1234 XYZ"
    assert created["tanggalJatuhTempo"] == "2024-02-15"
    assert created["nextDueDate"] == "2024-04-15"
    assert created["sisaHari"] == 26

    listed = client.get("/customers").get_json()
    assert [c["id"] for c in listed] == [created["id"]]
    assert client.get("/customers?q=xyz").get_json()[0]["id"] == created["id"]
    assert client.get("/customers?q=tidak-ada").get_json() == []


def test_create_customer_validation(client, customer_payload):
    customer_payload["roomNumber"] = 0
    resp = client.post("/customers", json=customer_payload)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Silakan pilih nomor room."}


def test_room_cannot_be_taken_twice(client, customer_payload):
    create(client, customer_payload)
    customer_payload["nama"] = "siti"
    resp = client.post("/customers", json=customer_payload)
    assert resp.status_code == 400
    assert "Room 5" in resp.get_json()["error"]


def test_update_and_delete_customer(client, customer_payload):
    created = create(client, customer_payload)
    customer_payload["harga"] = 2000000
    resp = client.put(f"/customers/{created['id']}", json=customer_payload)
    assert resp.status_code == 200
    assert resp.get_json()["harga"] == 2000000
    assert resp.get_json()["id"] == created["id"]

    resp = client.delete(f"/customers/{created['id']}")
    assert resp.status_code == 200
    assert client.get(f"/customers/{created['id']}").status_code == 404


def test_rooms(client, customer_payload):
    create(client, customer_payload)
    grid = client.get("/rooms").get_json()
    assert len(grid) == 30
    assert grid[4]["terisi"] is True
    assert grid[4]["nextDueDate"] == "2024-04-15"
    assert grid[0]["terisi"] is False

    available = client.get("/rooms/available").get_json()
    assert 5 not in available and len(available) == 29
    assert 5 in client.get("/rooms/available?current=5").get_json()


def test_expenses(client):
    resp = client.post("/expenses", json={"deskripsi": "bayar listrik", "harga": "200.000", "tanggal": "2024-03-02"})
    assert resp.status_code == 201
    client.post("/expenses", json={"deskripsi": "sapu", "harga": 30000, "tanggal": "2024-03-10"})

    listed = client.get("/expenses").get_json()
    assert [e["deskripsi"] for e in listed] == ["Sapu", "Bayar Listrik"]

    bad = client.post("/expenses", json={"deskripsi": "", "harga": 0, "tanggal": "2024-03-02"})
    assert bad.status_code == 400

    assert client.delete(f"/expenses/{listed[0]['id']}").status_code == 200
    assert client.delete(f"/expenses/{listed[0]['id']}").status_code == 404


def test_dashboard(client, customer_payload):
    customer_payload["tanggalMulai"] = "2024-02-25"
    create(client, customer_payload)
    client.post("/expenses", json={"deskripsi": "listrik", "harga": 2000000, "tanggal": "2024-03-02"})

    data = client.get("/dashboard").get_json()
    assert data["roomTerisi"] == 1
    assert data["roomKosong"] == 29
    assert data["akanJatuhTempo"] == 1
    assert data["dueSoon"][0]["nextDueDate"] == "2024-03-25"
    assert data["dueSoon"][0]["sisaHari"] == 5
    assert data["pendapatanKotor"] == 1500000
    assert data["pengeluaranBulanIni"] == 2000000
    assert data["pendapatanBersih"] == -500000
    assert len(data["recentExpenses"]) == 1


def test_report_download(client, customer_payload):
    create(client, customer_payload)
    resp = client.get("/report")
    assert resp.status_code == 200
    assert resp.headers["Content-Disposition"] == "attachment; filename=Laporan_Garasi_Sumber_Jaya_20240320.txt"
    body = resp.get_data(as_text=True)
    assert body.startswith("Laporan Keuangan Garasi Sumber Jaya\nBulan: Maret 2024\n")
    assert "- Budi Santoso (Room 5): Rp 1.500.000" in body
    assert client.get("/report").get_data(as_text=True) == body


def test_photo_upload(client):
    img = np.zeros((20, 40, 3), dtype=np.uint8)
    ok, buf = cv2.imencode(".png", img)
    assert ok
    resp = client.post(
        "/photos",
        data={"file": (io.BytesIO(buf.tobytes()), "mobil.png")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    assert resp.get_json()["fotoKendaraan"].startswith("data:image/jpeg;base64,")


def test_photo_upload_rejects_non_image(client):
    resp = client.post(
        "/photos",
        data={"file": (io.BytesIO(b"bukan gambar"), "mobil.png")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Gambar tidak valid"}

    resp = client.post("/photos", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "File tidak ditemukan"}

    resp = client.post(
        "/photos",
        data={"file": (io.BytesIO(b"x"), "")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Nama file kosong"}


def test_boolean_room_number_rejected(client, customer_payload):
    customer_payload["roomNumber"] = True
    resp = client.post("/customers", json=customer_payload)
    assert resp.status_code == 400
    assert client.get("/customers").get_json() == []
