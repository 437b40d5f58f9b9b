import pytest

from okefin import models
from okefin.repositories import ProdukRepository


@pytest.fixture
def produk(client, auth_headers, category_id):
    r = client.post("/produk/", headers=auth_headers, json={
        "nama_produk": "Kopi Gayo",
        "harga": 10000,
        "stok": 5,
        "id_category": category_id,
        "url_fotos": ["/uploads/1.png"],
        "deskripsi": "Arabika",
    })
    return r.json()["data"]


@pytest.fixture
def buyer(client, register_user, login):
    register_user(no_telp="0822", email="b@x.com", nama="Budi")
    headers = login(no_telp="0822")
    r = client.post("/alamat/", headers=headers, json={
        "judul_alamat": "Rumah",
        "nama_penerima": "Budi",
        "no_telp": "0822",
        "detail_alamat": "Jl. Sudirman 2",
    })
    return headers, r.json()["data"]["id"]


def order_payload(alamat_id, produk_id, jumlah=2, harga=10000, total=None):
    return {
        "alamat_id": alamat_id,
        "total_harga": harga * jumlah if total is None else total,
        "details": [{"produk_id": produk_id, "jumlah": jumlah, "harga": harga}],
    }


def stock_of(session_factory, produk_id):
    with session_factory() as session:
        return session.query(models.Produk).filter(models.Produk.produk_id == produk_id).one().stok


def trx_count(session_factory):
    with session_factory() as session:
        return session.query(models.Trx).count(), session.query(models.DetailTrx).count()


def test_place_order_from_another_users_toko(client, produk, buyer, session_factory):
    headers, alamat_id = buyer
    r = client.post("/trx", follow_redirects=False, headers=headers, json=order_payload(alamat_id, produk["id"]))
    assert r.status_code == 201, r.text

    data = r.json()["data"]
    assert data["kode_invoice"].startswith("INV-")
    assert data["status"] == "pending"
    assert data["total_harga"] == 20000
    assert data["details"][0]["nama_produk"] == "Kopi Gayo"
    assert data["details"][0]["toko_id"] == produk["toko_id"]
    assert data["details"][0]["harga"] == 10000
    assert data["details"][0]["harga_total"] == 20000
    assert stock_of(session_factory, produk["id"]) == 3


def test_total_mismatch_leaves_nothing(client, produk, buyer, session_factory):
    headers, alamat_id = buyer
    r = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], total=19999))
    assert r.status_code == 400
    assert r.json()["errors"] == ["total harga does not match sum of detail harga"]
    assert trx_count(session_factory) == (0, 0)
    assert stock_of(session_factory, produk["id"]) == 5


def test_insufficient_stock_rolls_back(client, produk, buyer, session_factory):
    headers, alamat_id = buyer
    r = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], jumlah=6))
    assert r.status_code == 400
    assert r.json()["errors"] == [f"insufficient stock for produk ID {produk['id']}"]
    assert trx_count(session_factory) == (0, 0)
    assert stock_of(session_factory, produk["id"]) == 5


def test_second_line_failure_rolls_back_first_line(client, produk, buyer, session_factory):
    headers, alamat_id = buyer
    payload = {
        "alamat_id": alamat_id,
        "total_harga": 20000 + 10000,
        "details": [
            {"produk_id": produk["id"], "jumlah": 2, "harga": 10000},
            {"produk_id": 999, "jumlah": 1, "harga": 10000},
        ],
    }
    r = client.post("/trx/", headers=headers, json=payload)
    assert r.status_code == 404
    assert trx_count(session_factory) == (0, 0)
    assert stock_of(session_factory, produk["id"]) == 5


def test_order_with_foreign_alamat(client, auth_headers, produk, buyer):
    _, alamat_id = buyer
    r = client.post("/trx/", headers=auth_headers, json=order_payload(alamat_id, produk["id"]))
    assert r.status_code == 404


def test_order_survives_produk_deletion(client, auth_headers, produk, buyer):
    headers, alamat_id = buyer
    trx_id = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"])).json()["data"]["id"]
    client.delete(f"/produk/{produk['id']}", headers=auth_headers)

    r = client.get(f"/trx/{trx_id}", headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["details"][0]["nama_produk"] == "Kopi Gayo"


def test_list_and_get_own_orders(client, auth_headers, produk, buyer):
    headers, alamat_id = buyer
    trx_id = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], jumlah=1)).json()["data"]["id"]

    data = client.get("/trx", follow_redirects=False, headers=headers).json()["data"]
    assert [t["id"] for t in data["transaksi"]] == [trx_id]
    assert data["pagination"]["total_items"] == 1

    assert client.get(f"/trx/{trx_id}", headers=auth_headers).status_code == 404


def test_status_transitions(client, produk, buyer):
    headers, alamat_id = buyer
    trx_id = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], jumlah=1)).json()["data"]["id"]

    r = client.put(f"/trx/{trx_id}", headers=headers, json={"status": "pending"})
    assert r.status_code == 200

    r = client.put(f"/trx/{trx_id}", headers=headers, json={"status": "completed"})
    assert r.json()["data"]["status"] == "completed"

    r = client.put(f"/trx/{trx_id}", headers=headers, json={"status": "cancelled"})
    assert r.status_code == 400
    assert r.json()["errors"] == ["cannot change status from completed to cancelled"]


def test_unknown_status_is_rejected(client, produk, buyer):
    headers, alamat_id = buyer
    trx_id = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], jumlah=1)).json()["data"]["id"]
    r = client.put(f"/trx/{trx_id}", headers=headers, json={"status": "shipped"})
    assert r.status_code == 400


def test_stock_taken_by_concurrent_order_rolls_back(client, produk, buyer, session_factory, monkeypatch):
    headers, alamat_id = buyer
    decrement_stock = ProdukRepository.decrement_stock

    def sold_out_meanwhile(self, db, produk_id, jumlah):
        db.query(models.Produk).filter(models.Produk.produk_id == produk_id).update(
            {models.Produk.stok: 1}, synchronize_session="fetch"
        )
        return decrement_stock(self, db, produk_id, jumlah)

    monkeypatch.setattr(ProdukRepository, "decrement_stock", sold_out_meanwhile)
    r = client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], jumlah=2))
    assert r.status_code == 400
    assert r.json()["errors"] == [f"insufficient stock for produk ID {produk['id']}"]
    assert trx_count(session_factory) == (0, 0)
    assert stock_of(session_factory, produk["id"]) == 5


def test_alamat_used_by_order_cannot_be_deleted(client, produk, buyer, session_factory):
    headers, alamat_id = buyer
    client.post("/trx/", headers=headers, json=order_payload(alamat_id, produk["id"], jumlah=1))

    r = client.delete(f"/alamat/{alamat_id}", headers=headers)
    assert r.status_code == 409
    assert r.json()["errors"] == ["alamat is used by a transaksi"]
    assert client.get(f"/alamat/{alamat_id}", headers=headers).status_code == 200
    assert trx_count(session_factory) == (1, 1)
