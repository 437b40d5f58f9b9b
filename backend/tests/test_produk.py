import pytest

from okefin import models


@pytest.fixture
def produk_payload(category_id):
    return {
        "nama_produk": "Kopi Gayo",
        "harga": 15000,
        "stok": 5,
        "id_category": category_id,
        "url_fotos": ["/uploads/1.png", "/uploads/2.png"],
        "deskripsi": "Arabika",
    }


@pytest.fixture
def produk(client, auth_headers, produk_payload):
    r = client.post("/produk", follow_redirects=False, headers=auth_headers, json=produk_payload)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def logs_for(session_factory, produk_id):
    with session_factory() as session:
        return session.query(models.LogProduk).filter(
            models.LogProduk.produk_id == produk_id
        ).order_by(models.LogProduk.log_produk_id).all()


def test_create_produk(client, auth_headers, produk, session_factory):
    toko = client.get("/toko/my", headers=auth_headers).json()["data"]
    assert produk["slug"] == "kopi-gayo"
    assert produk["harga"] == 15000.0
    assert produk["toko_id"] == toko["id"]
    assert produk["url_fotos"] == ["/uploads/1.png", "/uploads/2.png"]

    logs = logs_for(session_factory, produk["id"])
    assert len(logs) == 1
    assert logs[0].harga_konsumen == "15000.00"


def test_create_produk_with_unknown_category(client, auth_headers, produk_payload):
    r = client.post("/produk/", headers=auth_headers, json={**produk_payload, "id_category": 999})
    assert r.status_code == 400
    assert r.json()["errors"] == ["invalid category ID"]


def test_create_produk_rejects_zero_stock(client, auth_headers, produk_payload):
    r = client.post("/produk/", headers=auth_headers, json={**produk_payload, "stok": 0})
    assert r.status_code == 400


def test_list_my_produk(client, auth_headers, produk):
    r = client.get("/produk", follow_redirects=False, headers=auth_headers)
    data = r.json()["data"]
    assert [p["id"] for p in data["produk"]] == [produk["id"]]
    assert data["pagination"]["total_items"] == 1


def test_partial_update_keeps_other_fields(client, auth_headers, produk, session_factory):
    r = client.put(f"/produk/{produk['id']}", headers=auth_headers, json={"nama_produk": "Kopi Toraja", "stok": 0})
    data = r.json()["data"]
    assert data["nama_produk"] == "Kopi Toraja"
    assert data["slug"] == "kopi-toraja"
    assert data["stok"] == 5
    assert data["harga"] == 15000.0
    assert len(logs_for(session_factory, produk["id"])) == 2


def test_update_replaces_all_photos(client, auth_headers, produk):
    r = client.put(f"/produk/{produk['id']}", headers=auth_headers, json={"url_fotos": ["/uploads/3.png"]})
    assert r.json()["data"]["url_fotos"] == ["/uploads/3.png"]

    r = client.get(f"/produk/{produk['id']}", headers=auth_headers)
    assert r.json()["data"]["url_fotos"] == ["/uploads/3.png"]


def test_delete_produk_keeps_snapshot(client, auth_headers, produk, session_factory):
    r = client.delete(f"/produk/{produk['id']}", headers=auth_headers)
    assert r.status_code == 200
    assert client.get(f"/produk/{produk['id']}", headers=auth_headers).status_code == 404

    assert len(logs_for(session_factory, produk["id"])) == 2
    with session_factory() as session:
        assert session.query(models.FotoProduk).count() == 0


def test_produk_of_other_toko_is_not_found(client, register_user, login, produk):
    register_user(no_telp="0822", email="b@x.com")
    other = login(no_telp="0822")

    assert client.get(f"/produk/{produk['id']}", headers=other).status_code == 404
    assert client.put(f"/produk/{produk['id']}", headers=other, json={"stok": 1}).status_code == 404
    assert client.delete(f"/produk/{produk['id']}", headers=other).status_code == 404
