import pytest

ALAMAT = {
    "judul_alamat": "Rumah",
    "nama_penerima": "Ana",
    "no_telp": "0811",
    "detail_alamat": "Jl. Merdeka 1",
}


@pytest.fixture
def other_headers(register_user, login):
    register_user(no_telp="0822", email="b@x.com")
    return login(no_telp="0822")


def test_create_and_get_alamat(client, auth_headers):
    r = client.post("/alamat", follow_redirects=False, headers=auth_headers, json=ALAMAT)
    assert r.status_code == 201
    alamat_id = r.json()["data"]["id"]

    r = client.get(f"/alamat/{alamat_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["detail_alamat"] == "Jl. Merdeka 1"


def test_create_alamat_requires_fields(client, auth_headers):
    r = client.post("/alamat/", headers=auth_headers, json={"judul_alamat": "Rumah"})
    assert r.status_code == 400


def test_list_my_alamat(client, auth_headers, other_headers):
    for i in range(3):
        client.post("/alamat/", headers=auth_headers, json={**ALAMAT, "judul_alamat": f"A{i}"})
    client.post("/alamat/", headers=other_headers, json=ALAMAT)

    r = client.get("/alamat/my?limit=2", headers=auth_headers)
    data = r.json()["data"]
    assert [a["judul_alamat"] for a in data["alamat"]] == ["A0", "A1"]
    assert data["pagination"]["total_items"] == 3
    assert data["pagination"]["total_pages"] == 2


def test_alamat_of_other_user_is_not_found(client, auth_headers, other_headers):
    alamat_id = client.post("/alamat/", headers=auth_headers, json=ALAMAT).json()["data"]["id"]

    assert client.get(f"/alamat/{alamat_id}", headers=other_headers).status_code == 404
    assert client.put(f"/alamat/{alamat_id}", headers=other_headers, json={"judul_alamat": "x"}).status_code == 404
    assert client.delete(f"/alamat/{alamat_id}", headers=other_headers).status_code == 404


def test_update_alamat_is_partial(client, auth_headers):
    alamat_id = client.post("/alamat/", headers=auth_headers, json=ALAMAT).json()["data"]["id"]
    r = client.put(f"/alamat/{alamat_id}", headers=auth_headers, json={"judul_alamat": "Kantor", "no_telp": ""})
    data = r.json()["data"]
    assert data["judul_alamat"] == "Kantor"
    assert data["no_telp"] == "0811"


def test_delete_alamat(client, auth_headers):
    alamat_id = client.post("/alamat/", headers=auth_headers, json=ALAMAT).json()["data"]["id"]
    r = client.delete(f"/alamat/{alamat_id}", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"] is None
    assert client.get(f"/alamat/{alamat_id}", headers=auth_headers).status_code == 404
