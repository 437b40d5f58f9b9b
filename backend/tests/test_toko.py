def test_my_toko_is_the_registration_store(client, auth_headers):
    r = client.get("/toko/my", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["nama_toko"] == "Toko Ana"


def test_toko_of_other_user_is_denied(client, register_user, login, auth_headers):
    toko_id = client.get("/toko/my", headers=auth_headers).json()["data"]["id"]
    register_user(no_telp="0822", email="b@x.com")
    other = login(no_telp="0822")

    r = client.get(f"/toko/{toko_id}", headers=other)
    assert r.status_code == 404
    assert r.json()["errors"] == ["access denied"]
    assert client.put(f"/toko/{toko_id}", headers=other, json={"nama_toko": "x"}).status_code == 404


def test_update_toko(client, auth_headers):
    toko_id = client.get("/toko/my", headers=auth_headers).json()["data"]["id"]
    r = client.put(f"/toko/{toko_id}", headers=auth_headers, json={"url_foto": "/uploads/1.png"})
    data = r.json()["data"]
    assert data["nama_toko"] == "Toko Ana"
    assert data["url_foto"] == "/uploads/1.png"


def test_create_and_list_toko(client, auth_headers):
    r = client.post("/toko", follow_redirects=False, headers=auth_headers, json={"nama_toko": "Cabang"})
    assert r.status_code == 201

    r = client.get("/toko", follow_redirects=False, headers=auth_headers)
    data = r.json()["data"]
    assert [t["nama_toko"] for t in data["toko"]] == ["Toko Ana", "Cabang"]
    assert data["pagination"]["total_items"] == 2


def test_delete_toko(client, auth_headers):
    toko_id = client.post("/toko/", headers=auth_headers, json={"nama_toko": "Cabang"}).json()["data"]["id"]
    assert client.delete(f"/toko/{toko_id}", headers=auth_headers).status_code == 200
    assert client.get(f"/toko/{toko_id}", headers=auth_headers).status_code == 404
