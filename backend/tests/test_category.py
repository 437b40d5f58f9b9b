import pytest


@pytest.fixture
def admin_headers(auth_headers, make_admin):
    make_admin("0811")
    return auth_headers


def test_category_crud(client, admin_headers):
    r = client.post("/category", follow_redirects=False, headers=admin_headers, json={"nama_category": "Buku"})
    assert r.status_code == 201
    category_id = r.json()["data"]["id"]

    r = client.put(f"/category/{category_id}", headers=admin_headers, json={"nama_category": "Novel"})
    assert r.json()["data"]["nama_category"] == "Novel"

    r = client.get(f"/category/{category_id}", headers=admin_headers)
    assert r.json()["data"] == {"id": category_id, "nama_category": "Novel"}

    assert client.delete(f"/category/{category_id}", headers=admin_headers).status_code == 200
    assert client.get(f"/category/{category_id}", headers=admin_headers).status_code == 404


def test_empty_update_keeps_name(client, admin_headers):
    category_id = client.post("/category/", headers=admin_headers, json={"nama_category": "Buku"}).json()["data"]["id"]
    r = client.put(f"/category/{category_id}", headers=admin_headers, json={"nama_category": ""})
    assert r.json()["data"]["nama_category"] == "Buku"


def test_list_categories(client, admin_headers):
    for name in ("A", "B", "C"):
        client.post("/category", follow_redirects=False, headers=admin_headers, json={"nama_category": name})
    r = client.get("/category/?page=0&limit=-5", headers=admin_headers)
    data = r.json()["data"]
    assert data["pagination"] == {"current_page": 1, "total_pages": 1, "total_items": 3, "limit": 10}


def test_non_admin_cannot_create(client, auth_headers):
    r = client.post("/category/", headers=auth_headers, json={"nama_category": "Buku"})
    assert r.status_code == 403
