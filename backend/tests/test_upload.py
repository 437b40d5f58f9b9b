def test_upload_then_serve(client, auth_headers):
    r = client.post(
        "/upload",
        headers=auth_headers,
        files={"file": ("foto.png", b"png-bytes", "image/png")},
    )
    assert r.status_code == 200, r.text
    url = r.json()["data"]["url"]
    assert url.startswith("/uploads/")
    assert url.endswith(".png")

    served = client.get(url)
    assert served.status_code == 200
    assert served.content == b"png-bytes"


def test_upload_requires_token(client):
    r = client.post("/upload", files={"file": ("foto.png", b"png-bytes", "image/png")})
    assert r.status_code == 401


def test_upload_requires_file(client, auth_headers):
    r = client.post("/upload", headers=auth_headers, data={})
    assert r.status_code == 400


def test_welcome(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.text == "Welcome to Okefin-Service!"
