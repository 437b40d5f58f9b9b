import pytest

from okefin.core.config import settings
from okefin.main import create_app


def test_app_refuses_to_start_without_jwt_secret(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", "")
    with pytest.raises(ValueError, match="JWT_SECRET"):
        create_app()


def test_collection_routes_answer_without_trailing_slash(client, auth_headers):
    for path in ("/alamat", "/toko", "/produk", "/trx", "/user"):
        r = client.get(path, follow_redirects=False, headers=auth_headers)
        assert r.status_code == 200, path
