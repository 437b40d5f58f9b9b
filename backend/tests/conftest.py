import os
import tempfile

# Must be configured before okefin is imported: settings are read at import time
_TMP_DIR = tempfile.mkdtemp(prefix="okefin-tests-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from okefin import models
from okefin.api import deps
from okefin.database.database import enable_sqlite_foreign_keys
from okefin.main import app
from okefin.models import Base
from okefin.services.wilayah_service import WilayahService

PROVINCES = {"11": "ACEH"}
CITIES = {"1101": ("11", "KABUPATEN SIMEULUE")}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def stub_wilayah(monkeypatch):
    def fake_fetch(self, path):
        kind, _, filename = path.partition("/")
        region_id = filename.replace(".json", "")
        if kind == "province" and region_id in PROVINCES:
            return {"id": region_id, "name": PROVINCES[region_id]}
        if kind == "regency" and region_id in CITIES:
            province_id, name = CITIES[region_id]
            return {"id": region_id, "province_id": province_id, "name": name}
        return None

    monkeypatch.setattr(WilayahService, "_fetch", fake_fetch)


@pytest.fixture
def client(session_factory, stub_wilayah):
    def override_get_db():
        with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def registration_payload(**overrides):
    payload = {
        "nama": "Ana",
        "kata_sandi": "secret1",
        "no_telp": "0811",
        "tanggal_lahir": "2000-01-01",
        "pekerjaan": "eng",
        "email": "a@x.com",
        "id_provinsi": "11",
        "id_kota": "1101",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def register_user(client):
    def _register(**overrides):
        payload = registration_payload(**overrides)
        response = client.post("/auth/register", json=payload)
        assert response.status_code == 200, response.text
        return payload, response.json()["data"]
    return _register


@pytest.fixture
def login(client):
    def _login(no_telp="0811", kata_sandi="secret1"):
        response = client.post("/auth/login", json={"no_telp": no_telp, "kata_sandi": kata_sandi})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}
    return _login


@pytest.fixture
def auth_headers(register_user, login):
    register_user()
    return login()


@pytest.fixture
def make_admin(session_factory):
    def _make_admin(no_telp):
        with session_factory() as session:
            user = session.query(models.User).filter(models.User.no_telp == no_telp).one()
            user.is_admin = True
            session.commit()
    return _make_admin


@pytest.fixture
def category_id(session_factory):
    with session_factory() as session:
        category = models.Category(nama_category="Elektronik")
        session.add(category)
        session.commit()
        return category.category_id
