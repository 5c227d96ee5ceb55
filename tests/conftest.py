import os

# app 모듈 import 전에 설정 (Settings는 최초 1회만 로드)
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("RUN_MIGRATIONS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import get_db
from app.main import app
from app.models import Base


@pytest.fixture()
def engine():
    # 인메모리 SQLite: 커넥션 하나를 공유해야 테이블이 유지됨
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )

    @event.listens_for(eng, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, name="Ana", email="ana@x.com", password="secret1"):
    return client.post("/auth/register", json={"nombre": name, "email": email, "password": password})


def login(client, email="ana@x.com", password="secret1") -> str:
    resp = client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["token"]


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def ana_token(client):
    register(client, "Ana", "ana@x.com", "secret1")
    return login(client, "ana@x.com", "secret1")


@pytest.fixture()
def beto_token(client):
    register(client, "Beto", "beto@x.com", "secret2")
    return login(client, "beto@x.com", "secret2")


def create_point(client, token, **overrides):
    body = {"nombre": "Punto Centro", "tipo_residuo": "Vidrio", "lat": -33.45, "lon": -70.66}
    body.update(overrides)
    return client.post("/puntos", json=body, headers=auth_header(token))
