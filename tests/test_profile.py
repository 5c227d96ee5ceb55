from app.models.user import User
from conftest import auth_header, create_point


def test_me_returns_user_and_own_points(client, ana_token, beto_token):
    create_point(client, ana_token, nombre="De Ana")
    create_point(client, beto_token, nombre="De Beto")
    resp = client.get("/me", headers=auth_header(ana_token))
    assert resp.status_code == 200
    data = resp.json()
    assert data["usuario"]["email"] == "ana@x.com"
    assert "password" not in data["usuario"]
    assert [p["nombre"] for p in data["puntos"]] == ["De Ana"]
    assert data["puntos"][0]["comment_count"] == 0


def test_me_for_deleted_user_is_not_found(client, ana_token, db_session):
    db_session.query(User).filter(User.email == "ana@x.com").delete()
    db_session.commit()
    resp = client.get("/me", headers=auth_header(ana_token))
    assert resp.status_code == 404


def test_my_comments_include_point_name(client, ana_token, beto_token):
    point_id = create_point(client, ana_token, nombre="Punto Verde").json()["id"]
    client.post("/comentarios", json={"punto_id": point_id, "calificacion": 5, "comentario": "uno"}, headers=auth_header(beto_token))
    client.post("/comentarios", json={"punto_id": point_id, "calificacion": 3, "comentario": "dos"}, headers=auth_header(beto_token))
    client.post("/comentarios", json={"punto_id": point_id, "calificacion": 1}, headers=auth_header(ana_token))

    resp = client.get("/mis-comentarios", headers=auth_header(beto_token))
    assert resp.status_code == 200
    comments = resp.json()
    assert [c["comentario"] for c in comments] == ["dos", "uno"]
    assert all(c["punto_nombre"] == "Punto Verde" for c in comments)


def test_my_comments_requires_token(client):
    assert client.get("/mis-comentarios").status_code == 401
