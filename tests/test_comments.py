import pytest

from app.models.comment import Comment
from app.models.user import User
from conftest import auth_header, create_point


@pytest.fixture()
def point_id(client, ana_token):
    return create_point(client, ana_token).json()["id"]


def post_comment(client, token, point_id, rating, body=None):
    payload = {"punto_id": point_id, "calificacion": rating}
    if body is not None:
        payload["comentario"] = body
    return client.post("/comentarios", json=payload, headers=auth_header(token))


def test_create_comment_returns_aggregate(client, beto_token, point_id):
    resp = post_comment(client, beto_token, point_id, 4, "bien")
    assert resp.status_code == 201
    data = resp.json()
    assert data["comment"]["comentario"] == "bien"
    assert data["comment"]["calificacion"] == 4
    assert data["comment"]["autor_nombre"] == "Beto"
    assert data["comment"]["punto_id"] == point_id
    assert data["rating"] == {"average_rating": 4.0, "comment_count": 1}


def test_aggregate_follows_every_comment(client, ana_token, beto_token, point_id):
    ratings = [5, 4, 4]
    for i, r in enumerate(ratings):
        token = ana_token if i % 2 else beto_token
        post_comment(client, token, point_id, r)
    point = client.get(f"/puntos/{point_id}").json()
    assert point["average_rating"] == round(sum(ratings) / len(ratings), 2)
    assert point["comment_count"] == len(ratings)


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_rating_out_of_range(client, beto_token, point_id, db_session, rating):
    resp = post_comment(client, beto_token, point_id, rating)
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert db_session.query(Comment).count() == 0


def test_rating_required(client, beto_token, point_id):
    resp = client.post("/comentarios", json={"punto_id": point_id}, headers=auth_header(beto_token))
    assert resp.status_code == 400


def test_point_id_required(client, beto_token):
    resp = client.post("/comentarios", json={"calificacion": 3}, headers=auth_header(beto_token))
    assert resp.status_code == 400


def test_comment_on_missing_point(client, beto_token):
    resp = post_comment(client, beto_token, 999, 3)
    assert resp.status_code == 404


def test_comment_requires_token(client, point_id):
    resp = client.post("/comentarios", json={"punto_id": point_id, "calificacion": 3})
    assert resp.status_code == 401


def test_list_comments_newest_first(client, beto_token, point_id):
    post_comment(client, beto_token, point_id, 5, "primero")
    post_comment(client, beto_token, point_id, 3, "segundo")
    resp = client.get(f"/comentarios/{point_id}")
    assert resp.status_code == 200
    assert [c["comentario"] for c in resp.json()] == ["segundo", "primero"]
    assert all(c["autor_nombre"] == "Beto" for c in resp.json())


def test_list_comments_for_missing_point(client):
    assert client.get("/comentarios/999").status_code == 404


def test_deleting_only_comment_resets_aggregate(client, beto_token, point_id):
    comment_id = post_comment(client, beto_token, point_id, 2).json()["comment"]["id"]
    resp = client.delete(f"/comentarios/{comment_id}", headers=auth_header(beto_token))
    assert resp.status_code == 200
    assert resp.json()["punto_id"] == point_id
    assert resp.json()["rating"] == {"average_rating": 0, "comment_count": 0}
    point = client.get(f"/puntos/{point_id}").json()
    assert point["average_rating"] == 0
    assert point["comment_count"] == 0


def test_delete_comment_recomputes_aggregate(client, beto_token, point_id):
    first = post_comment(client, beto_token, point_id, 5).json()["comment"]["id"]
    post_comment(client, beto_token, point_id, 2)
    resp = client.delete(f"/comentarios/{first}", headers=auth_header(beto_token))
    assert resp.json()["rating"] == {"average_rating": 2.0, "comment_count": 1}


def test_delete_other_users_comment_is_forbidden(client, ana_token, beto_token, point_id):
    comment_id = post_comment(client, beto_token, point_id, 4).json()["comment"]["id"]
    resp = client.delete(f"/comentarios/{comment_id}", headers=auth_header(ana_token))
    assert resp.status_code == 403
    assert len(client.get(f"/comentarios/{point_id}").json()) == 1


def test_delete_missing_comment(client, beto_token):
    resp = client.delete("/comentarios/999", headers=auth_header(beto_token))
    assert resp.status_code == 404


def test_invalid_comment_text_names_the_field(client, beto_token, point_id):
    resp = client.post(
        "/comentarios",
        json={"punto_id": point_id, "calificacion": 3, "comentario": 123},
        headers=auth_header(beto_token),
    )
    assert resp.status_code == 400
    assert resp.json()["error"].startswith("comentario: ")


def test_comment_by_deleted_user_is_not_found(client, beto_token, point_id, db_session):
    db_session.query(User).filter(User.email == "beto@x.com").delete()
    db_session.commit()
    resp = post_comment(client, beto_token, point_id, 4)
    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}
    assert db_session.query(Comment).count() == 0
