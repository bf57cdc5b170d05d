import json

import pytest
from jinja2 import DictLoader, Environment

from auteur.app import create_app, main
from auteur.handlers import AppState
from auteur.store import MemoryPostStore

PAGE = "<h1>{{ page.heading }}</h1><p>{{ page.message }}</p>"


@pytest.fixture
def state():
    env = Environment(
        loader=DictLoader(
            {
                "index.html": PAGE,
                "mario/index.html": PAGE,
                "admin/posts/[id].html": "{{ page.form_name }}",
            }
        )
    )
    return AppState(templates=env, db=MemoryPostStore())


@pytest.fixture
def client(state, tmp_path):
    (tmp_path / "style.css").write_text("body { color: red; }")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "index.html").write_text("<p>hidden</p>")
    return create_app(state, tmp_path).test_client()


def test_hello_route(client):
    res = client.get("/api/hello")
    assert res.status_code == 200
    assert res.get_json()["message"] == "hello_JSON from api_handler"


def test_index_route(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "Welcome to Auteur.Engineer" in res.get_data(as_text=True)


def test_mario_route(client):
    res = client.get("/mario")
    assert "Click on the Mario Coin Box" in res.get_data(as_text=True)


def test_admin_route(client):
    res = client.get("/admin/posts/1234")
    assert res.status_code == 200
    assert res.get_data(as_text=True) == "Post"


def test_static_file_served(client):
    res = client.get("/style.css")
    assert res.status_code == 200
    assert res.get_data(as_text=True) == "body { color: red; }"


def test_missing_static_file(client):
    assert client.get("/missing.css").status_code == 404


def test_directory_has_no_index(client):
    assert client.get("/sub").status_code == 404
    assert client.get("/sub/index.html").status_code == 200


def test_posts_empty(client):
    res = client.get("/api/posts")
    assert res.status_code == 200
    assert res.get_json() == []


def test_create_post_requires_json_content_type(client):
    res = client.post("/api/posts", data="title")
    assert res.status_code == 415


def test_create_post_rejects_bad_json(client):
    res = client.post("/api/posts", data="{", content_type="application/json")
    assert res.status_code == 400


def test_create_post_rejects_wrong_shape(client):
    res = client.post("/api/posts", json={"nope": 1})
    assert res.status_code == 422


def test_create_post_stores_record(client, state):
    res = client.post("/api/posts", json={"title": "Hello"})
    assert res.status_code == 500
    assert "error" in json.loads(res.get_data(as_text=True))
    assert [r["title"] for r in state.db.select("posts")] == ["Hello"]


def test_main_fails_on_broken_template(tmp_path, capsys):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "bad.html").write_text("{% if %}")
    code = main(["--templates", str(templates), "--public", str(tmp_path)])
    assert code == 1
    assert "FATAL" in capsys.readouterr().err