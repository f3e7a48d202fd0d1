import pytest

from slugkit import create_app


class FailingRepo:
    def exists(self, table, column, candidate, exclude_key=None):
        raise RuntimeError("bigquery down")


@pytest.fixture
def app(memory_repo):
    return create_app(
        {"SLUG_BACKEND": "memory", "SLUG_PRESERVE_ORIGINAL": False, "SLUG_USE_INTL": False},
        repo=memory_repo,
    )


@pytest.fixture
def client(app):
    return app.test_client()


def test_health(client):
    assert client.get("/health").get_json() == {"ok": True}


def test_generate(client):
    res = client.post("/slugs", json={"text": "Hello, World!"})
    assert res.status_code == 200
    assert res.get_json() == {"ok": True, "slug": "hello-world"}


def test_generate_preserve_flag(client):
    res = client.post("/slugs", json={"text": "Café Français", "preserve_original": True})
    assert res.get_json()["slug"] == "Café-Français"


def test_generate_requires_text(client):
    res = client.post("/slugs", json={})
    assert res.status_code == 400
    assert res.get_json()["ok"] is False


def test_generate_rejects_empty_separator(client):
    res = client.post("/slugs", json={"text": "a b", "separator": ""})
    assert res.status_code == 400


def test_generate_unique(client, memory_repo):
    memory_repo.add("posts", "slug", "hello-world", key=1)
    res = client.post("/slugs/unique", json={"text": "Hello World", "table": "posts"})
    assert res.get_json() == {"ok": True, "slug": "hello-world-1"}

    res = client.post("/slugs/unique", json={"text": "Hello World", "table": "posts", "exclude_key": 1})
    assert res.get_json()["slug"] == "hello-world"


def test_generate_unique_requires_table(client):
    res = client.post("/slugs/unique", json={"text": "x"})
    assert res.status_code == 400


def test_generate_unique_store_failure_is_500():
    app = create_app({"SLUG_BACKEND": "memory"}, repo=FailingRepo())
    res = app.test_client().post("/slugs/unique", json={"text": "x", "table": "posts"})
    assert res.status_code == 500
    assert "bigquery down" in res.get_json()["error"]


def test_generate_unique_exhausted_is_409():
    class AlwaysTaken:
        def exists(self, *a, **kw):
            return True

    app = create_app({"SLUG_MAX_ATTEMPTS": 2, "SLUG_RANDOM_ATTEMPTS": 0}, repo=AlwaysTaken())
    res = app.test_client().post("/slugs/unique", json={"text": "x", "table": "posts"})
    assert res.status_code == 409


@pytest.mark.parametrize("path", ["/slugs", "/slugs/unique"])
def test_non_object_body_is_400(client, path):
    res = client.post(path, json=["x"])
    assert res.status_code == 400
    assert res.get_json()["ok"] is False


def test_generate_unique_rejects_empty_separator(client):
    res = client.post("/slugs/unique", json={"text": "a b", "table": "posts", "separator": ""})
    assert res.status_code == 400
    assert res.get_json()["ok"] is False
