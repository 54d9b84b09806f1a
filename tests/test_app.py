from fastapi.testclient import TestClient

from appender.config import Settings
from appender.main import create_app


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_index_lists_files(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "a.txt" in resp.text
    assert "b.txt" in resp.text
    assert 'name="file"' in resp.text
    assert 'name="text"' in resp.text


def test_index_skips_directories(client, files_dir):
    (files_dir / "subdir").mkdir()
    resp = client.get("/")
    assert resp.status_code == 200
    assert "subdir" not in resp.text


def test_index_escapes_names(client, files_dir):
    (files_dir / "<b>.txt").write_text("")
    resp = client.get("/")
    assert "&lt;b&gt;.txt" in resp.text
    assert "<b>.txt" not in resp.text


def test_index_missing_files_dir(tmp_path):
    settings = Settings(files_dir=tmp_path / "nope", static_dir=tmp_path / "static")
    with TestClient(create_app(settings)) as c:
        resp = c.get("/")
    assert resp.status_code == 200
    assert "<option" not in resp.text


def test_index_missing_template(tmp_path, files_dir):
    settings = Settings(
        files_dir=files_dir,
        static_dir=tmp_path / "static",
        template_path=tmp_path / "missing.html",
    )
    with TestClient(create_app(settings)) as c:
        resp = c.get("/")
    assert resp.status_code == 500
    assert resp.text == "Unable to load template"


def test_static_asset(client, settings):
    (settings.static_dir / "style.css").write_text("body { color: red; }")
    resp = client.get("/static/style.css")
    assert resp.status_code == 200
    assert resp.text == "body { color: red; }"


def test_static_missing(client):
    resp = client.get("/static/nothing.css")
    assert resp.status_code == 404


def test_app_has_no_shared_state(tmp_path):
    first = create_app(Settings(files_dir=tmp_path / "one", static_dir=tmp_path / "s1"))
    second = create_app(Settings(files_dir=tmp_path / "two", static_dir=tmp_path / "s2"))
    assert first.state.settings.files_dir != second.state.settings.files_dir


def test_index_lists_only_appendable_links(client, files_dir, tmp_path):
    outside = tmp_path / "outside.txt"
    outside.write_text("")
    (files_dir / "escape.txt").symlink_to(outside)
    resp = client.get("/")
    assert resp.status_code == 200
    assert "escape.txt" not in resp.text
