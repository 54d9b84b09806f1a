import pytest
from fastapi.testclient import TestClient

from appender.config import Settings
from appender.main import create_app


@pytest.fixture
def files_dir(tmp_path):
    d = tmp_path / "files"
    d.mkdir()
    (d / "a.txt").write_text("")
    (d / "b.txt").write_text("existing\n")
    return d


@pytest.fixture
def settings(tmp_path, files_dir):
    return Settings(files_dir=files_dir, static_dir=tmp_path / "static")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
