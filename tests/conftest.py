import pytest
from fastapi.testclient import TestClient

from staticsite.config import Settings
from staticsite.main import create_app

INDEX_HTML = b"<!DOCTYPE html>\n<html><body><h1>Home</h1></body></html>\n"


@pytest.fixture
def site_dir(tmp_path):
    """A root dir with index.html and an empty public/."""
    (tmp_path / "index.html").write_bytes(INDEX_HTML)
    (tmp_path / "public").mkdir()
    return tmp_path


@pytest.fixture
def make_client():
    def _make(root_dir, **overrides):
        settings = Settings(root_dir=str(root_dir), _env_file=None, **overrides)
        return TestClient(create_app(settings))

    return _make


@pytest.fixture
def client(site_dir, make_client):
    return make_client(site_dir)
