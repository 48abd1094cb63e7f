"""
Shared test configuration and fixtures
"""
import os

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ.pop("SWAGGER_DISABLE", None)
os.environ["SWAGGER_UI_DIR"] = "static/swagger-ui"

from swagger import StaticAssets, register, registry

BUNDLE = {
    "index.html": "<html>bundled index</html>",
    "swagger-ui.css": ".swagger-ui { color: #3b4151; }",
    "swagger-ui-bundle.js": "var SwaggerUIBundle = function() {};",
    "swagger-ui-standalone-preset.js": "var SwaggerUIStandalonePreset = {};",
    "favicon-16x16.png": "png",
}

DOC = '{"swagger": "2.0", "info": {"title": "Swagger Example API"}}'


@pytest.fixture
def assets_dir(tmp_path):
    """A fake Swagger UI bundle on disk"""
    for name, content in BUNDLE.items():
        (tmp_path / name).write_text(content)
    return tmp_path


@pytest.fixture
def assets(assets_dir):
    return StaticAssets(directory=str(assets_dir))


@pytest.fixture
def empty_registry(monkeypatch):
    """Start without registered documents, restore the real ones afterwards"""
    monkeypatch.setattr(registry, "_docs", {})


@pytest.fixture
def registered_doc(empty_registry):
    registry.register(registry.StaticDoc(DOC))
    return DOC


@pytest.fixture
def make_client():
    """Build a client for an app serving `endpoint` under `prefix`"""

    def _make_client(endpoint, prefix="/swagger"):
        app = FastAPI(docs_url=None, redoc_url=None)
        register(app, endpoint, prefix)
        return TestClient(app)

    return _make_client
