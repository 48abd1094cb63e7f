"""
Tests for the API document registry
"""
import json

import pytest
from fastapi import FastAPI

from swagger import registry
from swagger.registry import (
    DocAlreadyRegisteredError,
    DocNotRegisteredError,
    OpenAPIDoc,
    RegistryError,
    StaticDoc,
)


@pytest.mark.usefixtures("empty_registry")
class TestRegistry:
    def test_read_registered_doc(self):
        registry.register(StaticDoc('{"swagger": "2.0"}'))
        assert registry.read_doc() == '{"swagger": "2.0"}'

    def test_named_docs_are_separate(self):
        registry.register(StaticDoc("default"))
        registry.register(StaticDoc("admin"), name="admin")
        assert registry.read_doc() == "default"
        assert registry.read_doc("admin") == "admin"

    def test_read_unregistered_doc(self):
        with pytest.raises(DocNotRegisteredError) as exc_info:
            registry.read_doc()
        assert exc_info.value.name == "swagger"
        assert isinstance(exc_info.value, RegistryError)

    def test_register_twice(self):
        registry.register(StaticDoc("first"))
        with pytest.raises(DocAlreadyRegisteredError):
            registry.register(StaticDoc("second"))
        assert registry.read_doc() == "first"

    def test_doc_is_read_on_every_call(self):
        doc = StaticDoc("v1")
        registry.register(doc)
        doc.text = "v2"
        assert registry.read_doc() == "v2"


class TestOpenAPIDoc:
    def test_serializes_app_schema(self):
        app = FastAPI(title="Swagger Example API", version="1.0")

        @app.get("/pets/{pet_id}")
        def get_pet(pet_id: int):
            return {"id": pet_id}

        schema = json.loads(OpenAPIDoc(app).read_doc())
        assert schema["info"]["title"] == "Swagger Example API"
        assert "/pets/{pet_id}" in schema["paths"]
