"""
In-memory registry of API description documents.

Documents are registered once, usually at import time of the application
module, and read on every request to `{prefix}/doc.json`.
"""
import json
import logging
import threading
from typing import Protocol

from fastapi import FastAPI

logger = logging.getLogger(__name__)

DEFAULT_NAME = "swagger"


class RegistryError(Exception):
    pass


class DocNotRegisteredError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"no document registered as {name!r}")
        self.name = name


class DocAlreadyRegisteredError(RegistryError):
    def __init__(self, name: str):
        super().__init__(f"register called twice for document {name!r}")
        self.name = name


class Doc(Protocol):
    def read_doc(self) -> str: ...


class StaticDoc:
    """A document that never changes."""

    def __init__(self, text: str):
        self.text = text

    def read_doc(self) -> str:
        return self.text


class OpenAPIDoc:
    """
    The OpenAPI schema FastAPI generates for `app`, as JSON.
    FastAPI caches the schema after the first call.
    """

    def __init__(self, app: FastAPI):
        self.app = app

    def read_doc(self) -> str:
        return json.dumps(self.app.openapi())


_lock = threading.Lock()
_docs: dict[str, Doc] = {}


def register(doc: Doc, name: str = DEFAULT_NAME) -> None:
    with _lock:
        if name in _docs:
            raise DocAlreadyRegisteredError(name)
        _docs[name] = doc
    logger.info(f"Registered API document {name!r}")


def read_doc(name: str = DEFAULT_NAME) -> str:
    with _lock:
        doc = _docs.get(name)
    if doc is None:
        raise DocNotRegisteredError(name)
    return doc.read_doc()
