from .assets import StaticAssets
from .config import (
    DEFAULTS,
    Config,
    Configurator,
    ConfiguratorFunc,
    build_config,
    deep_linking,
    doc_expansion,
    dom_id,
    filter_enabled,
    font_cdn,
    prefix,
    url,
)
from .routing import disabling_handler, handler, register
from .registry import OpenAPIDoc, StaticDoc, read_doc

__all__ = [
    "Config",
    "DEFAULTS",
    "Configurator",
    "ConfiguratorFunc",
    "OpenAPIDoc",
    "StaticAssets",
    "StaticDoc",
    "build_config",
    "deep_linking",
    "disabling_handler",
    "doc_expansion",
    "dom_id",
    "filter_enabled",
    "font_cdn",
    "handler",
    "prefix",
    "read_doc",
    "register",
    "url",
]
