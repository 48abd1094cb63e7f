from typing import Callable, Protocol

from pydantic import BaseModel


class Config(BaseModel):
    """
    Swagger UI settings rendered into the index page.

    Unset fields are zero values, so a whole `Config` used as a configurator
    clears whatever it leaves out. The handler starts from `DEFAULTS`.
    """

    # The URL pointing to the API definition (normally swagger.json or swagger.yaml).
    url: str = ""
    # The prefix the UI is registered on. It can be "." too.
    prefix: str = ""
    font_cdn: str = ""
    deep_linking: bool = False
    # list, full or none; passed to the page as is.
    doc_expansion: str = ""
    dom_id: str = ""
    # Tag filtering
    filter: bool = False

    def configure(self, config: "Config") -> None:
        """
        Overwrite `config` with this one. The font CDN is left alone.
        """
        config.url = self.url
        config.prefix = self.prefix
        config.deep_linking = self.deep_linking
        config.doc_expansion = self.doc_expansion
        config.dom_id = self.dom_id
        config.filter = self.filter


class Configurator(Protocol):
    def configure(self, config: Config) -> None: ...


class ConfiguratorFunc:
    """Configurator backed by a plain function."""

    def __init__(self, fn: Callable[[Config], None]):
        self.fn = fn

    def configure(self, config: Config) -> None:
        self.fn(config)


def url(url: str) -> ConfiguratorFunc:
    def apply(c: Config):
        c.url = url

    return ConfiguratorFunc(apply)


def prefix(prefix: str) -> ConfiguratorFunc:
    def apply(c: Config):
        c.prefix = prefix

    return ConfiguratorFunc(apply)


def font_cdn(cdn: str) -> ConfiguratorFunc:
    cdn = cdn.removesuffix("/")

    def apply(c: Config):
        c.font_cdn = cdn

    return ConfiguratorFunc(apply)


def doc_expansion(doc_expansion: str) -> ConfiguratorFunc:
    def apply(c: Config):
        c.doc_expansion = doc_expansion

    return ConfiguratorFunc(apply)


def dom_id(dom_id: str) -> ConfiguratorFunc:
    def apply(c: Config):
        c.dom_id = dom_id

    return ConfiguratorFunc(apply)


def deep_linking(deep_linking: bool) -> ConfiguratorFunc:
    def apply(c: Config):
        c.deep_linking = deep_linking

    return ConfiguratorFunc(apply)


def filter_enabled(enabled: bool) -> ConfiguratorFunc:
    def apply(c: Config):
        c.filter = enabled

    return ConfiguratorFunc(apply)


def build_config(defaults: Config, *configurators: Configurator) -> Config:
    """
    Apply configurators in order over a copy of `defaults`.
    Later configurators win when they touch the same field.
    """
    config = defaults.model_copy()
    for c in configurators:
        c.configure(config)
    return config


def is_relative(prefix: str) -> bool:
    return prefix in ("", ".")


DEFAULTS = Config(
    url="doc.json",
    prefix="/swagger",
    font_cdn="https://fonts.googleapis.com",
    deep_linking=True,
    doc_expansion="list",
    dom_id="#swagger-ui",
    filter=True,
)
