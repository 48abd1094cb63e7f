import logging
import os
from collections.abc import Mapping
from typing import Awaitable, Callable, Optional, Union

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.responses import Response
from fastapi.templating import Jinja2Templates

from .assets import StaticAssets, asset_path
from .config import DEFAULTS, Configurator, build_config, is_relative
from .registry import read_doc

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]

INDEX_TEMPLATE = "swagger_index.html"

templates = Jinja2Templates(
    directory=os.path.join(os.path.dirname(__file__), "templates")
)

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript",
    ".json": "application/json",
}


def content_type_for(path: str) -> Optional[str]:
    """
    Content type forced for `path`, picked from the suffix of its last segment.
    """
    idx = path.rfind(".")
    if idx <= 0 or "/" in path[idx:]:
        return None
    return CONTENT_TYPES.get(path[idx:])


def trim_prefix(path: str, prefix: str) -> str:
    if prefix == "." or not path.startswith(prefix):
        return path
    return path[len(prefix):]


def handler(
    assets: StaticAssets,
    *configurators: Configurator,
    doc: Callable[[], str] = read_doc,
) -> Endpoint:
    """
    Build the endpoint serving Swagger UI from `assets`.

    Register it for both `{prefix}` and `{prefix}/{any:path}`, see `register`:

        swagger_ui = handler(
            StaticAssets(directory="static/swagger-ui"),
            url("http://localhost:8080/swagger/doc.json"),
            deep_linking(True),
            prefix("/swagger"),
        )
        register(app, swagger_ui, "/swagger")

    A whole `Config` works as a configurator too. It overwrites every field
    but the font CDN, so fields it leaves out become empty or false:

        swagger_ui = handler(assets, Config(url=..., prefix=..., dom_id=...))
    """
    config = build_config(DEFAULTS, *configurators)

    if is_relative(config.prefix):
        # Relative files; the descriptor keeps its own prefix.
        config.prefix = "."
        delegate = assets
    else:
        delegate = assets.with_prefix(config.prefix)
    static_files = delegate.files()

    async def swagger_handler(request: Request) -> Response:
        path = trim_prefix(request.url.path, config.prefix)
        content_type = content_type_for(path)

        if path in ("", "/", "/index.html"):
            try:
                return templates.TemplateResponse(
                    request, INDEX_TEMPLATE, config.model_dump()
                )
            except Exception as e:
                logger.error(f"swagger: {e}")
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
                ) from e

        if path == "/doc.json":
            try:
                body = doc()
            except Exception as e:
                logger.error(f"swagger: {e}")
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
                ) from e
            return Response(body, media_type=content_type)

        relative = asset_path(request.url.path, delegate.prefix)
        if relative is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        response = await static_files.get_response(relative, request.scope)
        if content_type:
            response.headers["content-type"] = content_type
        return response

    return swagger_handler


def disabling_handler(
    assets: StaticAssets,
    env_name: str,
    *configurators: Configurator,
    environ: Optional[Mapping[str, str]] = None,
    doc: Callable[[], str] = read_doc,
) -> Endpoint:
    """
    Like `handler`, but answers 404 everywhere when `env_name` is set to a
    non-empty value. The variable is read once, here.
    """
    if environ is None:
        environ = os.environ
    if environ.get(env_name, ""):
        logger.info(f"swagger: disabled by {env_name}")

        async def not_found(request: Request) -> Response:
            # Same answer as an unregistered route.
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

        return not_found

    return handler(assets, *configurators, doc=doc)


def register(
    router: Union[FastAPI, APIRouter], endpoint: Endpoint, prefix: str = "/swagger"
) -> None:
    """
    Route `GET {prefix}` and `GET {prefix}/{any:path}` to `endpoint`.

    FastAPI serves its own docs at `/docs` and `/redoc` unless the app is
    created with `docs_url=None, redoc_url=None`; those routes win over a
    Swagger UI registered on the same prefix.
    """
    if is_relative(prefix):
        prefix = ""
    else:
        router.add_api_route(
            prefix, endpoint, methods=["GET"], include_in_schema=False
        )
    router.add_api_route(
        prefix + "/{any:path}", endpoint, methods=["GET"], include_in_schema=False
    )
