from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from api import router as api_router
import swagger
import logging
import os


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SWAGGER_UI_DIR = os.getenv("SWAGGER_UI_DIR", "static/swagger-ui")
SWAGGER_PREFIX = os.getenv("SWAGGER_PREFIX", "/swagger")
SWAGGER_DOC_URL = os.getenv("SWAGGER_DOC_URL", "http://localhost:8080/swagger/doc.json")
# Set this variable to any non-empty value to turn the docs off.
SWAGGER_DISABLE_ENV = "SWAGGER_DISABLE"


app = FastAPI(
    title="Swagger Example API",
    version="1.0",
    description="This is a sample server Petstore server.",
    terms_of_service="http://swagger.io/terms/",
    contact={
        "name": "API Support",
        "url": "http://www.swagger.io/support",
        "email": "support@swagger.io",
    },
    license_info={
        "name": "Apache 2.0",
        "url": "http://www.apache.org/licenses/LICENSE-2.0.html",
    },
    # The bundled FastAPI docs would clash with the Swagger UI routes below.
    docs_url=None,
    redoc_url=None,
)

# CORS Configuration - Allow same-origin by default, customize for production
allowed_origins = os.getenv("CORS_ORIGINS", "*").split(",")
if allowed_origins == ["*"]:
    logger.warning(
        "CORS is set to allow all origins (*). "
        "Set CORS_ORIGINS environment variable to restrict origins in production."
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
    max_age=600,
)


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    return response


app.include_router(api_router, prefix="/v2")

swagger.registry.register(swagger.OpenAPIDoc(app))

# Configure the swagger UI page.
swagger_ui = swagger.disabling_handler(
    swagger.StaticAssets(directory=SWAGGER_UI_DIR, check_dir=False),
    SWAGGER_DISABLE_ENV,
    swagger.url(SWAGGER_DOC_URL),  # The url pointing to API definition.
    swagger.deep_linking(True),
    swagger.prefix(SWAGGER_PREFIX),
)
# Register on http://localhost:8080/swagger
# and http://localhost:8080/swagger/index.html, *.js, *.css and e.t.c.
swagger.register(app, swagger_ui, SWAGGER_PREFIX)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(
        {"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
    )
