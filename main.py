from fastapi import FastAPI, Request
from api.schedule import router as schedule_router
from api.healthcheck import router as healthcheck_router
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from fastapi.openapi.utils import get_openapi
from config import settings
from utils.logger import logger
import secrets

API_KEY_HEADER = "x-api-key"
HEALTH_PATH = "/api/health/check"

# Paths reachable without the API key
PUBLIC_EXACT = {"/", "/openapi.json", "/redoc", "/docs", HEALTH_PATH}
PUBLIC_PREFIXES = ("/docs/", HEALTH_PATH)

app = FastAPI(title="Meeting Scheduler API")

if settings.ENABLE_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)


def is_public(path: str) -> bool:
    return path in PUBLIC_EXACT or any(path.startswith(p) for p in PUBLIC_PREFIXES)


# reject oversized bodies before they are parsed
@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    limit = settings.MAX_BODY_BYTES
    length = request.headers.get("content-length")
    if limit > 0 and length and length.isdigit() and int(length) > limit:
        return JSONResponse(status_code=413, content={"detail": "Payload too large"})
    return await call_next(request)


@app.middleware("http")
async def api_key_guard(request: Request, call_next):
    if request.method == "OPTIONS" or is_public(request.url.path):
        return await call_next(request)

    if not settings.API_KEY:
        logger.warning("API_KEY not set; API key auth is DISABLED (dev mode).")
        return await call_next(request)

    client_key = request.headers.get(API_KEY_HEADER)
    if not client_key or not secrets.compare_digest(str(client_key), str(settings.API_KEY)):
        return JSONResponse(status_code=401, content={"detail": "Unauthorized"})

    return await call_next(request)


def custom_openapi():
    """OpenAPI schema with the API key scheme applied to every non-public route."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description="Schedule meetings on dates under unary and binary date constraints.",
        routes=app.routes,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})[
        "ApiKeyAuth"
    ] = {
        "type": "apiKey",
        "in": "header",
        "name": API_KEY_HEADER,
        "description": "Enter your API key",
    }

    for path, methods in schema.get("paths", {}).items():
        for op in methods.values():
            op["security"] = [] if is_public(path) else [{"ApiKeyAuth": []}]

    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi

# Register routers
app.include_router(schedule_router, prefix="/api")
app.include_router(healthcheck_router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Meeting Scheduler API is running. Visit /docs for the Swagger UI."}
