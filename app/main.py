import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.admin import auth, dashboard
from app.api.admin import businesses as admin_businesses
from app.api.admin import categories as admin_categories
from app.api.admin import cities as admin_cities
from app.api.admin import offers as admin_offers
from app.api.admin import reviews as admin_reviews
from app.api.public import businesses, categories, cities, offers, site
from app.core.config import settings
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

translator = Translator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_ON_STARTUP:
        from app.db.base import Base
        from app.db.seed import run_seed
        from app.db.session import engine

        Base.metadata.create_all(bind=engine)
        run_seed()
    yield


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Delini API",
        version="1.0",
        description="Local business directory API with JWT admin authentication",
        routes=app.routes,
    )
    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "BearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        }
    }
    for path, operations in openapi_schema["paths"].items():
        if not path.startswith("/api/admin") or path == "/api/admin/login":
            continue
        for operation in operations.values():
            operation["security"] = [{"BearerAuth": []}]
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app = FastAPI(title="Delini API", version="1.0", lifespan=lifespan)

@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    lang = get_lang_from_request(request)
    if exc.status_code == 401:
        return ResponseHandler.unauthorized(message=translator.t("unauthorized", lang))
    if exc.status_code == 404:
        return ResponseHandler.not_found(message=translator.t("not_found", lang), error={"detail": exc.detail})
    return ResponseHandler.bad_request(
        message=translator.t("something_went_wrong", lang),
        error={"detail": exc.detail},
        code=exc.status_code,
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    lang = get_lang_from_request(request)
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    return ResponseHandler.bad_request(
        message=first.get("msg") or translator.t("validation_error", lang),
        error={"field": field or None, "errors": errors},
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.openapi = custom_openapi

# Public directory
app.include_router(cities.router)
app.include_router(categories.router)
app.include_router(businesses.router)
app.include_router(offers.router)
app.include_router(site.router)

# Admin back-office
app.include_router(auth.router)
app.include_router(admin_categories.router)
app.include_router(admin_cities.router)
app.include_router(admin_businesses.router)
app.include_router(admin_offers.router)
app.include_router(admin_reviews.router)
app.include_router(dashboard.router)
