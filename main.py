import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from database import init_db
from api.giveaways import router as giveaways_router
from api.giveaways_public import claim_page_router, router as giveaways_public_router
from api.loan_page import settings_router as loan_page_settings_router, widgets_router as loan_page_widgets_router
from api.loan_products import router as loan_products_router
from api.media import router as media_router
from api.site_settings import router as site_settings_router
from api.zip_codes import router as zip_codes_router
from utils.responses import failure

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("%s started", settings.app_name)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Content, lead-generation and giveaway API for the mortgage marketing site",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=failure(str(exc.detail)), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        err = errors[0]
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        message = f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))
    return JSONResponse(status_code=400, content=failure(message))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=failure("Internal server error"))


# Public giveaway routes first: /api/giveaways/public and /claim must not fall to the admin router
app.include_router(giveaways_public_router)
app.include_router(claim_page_router)
app.include_router(giveaways_router)
app.include_router(loan_products_router)
app.include_router(loan_page_widgets_router)
app.include_router(loan_page_settings_router)
app.include_router(site_settings_router)
app.include_router(media_router)
app.include_router(zip_codes_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
