from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.core.config import settings
from biztime.core.db import init_db, open_gateway
from biztime.core.errors import NotFoundError, error_body

# Routers
from biztime.routes import companies, invoices, system

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ==========================
# Lifespan: one gateway per process
# ==========================
@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.db = open_gateway(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    init_db(app.state.db)
    logger.info("BizTime API is running")
    yield
    app.state.db.close()
    logger.info("Database connections closed")


app = FastAPI(
    title="BizTime API",
    version="1.0.0",
    lifespan=lifespan,
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==========================
# Exception handlers
# ==========================
@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.info("%s %s -> %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status, content=error_body(exc.message, exc.status))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), exc.status_code),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=422, content=error_body("Invalid request", 422))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Constraint violations land here too and stay opaque to the caller
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body("Internal Server Error", 500))


# ==========================
# Routers
# ==========================
app.include_router(system.router, prefix="/system", tags=["system"])
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])


# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "system": "/system/health",
            "companies": "/companies",
            "invoices": "/invoices",
        },
    }
