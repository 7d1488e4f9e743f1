"""Application entry point for the DietHub API.

Defines the FastAPI app, middleware and exception handlers, and includes
the API routers from the `api` package. The `lifespan` handler creates the
tables and seeds sample recipes on startup.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from database import init_db
from core.config import APP_TITLE, APP_VERSION, CORS_ORIGINS, HOST, PORT
from core.logger import get_logger
from core.error_handlers import register_exception_handlers
from api.health import router as health_router
from api.recipes import router as recipes_router
from api.health_profiles import router as health_profiles_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: initialize resources before serving requests."""
    init_db()
    logger.info("%s %s started", APP_TITLE, APP_VERSION)
    yield


app = FastAPI(title=APP_TITLE, version=APP_VERSION, lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


app.include_router(health_router)
app.include_router(recipes_router)
app.include_router(health_profiles_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=HOST, port=PORT, reload=True)
