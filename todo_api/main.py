import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from todo_api import config
from todo_api.database import check_connection, dispose_engine, init_models
from todo_api.errors import register_error_handlers
from todo_api.routers import todo_router, user_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/users"


@asynccontextmanager
async def lifespan(app: FastAPI):
    config.configure_logging()
    try:
        await check_connection()
    except Exception:
        # refuse to serve requests against a backend we cannot reach
        logger.critical("Cannot connect to the database; aborting startup", exc_info=True)
        raise
    if config.CREATE_TABLES:
        await init_models()
    logger.info("%s started", app.title)
    yield
    await dispose_engine()


def create_app(*routers: APIRouter, title: str) -> FastAPI:
    app = FastAPI(title=title, lifespan=lifespan)
    register_error_handlers(app)
    for router in routers:
        app.include_router(router, prefix=API_PREFIX)
    return app


app = create_app(user_router.router, todo_router.router, title="Todo API")


# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}
