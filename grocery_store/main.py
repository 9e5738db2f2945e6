# grocery_store/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grocery_store.api import include_routers, install_exception_handlers
from grocery_store.data import models  # noqa: F401  rejestracja tabel w Base.metadata
from grocery_store.data.database import Base, SessionLocal, engine
from grocery_store.data.seed import seed_sample_data
from grocery_store.utils.logging import RequestLoggingMiddleware, get_logger, setup_logging
from grocery_store.utils.settings import APP_HOST, APP_PORT, CORS_ORIGINS, SEED_SAMPLE_DATA

setup_logging()
logger = get_logger(__name__)


def init_db() -> None:
    logger.info(f"Inicjalizacja bazy, tabele: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)

    if SEED_SAMPLE_DATA:
        db = SessionLocal()
        try:
            if seed_sample_data(db):
                logger.info("Przykladowe dane zaladowane")
        finally:
            db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Grocery Store API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_exception_handlers(app)
    include_routers(app)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
