"""Payments API entrypoint: FastAPI app with CRUD routes over a single payments table."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payments_api.app.api import payments
from payments_api.app.core.errors import register_error_handlers
from payments_api.app.core.log_config import configure_logging
from payments_api.app.core.settings import get_settings
from payments_api.app.db.init_db import init_db
from payments_api.app.db.session import engine

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "HEAD", "PUT", "DELETE", "PATCH"],
    allow_headers=["Origin", "Content-Type", "Accept"],
)

register_error_handlers(app)
app.include_router(payments.router, prefix=settings.api_prefix)


@app.get("/")
def read_root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def migrate_schema():
    init_db(engine)
    logger.info("%s %s ready (%s)", settings.app_name, settings.api_version, settings.environment)


def run():
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
