"""
HUB Service Entrypoint

FastAPI application for the Hosted Hub API: server/service CRUD and the
health-check proxy used by the dashboard.
"""
from fastapi import FastAPI
import logging

from hub.api import servers, services, healthcheck
from hub.database import init_db

logger = logging.getLogger(__name__)

app = FastAPI(title="Hosted Hub API")

app.include_router(servers.router)
app.include_router(services.router)
app.include_router(healthcheck.router)


@app.on_event("startup")
def startup_init():
    """Initialize database (schema, migrations, optional sample data)"""
    init_db()
    logger.info("HUB service startup complete")


@app.get("/")
def root():
    return {
        "service": "hub",
        "message": "Hosted Hub API running",
    }
