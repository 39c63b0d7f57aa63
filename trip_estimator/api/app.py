"""
FastAPI application factory.

* Registers routes for trips and admin.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI

from trip_estimator.api.routes import admin, trips
from trip_estimator.config import settings

logging.basicConfig(level=settings.log_level.upper())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Trip Cost Estimator API",
        description=(
            "Estimates multi-day trip costs from per-day expenses, a vehicle "
            "fuel model and optional activities, and keeps an append-only "
            "history log of saved trips."
        ),
        version="1.0.0",
    )

    # Routers
    app.include_router(trips.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
